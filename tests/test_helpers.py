"""Tests for flagparse.helpers (camel case, padding)."""

from flagparse.helpers import pad, to_camel_case


class TestToCamelCase:
    def test_kebab_case(self) -> None:
        assert to_camel_case("dry-run") == "dryRun"
        assert to_camel_case("max-line-length") == "maxLineLength"

    def test_snake_case_and_spaces(self) -> None:
        assert to_camel_case("dry_run") == "dryRun"
        assert to_camel_case("dry run") == "dryRun"

    def test_repeated_separators_collapse(self) -> None:
        assert to_camel_case("dry--run") == "dryRun"

    def test_single_word_unchanged(self) -> None:
        assert to_camel_case("verbose") == "verbose"
        assert to_camel_case("x") == "x"
        assert to_camel_case("V") == "V"

    def test_empty(self) -> None:
        assert to_camel_case("") == ""
        assert to_camel_case("-") == ""


class TestPad:
    def test_pads_right(self) -> None:
        assert pad("-v", 5) == "-v   "

    def test_truncates(self) -> None:
        assert pad("--verbose", 4) == "--ve"

    def test_exact_width(self) -> None:
        assert pad("abc", 3) == "abc"

    def test_zero_width(self) -> None:
        assert pad("abc", 0) == ""
