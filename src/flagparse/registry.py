"""Option registry: ordered option definitions, lookup and help rendering."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from flagparse.config import resolve_help_layout
from flagparse.errors import ConfigurationError
from flagparse.helpers import pad, to_camel_case


@dataclass(frozen=True)
class OptionDef:
    """One registered option. Empty ``argument`` means a boolean switch."""

    short_name: str | None
    long_name: str = ""
    argument: str = ""
    help_text: str = ""

    @property
    def takes_value(self) -> bool:
        return bool(self.argument)

    @property
    def property_name(self) -> str:
        """Result key: camel-cased long name, else the short name."""
        return to_camel_case(self.long_name or self.short_name or "")

    @property
    def short_flag(self) -> str:
        return f"-{self.short_name}"

    @property
    def long_flag(self) -> str:
        return f"--{self.long_name}"


class OptionRegistry:
    """Option definitions in registration order. First match wins on lookup."""

    def __init__(self) -> None:
        self._options: list[OptionDef] = []

    def __len__(self) -> int:
        return len(self._options)

    def __iter__(self) -> Iterator[OptionDef]:
        return iter(self._options)

    def register(
        self,
        short_name: str | None,
        long_name: str | None = None,
        argument: str | None = None,
        help_text: str = "",
    ) -> OptionRegistry:
        """Append an option definition. Returns self for chained calls.

        Raises ConfigurationError if short_name is given but is not a single character.
        An empty short_name is treated like None: no short flag, and help shows a blank
        slot rather than a bare "-".
        No duplicate detection is done; a later definition with a colliding name is
        only reachable where the earlier one does not match.
        """
        if short_name and len(short_name) != 1:
            msg = f"Short option must be a string of length 1, got {short_name!r}"
            raise ConfigurationError(msg)
        self._options.append(
            OptionDef(
                short_name=short_name or None,
                long_name=long_name or "",
                argument=argument or "",
                help_text=help_text or "",
            )
        )
        return self

    def find_short(self, name: str) -> OptionDef | None:
        for opt in self._options:
            if opt.short_name is not None and opt.short_name == name:
                return opt
        return None

    def find_long(self, token: str) -> OptionDef | None:
        """Match ``name`` exactly or ``name=...``.

        Definitions without a long name never match, so a bare "--" (or "--=x") is unknown
        instead of resolving to the first short-only definition. This is a deliberate
        behaviour change from matching against an empty long name.
        """
        for opt in self._options:
            name = opt.long_name
            if not name:
                continue
            if token == name or (
                token.startswith(name) and token[len(name) : len(name) + 1] == "="
            ):
                return opt
        return None

    def render_help(self, layout: dict[str, Any] | None = None) -> str:
        """Help text, one line per option in registration order, help texts aligned in a column."""
        cfg = resolve_help_layout(layout)
        rows: list[tuple[str, str]] = []
        for opt in self._options:
            flags = " " + (opt.short_flag if opt.short_name is not None else "  ")
            if opt.long_name:
                flags += " " + opt.long_flag
            if opt.argument:
                flags += " " + opt.argument
            rows.append((flags, opt.help_text))
        width = max((len(flags) for flags, _ in rows), default=0) + cfg["column_gap"]
        return "\n".join(pad(flags, width) + help_text for flags, help_text in rows)
