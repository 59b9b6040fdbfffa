"""Errors raised while registering options or parsing an argument list."""

from __future__ import annotations


class FlagParseError(Exception):
    """Base class for all flagparse errors."""


class ConfigurationError(FlagParseError, ValueError):
    """An option definition is malformed (raised eagerly at registration)."""


class ParseError(FlagParseError):
    """Malformed invocation. ``option`` holds the flag text the user typed."""

    def __init__(self, option: str, message: str) -> None:
        super().__init__(message)
        self.option = option


class UnknownOptionError(ParseError):
    def __init__(self, option: str) -> None:
        msg = f"Unknown option: {option}"
        super().__init__(option, msg)


class MissingValueError(ParseError):
    def __init__(self, option: str) -> None:
        msg = f"{option} option requires a value."
        super().__init__(option, msg)
