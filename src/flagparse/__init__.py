"""POSIX/GNU-style command line option parser.

Handles -a, -abc, -a value, -avalue, --opt value and --opt=value.
"""

from flagparse.errors import (
    ConfigurationError,
    FlagParseError,
    MissingValueError,
    ParseError,
    UnknownOptionError,
)
from flagparse.helpers import pad, to_camel_case
from flagparse.parser import Parser, parse_args
from flagparse.registry import OptionDef, OptionRegistry

__all__ = [
    "ConfigurationError",
    "FlagParseError",
    "MissingValueError",
    "OptionDef",
    "OptionRegistry",
    "ParseError",
    "Parser",
    "UnknownOptionError",
    "pad",
    "parse_args",
    "to_camel_case",
]
