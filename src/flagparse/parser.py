"""Parsing engine: consume option tokens from the front of an argument list.

Supported forms::

    -a -b -c         three switches
    -abc             the same switches in one token
    -a value         short option, value from the next token
    -avalue          short option, value glued to the flag
    --option value   long option, value from the next token
    --option=value   long option, value after '='

Parsing stops at the first token that does not start with '-' (or when the list
is empty). Consumed tokens are removed from the caller's list; the rest is left
in place and in order.
"""

from __future__ import annotations

import logging
from typing import Any

from flagparse.errors import MissingValueError, UnknownOptionError
from flagparse.registry import OptionDef, OptionRegistry

log = logging.getLogger(__name__)


def parse_args(
    registry: OptionRegistry,
    args: list[str],
    result: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Parse leading options of args into result (created if None) and return it.

    args is mutated in place. On UnknownOptionError / MissingValueError the failing
    token is left at the front of args; options recorded before it stay in result.

    A value taken from the next token is stored as given, even when it is "" (so
    ``-s ""`` records ``size=""``). Coercing an empty value to True, as some older
    parsers do, is intentionally not carried over.
    """
    if result is None:
        result = {}
    while args:
        token = args[0]
        if not token.startswith("-"):
            break
        if token.startswith("--"):
            _parse_long_option(registry, token[2:], args, result)
        else:
            _parse_short_cluster(registry, token[1:], args, result)
    return result


def _record(result: dict[str, Any], opt: OptionDef, value: str | bool) -> None:
    key = opt.property_name
    log.debug("option %s -> %s=%r", opt.long_flag if opt.long_name else opt.short_flag, key, value)
    result[key] = value


def _parse_short_cluster(
    registry: OptionRegistry,
    cluster: str,
    args: list[str],
    result: dict[str, Any],
) -> None:
    consumed_next = False
    for i, c in enumerate(cluster):
        opt = registry.find_short(c)
        if opt is None:
            raise UnknownOptionError("-" + c)
        if not opt.takes_value:
            _record(result, opt, True)
            continue
        if i == len(cluster) - 1:
            if len(args) < 2:
                raise MissingValueError(opt.short_flag)
            value = args[1]
            consumed_next = True
        else:
            # Rest of the cluster is the value, even if it looks like more flags.
            value = cluster[i + 1 :]
        _record(result, opt, value)
        break
    del args[: 2 if consumed_next else 1]


def _parse_long_option(
    registry: OptionRegistry,
    token: str,
    args: list[str],
    result: dict[str, Any],
) -> None:
    opt = registry.find_long(token)
    if opt is None:
        raise UnknownOptionError("--" + token)
    consumed_next = False
    if not opt.takes_value:
        value: str | bool = True
    elif token == opt.long_name:
        if len(args) < 2:
            raise MissingValueError(opt.long_flag)
        value = args[1]
        consumed_next = True
    else:
        value = token[len(opt.long_name) + 1 :]
        if not value:
            raise MissingValueError(opt.long_flag)
    _record(result, opt, value)
    del args[: 2 if consumed_next else 1]


class Parser:
    """Command line option parser.

    Example::

        parser = Parser()
        parser.add_option("s", "size", "SIZE", "Sets the size to SIZE")
        parser.add_option("v", "verbose", None, "Verbosely do something")
        options = parser.parse(sys.argv[1:], {"size": "10"})
    """

    def __init__(self, registry: OptionRegistry | None = None) -> None:
        self.registry = registry if registry is not None else OptionRegistry()

    def add_option(
        self,
        short_name: str | None,
        long_name: str | None = None,
        argument: str | None = None,
        help_text: str = "",
    ) -> Parser:
        """Register an option (see OptionRegistry.register). Returns self for chaining."""
        self.registry.register(short_name, long_name, argument, help_text)
        return self

    def help(self, layout: dict[str, Any] | None = None) -> str:
        return self.registry.render_help(layout)

    def parse(self, args: list[str], result: dict[str, Any] | None = None) -> dict[str, Any]:
        """Parse options off the front of args. Pass result to supply defaults."""
        return parse_args(self.registry, args, result)
