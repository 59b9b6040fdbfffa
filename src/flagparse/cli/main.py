"""Example command for flagparse: flagparse-demo -v --size 123 -p 45678."""

from __future__ import annotations

import logging
import os
import sys

from flagparse import ParseError, Parser


def build_parser() -> Parser:
    return (
        Parser()
        .add_option("s", "size", "SIZE", "Sets the size to SIZE")
        .add_option("p", "pid", "PID", "Kill the process with the PID")
        .add_option("v", "verbose", None, "Verbosely do something")
        .add_option("h", "help", None, "Show help")
    )


def main(argv: list[str] | None = None) -> int:
    """Parse argv (default sys.argv[1:]) and report what was found. Returns the exit code."""
    if os.environ.get("FLAGPARSE_DEBUG"):
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    args = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()
    try:
        options = parser.parse(args)
    except ParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Usage: flagparse-demo [options] [args...]", file=sys.stderr)
        print(parser.help(), file=sys.stderr)
        return 1

    if options.get("help"):
        print("Usage: flagparse-demo [options] [args...]")
        print(parser.help())
        return 0

    if "size" in options:
        print(f"Set size to {options['size']}")
    if "pid" in options:
        print(f"Kill process {options['pid']}")
    if options.get("verbose"):
        print("Verbose!")
    if not options:
        print("Run with -h/--help to see available options")
    if args:
        print("Remaining arguments: " + " ".join(args))
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
