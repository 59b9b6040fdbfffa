"""Pytest fixtures for flagparse tests."""

import pytest

from flagparse import Parser


@pytest.fixture
def parser() -> Parser:
    """Parser with the size/pid/verbose/help options. size and pid take values."""
    return (
        Parser()
        .add_option("s", "size", "SIZE", "Sets the size to SIZE")
        .add_option("p", "pid", "PID", "Kill the process with the PID")
        .add_option("v", "verbose", None, "Verbosely do something")
        .add_option("h", "help", None, "Show help")
    )
