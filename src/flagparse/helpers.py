"""Shared string helpers for flagparse (case conversion, column padding).

Used by registry (help rendering) and parser (result keys).
"""

from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[-_\s]+")

# --- Text ---


def to_camel_case(name: str) -> str:
    """Convert kebab-case, snake_case or spaced words to camelCase (e.g. dry-run -> dryRun)."""
    words = [w for w in _SEPARATORS.split(name) if w]
    if not words:
        return ""
    head, *tail = words
    return head + "".join(w[0].upper() + w[1:] for w in tail)


def pad(text: str, width: int) -> str:
    """Left-justify text in a field of width spaces; longer text is cut to width."""
    if width <= 0:
        return ""
    return text[:width].ljust(width)
