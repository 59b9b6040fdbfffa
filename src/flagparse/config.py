"""Help layout configuration (gap between the flags column and the help text)."""

from __future__ import annotations

from typing import Any

DEFAULT_HELP_LAYOUT: dict[str, Any] = {
    "column_gap": 2,
}


def resolve_help_layout(layout: dict[str, Any] | None) -> dict[str, Any]:
    """Return layout dict with defaults filled. Unknown keys are dropped."""
    out = dict(DEFAULT_HELP_LAYOUT)
    if layout is None:
        return out
    out.update({k: v for k, v in layout.items() if k in out})
    out["column_gap"] = int(out["column_gap"])
    return out
