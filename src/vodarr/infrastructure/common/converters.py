"""Type conversion utilities."""

from __future__ import annotations

from typing import Any


def to_page_count(raw: Any, default: int = 1) -> int:
    """Convert an upstream ``pagecount`` value to a positive int.

    Handles various formats:
        - None → default
        - 7 → 7
        - 7.0 → 7
        - "7" → 7
        - " 7 " → 7
        - 0, -3, "abc", True → default

    Args:
        raw: Value taken verbatim from the upstream JSON.
        default: Fallback for absent or invalid values.

    Returns:
        Page count (>= 1).
    """
    # bool is an int subclass, but never a meaningful page count
    if raw is None or isinstance(raw, bool):
        return default

    value: int | None = None
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, float):
        if raw.is_integer():
            value = int(raw)
    elif isinstance(raw, str):
        txt = raw.strip()
        if txt.isdigit():
            value = int(txt)

    if value is None or value < 1:
        return default
    return value


def to_text(raw: Any) -> str:
    """Convert a scalar JSON value to ``str``; None → ``""``."""
    if raw is None:
        return ""
    if isinstance(raw, str):
        return raw
    return str(raw)
