"""Comparing floats with a margin and adding optional values."""

from __future__ import annotations

ERROR_MARGIN = 0.00001


def floats_differ(x: float, y: float) -> bool:
    """Whether two floats differ by more than the error margin."""
    return abs(y - x) > ERROR_MARGIN


def add_optional(res: int, option: int | None) -> int:
    """``res`` plus ``option`` when there is one."""
    if option is not None:
        res += option
    return res