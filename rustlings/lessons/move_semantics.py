"""Ownership of lists: filling copies, filling in place and creating new ones."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_FILL = (22, 44, 66)


def fill_vec(vec: Iterable[int]) -> list[int]:
    """A new list holding ``vec`` followed by the fill values."""
    return [*vec, *_FILL]


def fill_vec_in_place(vec: list[int]) -> list[int]:
    """Append the fill values to ``vec`` and return the same list."""
    vec.extend(_FILL)
    return vec


def new_filled_vec() -> list[int]:
    return list(_FILL)


def describe_vec(label: str, vec: Sequence[int]) -> str:
    return f"{label} has length {len(vec)} content `{list(vec)!r}`"


def add_through_references(x: int = 100) -> int:
    """Add 100 and then 1000 to ``x`` through successive borrows."""
    y = x
    y += 100
    z = y
    z += 1000
    return z