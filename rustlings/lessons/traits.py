"""Appending "Bar" to text and to lists of text."""

from __future__ import annotations

from functools import singledispatch


@singledispatch
def append_bar(value: object) -> object:
    """Return ``value`` with "Bar" appended."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]