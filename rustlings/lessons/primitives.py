"""Primitive types: booleans, characters, arrays, slices and tuples."""

from __future__ import annotations

import math
import unicodedata
from collections.abc import Sequence
from typing import Any


def greetings(is_morning: bool, is_evening: bool) -> list[str]:
    """The greetings that fit the time of day."""
    lines = []
    if is_morning:
        lines.append("Good morning!")
    if is_evening:
        lines.append("Good evening!")
    return lines


def classify_char(c: str) -> str:
    """Say whether a single character is alphabetic, numeric or neither."""
    if len(c) != 1:
        raise ValueError("expected exactly one character")
    if c.isalpha():
        return "Alphabetical!"
    if unicodedata.category(c).startswith("N"):
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def array_size_message(items: Sequence[Any]) -> str:
    if len(items) >= 100:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def nice_slice(items: Sequence[Any]) -> list[Any]:
    """The second through fourth items."""
    if len(items) < 4:
        raise IndexError("range end index 4 out of range")
    return list(items[1:4])


def _display(value: object) -> str:
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def describe_cat(cat: tuple[str, float]) -> str:
    name, age = cat
    return f"{name} is {_display(age)} years old."


def second(numbers: Sequence[Any]) -> Any:
    """The second element of a tuple or sequence."""
    return numbers[1]