"""Optional values: unwrapping, filling tables and draining stacks."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


def print_number(maybe_number: int | None) -> None:
    """Print a number that must be present."""
    if maybe_number is None:
        raise ValueError("called print_number without a number")
    print(f"printing: {maybe_number}")


def number_table() -> list[int]:
    """Five numbers computed from their positions."""
    return [((i * 1235) + 2) // (4 * 16) for i in range(5)]


def describe_word(optional_word: str | None) -> str:
    if optional_word is not None:
        return f"The word is: {optional_word}"
    return "The optional word doesn't contain anything"


def drain_values(values: list[int | None]) -> Iterator[int]:
    """Pop values off the end of ``values`` until it is empty or a None is popped."""
    while values:
        value = values.pop()
        if value is None:
            return
        yield value


@dataclass(frozen=True)
class Point:
    x: int
    y: int


def describe_point(point: Point | None) -> str:
    if point is None:
        return "no match"
    return f"Co-ordinates are {point.x},{point.y} "