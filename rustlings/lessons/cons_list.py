"""A cons list: each cell holds a value and the rest of the list."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Nil:
    """The empty list."""

    def __iter__(self) -> Iterator[Any]:
        return iter(())


@dataclass(frozen=True)
class Cons:
    """A value followed by the rest of the list."""

    head: Any
    tail: Cons | Nil

    def __iter__(self) -> Iterator[Any]:
        node: Cons | Nil = self
        while isinstance(node, Cons):
            yield node.head
            node = node.tail


def create_empty_list() -> Nil:
    return Nil()


def create_non_empty_list() -> Cons:
    return Cons(1, Cons(2, Cons(3, Nil())))