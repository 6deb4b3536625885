"""Collections: fruit baskets and simple lists."""

from __future__ import annotations

import enum
from collections.abc import Iterable, MutableMapping


class Fruit(enum.Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket() -> dict[str, int]:
    """A basket of at least three kinds and five pieces of fruit."""
    return {"banana": 2, "apple": 3, "mango": 4}


def fill_fruit_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add one of every fruit kind missing from the basket, leaving the rest."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed sequence and a growable list holding the same elements."""
    fixed = (10, 20, 30, 40)
    return fixed, list(fixed)


def vec_loop(v: Iterable[int]) -> list[int]:
    """Every number doubled."""
    return [x * 2 for x in v]