"""Small functions: calling, looping, sale prices and squares."""

from __future__ import annotations


def call_me(num: int | None = None) -> None:
    """Announce the call, or ring ``num`` times."""
    if num is None:
        print("You called me")
        return
    for call in range(1, num + 1):
        print(f"Ring! Call number {call}")


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Ten off an even price, three off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num