"""A greeting that behaves differently with and without an argument."""

from __future__ import annotations


def my_macro(*args: object) -> None:
    """Print a fixed message, or a message showing the one value given."""
    match args:
        case ():
            print("Check out my macro!")
        case (value,):
            print(f"Look at this other macro: {value}")
        case _:
            raise TypeError(f"my_macro takes at most one argument, got {len(args)}")