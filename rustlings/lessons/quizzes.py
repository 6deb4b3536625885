"""Quiz solutions: apple pricing, string handling, doubling and greetings."""


def calculate_apple_price(quantity: int) -> int:
    """Two per apple, or one per apple when buying more than 40."""
    if quantity <= 40:
        return quantity * 2
    return quantity


def string_slice(arg: str) -> None:
    """Print a borrowed piece of text."""
    print(arg)


def string(arg: str) -> None:
    """Print an owned piece of text."""
    print(arg)


def times_two(num: int) -> int:
    return num * 2


def my_macro(what: object) -> str:
    return f"Hello {what}"