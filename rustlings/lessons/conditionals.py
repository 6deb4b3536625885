"""Conditionals: picking the larger number and mapping words."""


def bigger(a: int, b: int) -> int:
    return a if a > b else b


def fizz_if_foo(fizzish: str) -> str:
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"