"""Variables: bindings, reassignment, shadowing and constants."""

from __future__ import annotations

NUMBER = 3

_NUMBER_WORDS = (
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
)


def describe_value(x: object) -> str:
    return f"x has the value {x}"


def check_ten(x: int) -> str:
    return "Ten!" if x == 10 else "Not ten!"


def reassigned_numbers(first: int = 3, second: int = 5) -> list[str]:
    """The lines shown for a binding before and after it is reassigned."""
    lines = []
    x = first
    lines.append(f"Number {x}")
    x = second
    lines.append(f"Number {x}")
    return lines


def _spell(number: int) -> str:
    try:
        word = _NUMBER_WORDS[number] if number >= 0 else None
    except IndexError:
        word = None
    if word is None:
        raise ValueError(f"no spelling known for {number}")
    return "-".join(word.upper())


def spell_and_add(number: int = NUMBER) -> tuple[str, str]:
    """Spell a number letter by letter, then show it plus two."""
    spelled = _spell(number)
    return (
        f"Spell a Number : {spelled}",
        f"Number plus two is : {number + 2}",
    )