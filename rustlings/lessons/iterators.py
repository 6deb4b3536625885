"""Iterators: walking collections, capitalising words, dividing and counting."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Iterator, Mapping

_U64_MAX = 2**64 - 1
_FAVOURITE_FRUITS = ("banana", "custard apple", "avocado", "peach", "raspberry")
_DIVIDENDS = (27, 297, 38502, 81)
_DIVISOR = 27


def favourite_fruits() -> Iterator[str]:
    """An iterator over a fixed list of favourite fruits, in order."""
    return iter(_FAVOURITE_FRUITS)


def capitalize_first(text: str) -> str:
    """``text`` with its first character in upper case."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Every word with its first character capitalised."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """The capitalised words joined into one string."""
    return "".join(capitalize_words_vector(words))


class DivisionError(ArithmeticError):
    """A division that does not give a whole result."""


class NotDivisibleError(DivisionError):
    """The dividend is not evenly divisible by the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not evenly divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivideByZeroError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(DivideByZeroError)


def divide(a: int, b: int) -> int:
    """``a`` divided by ``b`` when ``b`` divides ``a`` evenly."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(dividend=a, divisor=b)
    return a // b


def result_with_list() -> list[int]:
    """All quotients, or the first division error raised."""
    return [divide(n, _DIVISOR) for n in _DIVIDENDS]


def _divide_or_error(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as err:
        return err


def list_of_results() -> list[int | DivisionError]:
    """Each quotient, or the error its division produced."""
    return [_divide_or_error(n, _DIVISOR) for n in _DIVIDENDS]


def factorial(num: int) -> int:
    """The factorial of ``num``, within 64-bit unsigned range."""
    if num < 0:
        raise ValueError("factorial is defined for non-negative numbers only")
    if num < 3:
        return num
    result = math.prod(range(3, num + 1), start=2)
    if result > _U64_MAX:
        raise OverflowError("factorial does not fit in a 64-bit unsigned integer")
    return result


class Progress(enum.Enum):
    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Number of exercises with the given progress, counted with a loop."""
    count = 0
    for progress in progress_map.values():
        if progress == value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Number of exercises with the given progress."""
    return sum(1 for progress in progress_map.values() if progress == value)


def count_collection_for(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Number of exercises with the given progress across maps, counted with loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Number of exercises with the given progress across maps."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)