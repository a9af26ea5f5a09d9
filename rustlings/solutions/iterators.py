"""Iterator exercises: capitalising, dividing, factorials and counting."""

from __future__ import annotations

import enum
import math
from typing import Iterable, Mapping

_U64_MAX = (1 << 64) - 1


def capitalize_first(text: str) -> str:
    """``text`` with its first character in upper case."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Each word with its first character in upper case."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """The capitalised words joined into one string."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """A division that could not be done exactly."""


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, NotDivisibleError)
            and (other.dividend, other.divisor) == (self.dividend, self.divisor)
        )

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, DivideByZeroError)

    def __hash__(self) -> int:
        return hash(DivideByZeroError)


def divide(a: int, b: int) -> int:
    """``a`` divided by ``b`` when it divides evenly; raise DivisionError otherwise."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


_NUMBERS = (27, 297, 38502, 81)


def result_with_list() -> list[int]:
    """All quotients by 27, or the first division error raised."""
    return [divide(n, 27) for n in _NUMBERS]


def list_of_results() -> list[int | DivisionError]:
    """Each quotient by 27, with a failed division given as its error."""

    def attempt(n: int) -> int | DivisionError:
        try:
            return divide(n, 27)
        except DivisionError as err:
            return err

    return [attempt(n) for n in _NUMBERS]


def factorial(num: int) -> int:
    """``num!`` as an unsigned 64-bit value."""
    if num < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = math.prod(range(2, num + 1))
    if result > _U64_MAX:
        raise OverflowError(f"{num}! does not fit in 64 bits")
    return result


class Progress(enum.Enum):
    """How far an exercise has got."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count entries equal to ``value`` with an explicit loop."""
    count = 0
    for progress in mapping.values():
        if progress == value:
            count += 1
    return count


def count_iterator(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count entries equal to ``value``."""
    return sum(1 for progress in mapping.values() if progress == value)


def count_collection_for(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries equal to ``value`` across several maps, with explicit loops."""
    count = 0
    for mapping in collection:
        for progress in mapping.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries equal to ``value`` across several maps."""
    return sum(count_iterator(mapping, value) for mapping in collection)