"""Quizzes: apple prices, a string transformer and report cards."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable


def calculate_price_of_apples(quantity: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    if quantity > 40:
        return quantity
    return quantity * 2


class _Kind(enum.Enum):
    UPPERCASE = "uppercase"
    TRIM = "trim"
    APPEND = "append"


@dataclass(frozen=True)
class Command:
    """What to do to a string: upper-case it, trim it, or append "bar" some times."""

    kind: _Kind
    times: int = 0

    def __post_init__(self) -> None:
        if self.times < 0:
            raise ValueError("times must not be negative")
        if self.kind is not _Kind.APPEND and self.times:
            raise ValueError("only an append command takes a count")

    @classmethod
    def uppercase(cls) -> Command:
        return cls(_Kind.UPPERCASE)

    @classmethod
    def trim(cls) -> Command:
        return cls(_Kind.TRIM)

    @classmethod
    def append(cls, times: int) -> Command:
        return cls(_Kind.APPEND, times)

    def apply(self, text: str) -> str:
        """The result of this command on ``text``."""
        match self.kind:
            case _Kind.UPPERCASE:
                return text.upper()
            case _Kind.TRIM:
                return text.strip()
            case _Kind.APPEND:
                return text + "bar" * self.times
        raise AssertionError(f"unhandled command {self.kind}")


def transformer(commands: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""
    return [command.apply(text) for text, command in commands]


def _format_grade(grade: float | str) -> str:
    if isinstance(grade, float) and grade.is_integer():
        return str(int(grade))
    return str(grade)


@dataclass
class ReportCard:
    """A student's grade, numeric or alphabetic."""

    grade: float | str
    student_name: str
    student_age: int

    def print(self) -> str:
        """The report card as one line of text."""
        return (
            f"{self.student_name} ({self.student_age}) - achieved a grade of "
            f"{_format_grade(self.grade)}"
        )