"""Quiz solutions: apple pricing, a string transformer and report cards."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


def calculate_price_of_apples(num: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    return num if num > 40 else num * 2


class Action(Enum):
    UPPERCASE = "uppercase"
    TRIM = "trim"
    APPEND = "append"


@dataclass(frozen=True)
class Command:
    """An operation applied to a string by :func:`transformer`."""

    action: Action
    times: int = 0

    @classmethod
    def uppercase(cls) -> Command:
        return cls(Action.UPPERCASE)

    @classmethod
    def trim(cls) -> Command:
        return cls(Action.TRIM)

    @classmethod
    def append(cls, times: int) -> Command:
        if times < 0:
            raise ValueError("append count must not be negative")
        return cls(Action.APPEND, times)


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string and return the results in order."""
    results = []
    for text, command in items:
        match command.action:
            case Action.UPPERCASE:
                results.append(text.upper())
            case Action.TRIM:
                results.append(text.strip())
            case Action.APPEND:
                results.append(text + "bar" * command.times)
    return results


@dataclass
class ReportCard:
    """A report card whose grade may be numeric or alphabetical."""

    grade: float | str
    student_name: str
    student_age: int

    def print(self) -> str:
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"