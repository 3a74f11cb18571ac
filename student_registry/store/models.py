"""Data models for the store module."""

from dataclasses import dataclass
from enum import Enum

__all__ = ["StudentRecord", "LookupOutcome", "format_record"]


class LookupOutcome(str, Enum):
    """Result of a keyed delete/update: whether a matching id was found."""
    FOUND     = "found"
    NOT_FOUND = "not_found"

    def __bool__(self) -> bool:
        return self is LookupOutcome.FOUND


@dataclass
class StudentRecord:
    """
    One row of the legacy record store.

    Fields
    ──────
    student_id — caller-supplied lookup key (uniqueness not enforced)
    name       — full name, overwritten by update
    score      — single-precision academic score
    """
    student_id: int
    name:       str
    score:      float

    def __str__(self) -> str:
        return format_record(self.student_id, self.name, self.score)


def format_record(student_id: int, name: str, score: float) -> str:
    """Render one listing line: ``ID: 1001, Name: John Smith, Score: 3.750000``."""
    return f"ID: {student_id}, Name: {name}, Score: {score:f}"
