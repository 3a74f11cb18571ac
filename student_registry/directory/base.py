"""Abstract base class for all student directories."""

from abc import ABC, abstractmethod

from student_registry.store.models import LookupOutcome

__all__ = ["ModernStudentDirectory"]


class ModernStudentDirectory(ABC):
    """
    The contract client code is written against.

    Grades are double-precision Python floats. Every implementation keeps
    records in insertion order and acts on the first matching id for
    removal and update; not-found is reported as LookupOutcome.NOT_FOUND,
    never raised.
    """

    @abstractmethod
    def add_student(self, student_id: int, name: str, gpa: float) -> None:
        """Register a new student at the end of the directory."""

    @abstractmethod
    def remove_student(self, student_id: int) -> LookupOutcome:
        """Remove the first student with *student_id*."""

    @abstractmethod
    def update_student_details(self, student_id: int, name: str, gpa: float) -> LookupOutcome:
        """Replace name and grade of the first student with *student_id*."""

    @abstractmethod
    def get_all_students_info(self) -> list[str]:
        """
        One ``ID: …, Name: …, Score: …`` line per student, in directory order.
        """

    @abstractmethod
    def get_total_students(self) -> int:
        """Number of students currently held."""
