"""
InMemoryStudentDirectory — a ModernStudentDirectory with no legacy store.

Keeps grades at full double precision. Ordering, first-match and not-found
rules are the same as the adapter's, so the two are interchangeable behind
the directory contract; only the rendered score digits can differ.
"""

import logging

from student_registry.directory.base import ModernStudentDirectory
from student_registry.exceptions import DuplicateStudentError
from student_registry.store.models import LookupOutcome, StudentRecord

__all__ = ["InMemoryStudentDirectory"]

logger = logging.getLogger(__name__)


class InMemoryStudentDirectory(ModernStudentDirectory):
    """List-backed directory holding StudentRecord objects with double grades."""

    def __init__(self, enforce_unique_ids: bool = False) -> None:
        self._students: list[StudentRecord] = []
        self._enforce_unique_ids = enforce_unique_ids

    def _find_index(self, student_id: int) -> int:
        """Index of the first student with *student_id*, or -1."""
        for index, student in enumerate(self._students):
            if student.student_id == student_id:
                return index
        return -1

    def add_student(self, student_id: int, name: str, gpa: float) -> None:
        if self._enforce_unique_ids and self._find_index(student_id) >= 0:
            raise DuplicateStudentError(student_id)
        self._students.append(StudentRecord(student_id=student_id, name=name, score=float(gpa)))
        logger.info("Added student with ID %d", student_id)

    def remove_student(self, student_id: int) -> LookupOutcome:
        index = self._find_index(student_id)
        if index < 0:
            logger.info("Student with ID %d not found", student_id)
            return LookupOutcome.NOT_FOUND
        del self._students[index]
        logger.info("Removed student with ID %d", student_id)
        return LookupOutcome.FOUND

    def update_student_details(self, student_id: int, name: str, gpa: float) -> LookupOutcome:
        index = self._find_index(student_id)
        if index < 0:
            logger.info("Student with ID %d not found", student_id)
            return LookupOutcome.NOT_FOUND
        student = self._students[index]
        student.name = name
        student.score = float(gpa)
        logger.info("Updated student with ID %d", student_id)
        return LookupOutcome.FOUND

    def get_all_students_info(self) -> list[str]:
        return [str(s) for s in self._students]

    def get_total_students(self) -> int:
        return len(self._students)
