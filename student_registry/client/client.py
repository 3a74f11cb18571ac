"""
DirectoryClient — consumer code that only knows ModernStudentDirectory.

The client is bound to one directory at construction and never rebinds;
it does not own the directory.
"""

import logging
import sys
from typing import Optional, TextIO

from student_registry.directory.base import ModernStudentDirectory
from student_registry.store.models import LookupOutcome

__all__ = ["DirectoryClient"]

logger = logging.getLogger(__name__)


class DirectoryClient:
    """Consumer bound to one directory; forwards writes and prints listings."""

    def __init__(self, directory: ModernStudentDirectory, out: Optional[TextIO] = None) -> None:
        self._directory = directory
        self._out = out

    @property
    def directory(self) -> ModernStudentDirectory:
        """The directory this client was bound to."""
        return self._directory

    def register_new_student(self, student_id: int, name: str, gpa: float) -> None:
        self._directory.add_student(student_id, name, gpa)

    def remove_student(self, student_id: int) -> LookupOutcome:
        return self._directory.remove_student(student_id)

    def update_student_details(self, student_id: int, name: str, gpa: float) -> LookupOutcome:
        return self._directory.update_student_details(student_id, name, gpa)

    def display_all_students(self) -> None:
        """Print ``Total Students: N`` followed by every listing line."""
        # Resolved per call so pytest's capsys sees the swapped stdout.
        out = self._out or sys.stdout
        total = self._directory.get_total_students()
        print(f"Total Students: {total}", file=out)
        for info in self._directory.get_all_students_info():
            print(info, file=out)
