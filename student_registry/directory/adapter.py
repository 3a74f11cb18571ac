"""
DirectoryAdapter — presents the legacy RecordStore as a ModernStudentDirectory.

Every call maps one-to-one onto a store call. The only translation is the
grade type: the directory speaks double precision, the store holds single
precision, so gpa is narrowed on both write paths (add and update).
"""

import logging

from student_registry.directory.base import ModernStudentDirectory
from student_registry.directory.conversion import narrow_to_float32
from student_registry.store.memory import RecordStore
from student_registry.store.models import LookupOutcome

__all__ = ["DirectoryAdapter"]

logger = logging.getLogger(__name__)


class DirectoryAdapter(ModernStudentDirectory):
    """
    Owns exactly one RecordStore, created here and never shared.

    Store errors (DuplicateStudentError in strict mode) propagate unchanged.
    """

    def __init__(self, enforce_unique_ids: bool = False) -> None:
        self._store = RecordStore(enforce_unique_ids=enforce_unique_ids)

    def add_student(self, student_id: int, name: str, gpa: float) -> None:
        """Narrow *gpa* to single precision, then insert."""
        score = narrow_to_float32(gpa)
        self._store.insert(student_id, name, score)

    def remove_student(self, student_id: int) -> LookupOutcome:
        """Delete the first record with *student_id*."""
        return self._store.delete(student_id)

    def update_student_details(self, student_id: int, name: str, gpa: float) -> LookupOutcome:
        """Narrow *gpa* to single precision, then update in place."""
        score = narrow_to_float32(gpa)
        return self._store.update(student_id, name, score)

    def get_all_students_info(self) -> list[str]:
        """The store listing, unchanged."""
        return self._store.list_all()

    def get_total_students(self) -> int:
        """The store record count."""
        return self._store.count()
