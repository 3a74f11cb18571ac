"""
RecordStore — the legacy in-memory student record store.

Usage::

    store = RecordStore()
    store.insert(1001, "John Smith", 3.75)
    store.update(1001, "John Smith", 3.8)
    if not store.delete(1002):
        ...  # LookupOutcome.NOT_FOUND, nothing removed
    for line in store.list_all():
        print(line)

Records are kept in insertion order in a plain list. There is no index:
delete and update scan linearly and act on the first matching id only.
"""

import logging
from dataclasses import replace

from student_registry.exceptions import DuplicateStudentError
from student_registry.store.models import LookupOutcome, StudentRecord

__all__ = ["RecordStore"]

logger = logging.getLogger(__name__)


class RecordStore:
    """
    Ordered collection of StudentRecord objects.

    Not thread-safe: a scan followed by a mutation is not atomic, so callers
    sharing a store across threads must lock around every call.
    """

    def __init__(self, enforce_unique_ids: bool = False) -> None:
        self._records: list[StudentRecord] = []
        self._enforce_unique_ids = enforce_unique_ids

    # ── Internal helpers ──────────────────────────────────────────────────

    def _find_index(self, student_id: int) -> int:
        """Index of the first record with *student_id*, or -1."""
        for index, record in enumerate(self._records):
            if record.student_id == student_id:
                return index
        return -1

    # ── Public API ────────────────────────────────────────────────────────

    def insert(self, student_id: int, name: str, score: float) -> StudentRecord:
        """
        Append a new record to the end of the store.

        Duplicate ids are accepted and coexist, unless the store was built
        with enforce_unique_ids=True.

        Raises:
            DuplicateStudentError: unique ids enforced and *student_id* exists.
        """
        if self._enforce_unique_ids and self._find_index(student_id) >= 0:
            logger.info("Rejected duplicate student ID %d", student_id)
            raise DuplicateStudentError(student_id)

        record = StudentRecord(student_id=student_id, name=name, score=score)
        self._records.append(record)
        logger.info("Added student with ID %d", student_id)
        return replace(record)

    def delete(self, student_id: int) -> LookupOutcome:
        """
        Remove the first record whose id matches *student_id*.

        Returns:
            LookupOutcome.FOUND if a record was removed,
            LookupOutcome.NOT_FOUND if the store was left unchanged.
        """
        index = self._find_index(student_id)
        if index < 0:
            logger.info("Student with ID %d not found", student_id)
            return LookupOutcome.NOT_FOUND

        del self._records[index]
        logger.info("Removed student with ID %d", student_id)
        return LookupOutcome.FOUND

    def update(self, student_id: int, name: str, score: float) -> LookupOutcome:
        """
        Overwrite name and score of the first record matching *student_id*.

        The record keeps its position in the store.
        """
        index = self._find_index(student_id)
        if index < 0:
            logger.info("Student with ID %d not found", student_id)
            return LookupOutcome.NOT_FOUND

        record = self._records[index]
        record.name = name
        record.score = score
        logger.info("Updated student with ID %d", student_id)
        return LookupOutcome.FOUND

    def count(self) -> int:
        """Number of records currently held."""
        return len(self._records)

    def list_all(self) -> list[str]:
        """One formatted line per record, in storage order."""
        return [str(record) for record in self._records]

    def __len__(self) -> int:
        return self.count()
