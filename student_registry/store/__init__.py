"""
store — the legacy in-memory student record store.

Public API
──────────
StudentRecord  — dataclass for one stored student
LookupOutcome  — FOUND / NOT_FOUND result of keyed delete/update
RecordStore    — insert, delete, update, count, list_all
format_record  — listing line renderer shared by all directories
"""

from student_registry.store.models import LookupOutcome, StudentRecord, format_record
from student_registry.store.memory import RecordStore

__all__ = ["StudentRecord", "LookupOutcome", "RecordStore", "format_record"]
