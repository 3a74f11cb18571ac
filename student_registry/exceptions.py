"""
Project-wide custom exception hierarchy.
All modules raise subclasses of RegistryBaseError — never bare Exception.

Not-found on delete/update is deliberately absent: it is reported through
LookupOutcome and the log, never raised.
"""

__all__ = [
    "RegistryBaseError",
    "StoreError",
    "DuplicateStudentError",
    "DirectoryError",
    "UnknownDirectoryKindError",
    "ConfigError",
]


class RegistryBaseError(Exception):
    """Root exception for all student-registry errors."""


# ── Store ─────────────────────────────────────────────────────────────────────

class StoreError(RegistryBaseError):
    """Raised when the record store rejects an operation."""


class DuplicateStudentError(StoreError):
    """Raised on insert of an existing id when unique ids are enforced."""

    def __init__(self, student_id: int) -> None:
        super().__init__(f"Student with ID {student_id} already exists")
        self.student_id = student_id


# ── Directory ─────────────────────────────────────────────────────────────────

class DirectoryError(RegistryBaseError):
    """Base class for directory construction / selection errors."""


class UnknownDirectoryKindError(DirectoryError):
    """Raised when get_directory() is asked for an unregistered kind."""


# ── Config ────────────────────────────────────────────────────────────────────

class ConfigError(RegistryBaseError):
    """Raised when an environment setting cannot be parsed."""
