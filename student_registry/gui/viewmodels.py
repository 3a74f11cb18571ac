"""
GUI ViewModels — pure-Python state containers.

No Qt imports here; every class is testable without a display.
The Qt window reads these objects and redraws itself after each action.

Public API
──────────
StudentRow            — one parsed listing line
parse_listing_line    — listing line → StudentRow
parse_student_form    — raw form text → (id, name, gpa)
StudentTableViewModel — table rows, filter, selection, add/update/remove
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from student_registry.client.client import DirectoryClient
from student_registry.exceptions import RegistryBaseError

__all__ = [
    "StudentRow",
    "parse_listing_line",
    "parse_student_form",
    "StudentTableViewModel",
]

logger = logging.getLogger(__name__)

# Name is greedy and spans newlines so any str name still parses.
_LINE_RE = re.compile(
    r"ID: (?P<id>-?\d+), Name: (?P<name>.*), Score: (?P<score>\S+)", re.DOTALL
)


@dataclass
class StudentRow:
    """One row of the student table."""
    student_id: int
    name:       str
    score:      str

    def __str__(self) -> str:
        return f"{self.student_id} {self.name} ({self.score})"


def parse_listing_line(line: str) -> StudentRow:
    """
    Parse ``ID: 1001, Name: John Smith, Score: 3.750000``.

    Raises:
        ValueError: *line* is not in the listing format.
    """
    match = _LINE_RE.fullmatch(line)
    if match is None:
        raise ValueError(f"Unrecognised listing line: {line!r}")
    return StudentRow(
        student_id=int(match.group("id")),
        name=match.group("name"),
        score=match.group("score"),
    )


def parse_student_form(id_text: str, name: str, gpa_text: str) -> tuple[int, str, float]:
    """
    Validate the add/update form fields.

    Raises:
        ValueError: id is not an integer, name is blank, or gpa is not a number.
    """
    try:
        student_id = int(id_text.strip())
    except ValueError:
        raise ValueError(f"Student ID must be an integer, got {id_text!r}") from None
    name = name.strip()
    if not name:
        raise ValueError("Name must not be empty")
    try:
        gpa = float(gpa_text.strip())
    except ValueError:
        raise ValueError(f"Grade must be a number, got {gpa_text!r}") from None
    return student_id, name, gpa


class StudentTableViewModel:
    """
    Drives the student table through a DirectoryClient.

    Attributes
    ──────────
    rows           — parsed directory listing (set by refresh)
    total          — directory count at the last refresh
    filter_text    — substring matched against names (case-insensitive)
    selected_id    — id of the highlighted row, or None
    status_message — result of the last action, shown in the status bar
    visible_rows   — derived: rows matching filter_text
    """

    def __init__(self, client: DirectoryClient) -> None:
        self._client = client
        self.rows:           list[StudentRow] = []
        self.total:          int              = 0
        self.filter_text:    str              = ""
        self.selected_id:    Optional[int]    = None
        self.status_message: str              = ""
        self.refresh()

    def refresh(self) -> None:
        """Re-read count then listing from the directory."""
        directory = self._client.directory
        self.total = directory.get_total_students()
        self.rows = [parse_listing_line(line) for line in directory.get_all_students_info()]
        if self.selected_id is not None and all(r.student_id != self.selected_id for r in self.rows):
            self.selected_id = None

    @property
    def visible_rows(self) -> list[StudentRow]:
        """Return rows whose name contains filter_text (case-insensitive)."""
        if not self.filter_text:
            return list(self.rows)
        q = self.filter_text.lower()
        return [r for r in self.rows if q in r.name.lower()]

    def select(self, student_id: Optional[int]) -> None:
        self.selected_id = student_id

    # ── Actions ────────────────────────────────────────────────────────────

    def add(self, student_id: int, name: str, gpa: float) -> bool:
        """Register a student; False (with status_message) if the store refused."""
        try:
            self._client.register_new_student(student_id, name, gpa)
        except RegistryBaseError as exc:
            logger.info("Add rejected: %s", exc)
            self.status_message = f"Error: {exc}"
            return False
        self.status_message = f"Added student {student_id}"
        self.refresh()
        return True

    def update(self, student_id: int, name: str, gpa: float) -> bool:
        if not self._client.update_student_details(student_id, name, gpa):
            self.status_message = f"Student {student_id} not found"
            return False
        self.status_message = f"Updated student {student_id}"
        self.refresh()
        return True

    def remove(self, student_id: int) -> bool:
        if not self._client.remove_student(student_id):
            self.status_message = f"Student {student_id} not found"
            return False
        self.status_message = f"Removed student {student_id}"
        self.refresh()
        return True
