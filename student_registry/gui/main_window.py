"""
MainWindow — student table over any ModernStudentDirectory.

Layout
──────
  ┌──────────────────────────────────────────┐
  │ Filter: [________________________________]│
  │ ┌───────────────────────────────────────┐│
  │ │ ID   │ Name          │ Score          ││
  │ │ 1001 │ John Smith    │ 3.750000       ││
  │ └───────────────────────────────────────┘│
  │ ID [____] Name [__________] Grade [____] │
  │                 [Add] [Update] [Remove]  │
  │ Total Students: 1                        │
  └──────────────────────────────────────────┘
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from student_registry.client.client import DirectoryClient
from student_registry.directory.base import ModernStudentDirectory
from student_registry.directory.factory import get_directory
from student_registry.gui.viewmodels import StudentTableViewModel, parse_student_form

__all__ = ["MainWindow"]

logger = logging.getLogger(__name__)

# Column indices
_COL_ID    = 0
_COL_NAME  = 1
_COL_SCORE = 2
_HEADERS = ["ID", "Name", "Score"]


class MainWindow(QMainWindow):
    """Root window: table, filter box and the add/update/remove form."""

    def __init__(
        self,
        directory: Optional[ModernStudentDirectory] = None,
        parent: QWidget = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Student Management System")
        self.resize(560, 420)

        self._client = DirectoryClient(directory or get_directory())
        self._vm = StudentTableViewModel(self._client)

        self._build_ui()
        self._refresh_table()

    # ── UI construction ────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)

        filter_row = QHBoxLayout()
        filter_row.addWidget(QLabel("Filter:"))
        self._filter_edit = QLineEdit()
        self._filter_edit.setPlaceholderText("Filter by name…")
        self._filter_edit.textChanged.connect(self._on_filter_changed)
        filter_row.addWidget(self._filter_edit)
        layout.addLayout(filter_row)

        self._table = QTableWidget(0, len(_HEADERS))
        self._table.setHorizontalHeaderLabels(_HEADERS)
        self._table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self._table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        self._table.horizontalHeader().setStretchLastSection(True)
        self._table.itemSelectionChanged.connect(self._on_selection_changed)
        layout.addWidget(self._table)

        form_row = QHBoxLayout()
        self._id_edit    = QLineEdit()
        self._name_edit  = QLineEdit()
        self._grade_edit = QLineEdit()
        for label, edit in (("ID", self._id_edit), ("Name", self._name_edit), ("Grade", self._grade_edit)):
            form_row.addWidget(QLabel(label))
            form_row.addWidget(edit)
        layout.addLayout(form_row)

        btn_row = QHBoxLayout()
        btn_row.addStretch()
        self._add_btn    = QPushButton("Add")
        self._update_btn = QPushButton("Update")
        self._remove_btn = QPushButton("Remove")
        self._add_btn.clicked.connect(self._on_add_clicked)
        self._update_btn.clicked.connect(self._on_update_clicked)
        self._remove_btn.clicked.connect(self._on_remove_clicked)
        for btn in (self._add_btn, self._update_btn, self._remove_btn):
            btn_row.addWidget(btn)
        layout.addLayout(btn_row)

        self._total_label = QLabel()
        layout.addWidget(self._total_label)

        self.setCentralWidget(central)

    # ── Slots ──────────────────────────────────────────────────────────────

    def _on_filter_changed(self, text: str) -> None:
        self._vm.filter_text = text
        self._refresh_table()

    def _on_selection_changed(self) -> None:
        items = self._table.selectedItems()
        if not items:
            return
        row = items[0].row()
        self._id_edit.setText(self._table.item(row, _COL_ID).text())
        self._name_edit.setText(self._table.item(row, _COL_NAME).text())
        self._grade_edit.setText(self._table.item(row, _COL_SCORE).text())
        self._vm.select(int(self._id_edit.text()))

    def _read_form(self):
        try:
            return parse_student_form(
                self._id_edit.text(), self._name_edit.text(), self._grade_edit.text()
            )
        except ValueError as exc:
            self._show_status(str(exc))
            return None

    def _on_add_clicked(self) -> None:
        form = self._read_form()
        if form is not None:
            self._vm.add(*form)
            self._after_action()

    def _on_update_clicked(self) -> None:
        form = self._read_form()
        if form is not None:
            self._vm.update(*form)
            self._after_action()

    def _on_remove_clicked(self) -> None:
        try:
            student_id = int(self._id_edit.text().strip())
        except ValueError:
            self._show_status("Student ID must be an integer")
            return
        self._vm.remove(student_id)
        self._after_action()

    def _after_action(self) -> None:
        self._show_status(self._vm.status_message)
        self._refresh_table()

    def _show_status(self, message: str) -> None:
        logger.debug("status: %s", message)
        self.statusBar().showMessage(message, 5000)

    def _refresh_table(self) -> None:
        rows = self._vm.visible_rows
        self._table.setRowCount(len(rows))
        for row, student in enumerate(rows):
            self._table.setItem(row, _COL_ID,    QTableWidgetItem(str(student.student_id)))
            self._table.setItem(row, _COL_NAME,  QTableWidgetItem(student.name))
            self._table.setItem(row, _COL_SCORE, QTableWidgetItem(student.score))
        self._total_label.setText(f"Total Students: {self._vm.total}")

    # ── Public API ─────────────────────────────────────────────────────────

    @property
    def view_model(self) -> StudentTableViewModel:
        return self._vm
