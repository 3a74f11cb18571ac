"""
gui — PyQt6 front-end for the student directory.

Public API
──────────
MainWindow   — top-level application window (imports PyQt6)
viewmodels   — pure-Python state containers, no Qt needed

MainWindow is imported lazily so the view models stay usable without PyQt6.
"""

from student_registry.gui import viewmodels

__all__ = ["MainWindow", "viewmodels"]


def __getattr__(name):
    if name == "MainWindow":
        from student_registry.gui.main_window import MainWindow
        return MainWindow
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
