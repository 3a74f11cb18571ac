"""
cli — command-line interface for student-registry.

Entry points
────────────
  python -m student_registry   (via student_registry/__main__.py)
  student-registry             (via pyproject.toml [project.scripts])

Subcommands: demo | list-kinds | gui
"""

from student_registry.cli.main import build_parser, cmd_demo, cmd_list_kinds, main

__all__ = ["build_parser", "cmd_demo", "cmd_list_kinds", "main"]
