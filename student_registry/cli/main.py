"""
CLI entry point for student-registry.

Usage
─────
  # Run the add / remove / update walkthrough through the adapter
  python -m student_registry demo

  # Same walkthrough against the double-precision directory
  python -m student_registry demo --kind native

  # Reject duplicate ids
  python -m student_registry demo --unique-ids

  # Keep duplicates even when STUDENT_REGISTRY_UNIQUE_IDS=1
  python -m student_registry demo --no-unique-ids

  # Show registered directory kinds
  python -m student_registry list-kinds

  # Open the PyQt6 window
  python -m student_registry gui

Subcommands are implemented as standalone functions (cmd_demo,
cmd_list_kinds, cmd_gui) so they can be unit-tested without invoking argparse.
"""

import argparse
import logging
import sys
from typing import Optional

from student_registry.client.client import DirectoryClient
from student_registry.config import RegistryConfig
from student_registry.directory.factory import available_kinds, get_directory
from student_registry.exceptions import RegistryBaseError

__all__ = ["build_parser", "cmd_demo", "cmd_list_kinds", "cmd_gui", "main"]

logger = logging.getLogger(__name__)

_DEMO_STUDENTS = [
    (1001, "John Smith",    3.75),
    (1002, "Emily Johnson", 3.92),
    (1003, "Michael Brown", 3.45),
]


# ── Argument parser ────────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    """
    Build and return the top-level argument parser.

    Subcommands: demo | list-kinds | gui
    """
    parser = argparse.ArgumentParser(
        prog="student-registry",
        description="In-memory student records behind a modern directory interface",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Enable verbose debug logging",
    )

    sub = parser.add_subparsers(dest="subcommand")

    for name, help_text in (
        ("demo", "Run the add / remove / update walkthrough"),
        ("gui", "Open the student table window"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument(
            "--kind",
            choices=available_kinds(),
            default=None,
            help="Directory implementation (default: $STUDENT_REGISTRY_KIND or adapter)",
        )
        cmd.add_argument(
            "--unique-ids",
            action=argparse.BooleanOptionalAction,
            default=None,
            dest="unique_ids",
            help="Reject duplicate student ids instead of keeping both "
                 "(default: $STUDENT_REGISTRY_UNIQUE_IDS or off)",
        )

    sub.add_parser("list-kinds", help="List available directory implementations")

    return parser


# ── Helpers ───────────────────────────────────────────────────────────────────


def _config_from_args(ns: argparse.Namespace) -> RegistryConfig:
    """Environment config, with any CLI flags layered on top."""
    config = RegistryConfig.from_env()
    if getattr(ns, "kind", None):
        config.directory_kind = ns.kind
    if getattr(ns, "unique_ids", None) is not None:
        config.enforce_unique_ids = ns.unique_ids
    return config


def _section(title: str) -> None:
    print(f"\n{title}:")
    print("-" * (len(title) + 1))


# ── Command implementations ───────────────────────────────────────────────────


def cmd_demo(config: RegistryConfig) -> DirectoryClient:
    """
    Register three students, then remove 1002 and update 1003,
    printing the directory after each step.

    Returns:
        The client used, so callers can inspect the final directory.
    """
    directory = get_directory(config=config)
    client = DirectoryClient(directory)
    logger.debug("Demo using %s", type(directory).__name__)

    print("Welcome to Student Management System")
    print("====================================")

    for student_id, name, gpa in _DEMO_STUDENTS:
        client.register_new_student(student_id, name, gpa)

    _section("Student Records")
    client.display_all_students()

    print("\nRemoving student with ID 1002...")
    client.remove_student(1002)

    _section("Updated Student Records")
    client.display_all_students()

    print("\nUpdating details for student with ID 1003...")
    client.update_student_details(1003, "Michael Brown Jr.", 3.85)

    _section("Final Student Records")
    client.display_all_students()
    return client


def cmd_list_kinds() -> None:
    """Print each registered directory kind on its own line."""
    for kind in available_kinds():
        print(kind)


def cmd_gui(config: RegistryConfig) -> int:
    """Open the main window; returns the Qt event loop exit code."""
    from PyQt6.QtWidgets import QApplication
    from student_registry.gui.main_window import MainWindow

    app = QApplication.instance() or QApplication(sys.argv)
    window = MainWindow(directory=get_directory(config=config))
    window.show()
    return app.exec()


# ── Entry point ───────────────────────────────────────────────────────────────


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point. Returns exit code."""
    parser = build_parser()
    ns = parser.parse_args(argv)

    level = logging.DEBUG if ns.debug else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")

    if ns.subcommand is None:
        parser.print_help()
        return 0

    if ns.subcommand == "list-kinds":
        cmd_list_kinds()
        return 0

    try:
        config = _config_from_args(ns)
        if ns.subcommand == "demo":
            cmd_demo(config)
            return 0
        if ns.subcommand == "gui":
            return cmd_gui(config)
    except RegistryBaseError as exc:
        logger.debug("%s failed", ns.subcommand, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
