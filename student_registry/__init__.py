"""
student_registry — an in-memory student record store behind a modern
directory contract.

Sub-packages
────────────
store      — legacy RecordStore (single-precision scores)
directory  — ModernStudentDirectory, DirectoryAdapter, factory
client     — DirectoryClient
cli        — command-line entry point
gui        — PyQt6 front-end
"""

__version__ = "0.1.0"
