"""
Student directories — the modern contract and its implementations.

DirectoryAdapter bridges the contract onto the legacy RecordStore,
narrowing double-precision grades to single precision on the way in.
"""

from .adapter import DirectoryAdapter
from .base import ModernStudentDirectory
from .conversion import narrow_to_float32
from .factory import available_kinds, get_directory
from .native import InMemoryStudentDirectory

__all__ = [
    "ModernStudentDirectory",
    "DirectoryAdapter",
    "InMemoryStudentDirectory",
    "narrow_to_float32",
    "get_directory",
    "available_kinds",
]
