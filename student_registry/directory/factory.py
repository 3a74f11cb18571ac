"""Factory function — returns a fresh directory for a given kind."""

from __future__ import annotations

from typing import Callable, Optional

from student_registry.config import DEFAULT_KIND, RegistryConfig
from student_registry.exceptions import UnknownDirectoryKindError

from .adapter import DirectoryAdapter
from .base import ModernStudentDirectory
from .native import InMemoryStudentDirectory

__all__ = ["get_directory", "available_kinds"]

# Classes, not instances: every caller gets an independent store.
_DIRECTORY_MAP: dict[str, Callable[..., ModernStudentDirectory]] = {
    "adapter": DirectoryAdapter,
    "native":  InMemoryStudentDirectory,
}


def available_kinds() -> list[str]:
    """Registered directory kinds, default first."""
    return sorted(_DIRECTORY_MAP, key=lambda k: (k != DEFAULT_KIND, k))


def get_directory(
    kind: Optional[str] = None,
    config: Optional[RegistryConfig] = None,
) -> ModernStudentDirectory:
    """
    Build a new ModernStudentDirectory.

    Parameters
    ----------
    kind   : "adapter" (legacy store behind DirectoryAdapter) or "native".
             Defaults to config.directory_kind.
    config : RegistryConfig; defaults to RegistryConfig().

    Raises
    ------
    UnknownDirectoryKindError if *kind* is not registered.
    """
    config = config or RegistryConfig()
    kind = kind or config.directory_kind
    try:
        factory = _DIRECTORY_MAP[kind]
    except KeyError:
        raise UnknownDirectoryKindError(
            f"Unknown directory kind {kind!r}; expected one of {available_kinds()}"
        ) from None
    return factory(enforce_unique_ids=config.enforce_unique_ids)
