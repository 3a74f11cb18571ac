"""
Runtime configuration for the registry.

Settings come from keyword arguments, or from the environment via
RegistryConfig.from_env():

  STUDENT_REGISTRY_UNIQUE_IDS   1/0, true/false, yes/no, on/off
  STUDENT_REGISTRY_KIND         directory kind passed to get_directory()
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from student_registry.exceptions import ConfigError

__all__ = ["RegistryConfig", "DEFAULT_KIND"]

logger = logging.getLogger(__name__)

DEFAULT_KIND = "adapter"

_ENV_UNIQUE_IDS = "STUDENT_REGISTRY_UNIQUE_IDS"
_ENV_KIND       = "STUDENT_REGISTRY_KIND"

_TRUE  = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigError(f"{name} must be a boolean flag, got {raw!r}")


@dataclass
class RegistryConfig:
    """
    enforce_unique_ids — reject inserts of an id already in the store
                         (off by default: duplicates coexist)
    directory_kind     — which ModernStudentDirectory implementation to build
    """
    enforce_unique_ids: bool = False
    directory_kind:     str  = DEFAULT_KIND

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RegistryConfig":
        """Build a config from *environ* (defaults to os.environ)."""
        env = os.environ if environ is None else environ
        config = cls()
        if _ENV_UNIQUE_IDS in env:
            config.enforce_unique_ids = _parse_bool(_ENV_UNIQUE_IDS, env[_ENV_UNIQUE_IDS])
        kind = env.get(_ENV_KIND, "").strip()
        if kind:
            config.directory_kind = kind
        logger.debug("Loaded config from environment: %s", config)
        return config
