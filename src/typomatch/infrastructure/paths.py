"""Path resolution for typomatch storage."""

from __future__ import annotations

import os
from pathlib import Path

__all__ = [
    "HOME_ENV_VAR",
    "PathResolver",
]

HOME_ENV_VAR = "TYPOMATCH_HOME"


class PathResolver:
    """Resolves paths for typomatch storage.

    Storage layout:
        ~/.typomatch/
        └── config.json
    """

    def __init__(self, base: Path | None = None) -> None:
        """Initialize path resolver.

        Args:
            base: Base directory for storage. Defaults to $TYPOMATCH_HOME,
                falling back to ~/.typomatch.
        """
        if base is None:
            env_home = os.environ.get(HOME_ENV_VAR)
            base = Path(env_home) if env_home else Path.home() / ".typomatch"
        self.base = base

    def ensure_base(self) -> Path:
        """Ensure base directory exists and return it."""
        self.base.mkdir(parents=True, exist_ok=True)
        return self.base

    def global_config(self) -> Path:
        """Path to global configuration file."""
        return self.base / "config.json"
