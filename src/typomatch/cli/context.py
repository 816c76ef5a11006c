"""CLI context state management."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from typomatch.infrastructure.config import Settings

__all__ = ["CLIContext"]


@dataclass
class CLIContext:
    """Global CLI context for verbosity and loaded settings.

    Uses singleton pattern to share state across all CLI commands.
    Assumes single-threaded CLI environment.
    """

    verbose: bool = False
    quiet: bool = False
    settings: Settings | None = None

    _instance: ClassVar[CLIContext | None] = None

    @classmethod
    def get(cls) -> CLIContext:
        """Get the singleton CLI context instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get_settings(self) -> Settings:
        """Get settings, loading and caching on first access."""
        if self.settings is None:
            from typomatch.infrastructure.config import load_settings

            self.settings = load_settings()

        assert self.settings is not None  # Always set in the if block above
        return self.settings

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance.

        Useful for testing to ensure clean state.
        """
        cls._instance = None
