"""Exceptions raised by the matching engine."""

from __future__ import annotations

__all__ = [
    "InvalidConfigurationError",
    "MatchError",
    "UnsupportedSourceError",
]


class MatchError(Exception):
    """Base exception for matching operations."""

    pass


class InvalidConfigurationError(MatchError):
    """Raised when a level policy or length bound is unusable."""

    pass


class UnsupportedSourceError(MatchError):
    """Raised when a candidate source is not a recognized kind."""

    pass
