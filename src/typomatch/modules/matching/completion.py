"""Entry points in the calling convention of a completion framework.

A completion style is a pair of functions taking the text typed so far,
a completion table, a predicate and the cursor position. ``TYPO_STYLE``
bundles this engine's pair so a host can register it under one name.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NamedTuple

from typomatch.modules.matching.budget import TypoConfig
from typomatch.modules.matching.engine import all_matches, best_match
from typomatch.modules.matching.sources import ExternalPredicate

__all__ = [
    "TYPO_STYLE",
    "CompletionStyle",
    "all_completions",
    "try_completion",
]


def try_completion(
    string: str,
    table: object,
    predicate: ExternalPredicate | None = None,
    point: int | None = None,  # noqa: ARG001 - part of the calling convention
    *,
    config: TypoConfig | None = None,
) -> tuple[str, int] | None:
    """Best typo match for string, with the new cursor position."""
    return best_match(string, table, predicate, config=config)


def all_completions(
    string: str,
    table: object,
    predicate: ExternalPredicate | None = None,
    point: int | None = None,  # noqa: ARG001 - part of the calling convention
    *,
    config: TypoConfig | None = None,
) -> list[str]:
    """Every typo match for string."""
    return all_matches(string, table, predicate, config=config)


class CompletionStyle(NamedTuple):
    """A named pair of completion functions."""

    name: str
    try_completion: Callable[..., tuple[str, int] | None]
    all_completions: Callable[..., list[str]]
    description: str


TYPO_STYLE = CompletionStyle(
    name="typo",
    try_completion=try_completion,
    all_completions=all_completions,
    description="Complete words that are within a few typos of the input.",
)
