"""Accept/reject test for a single (word, candidate) pair."""

from __future__ import annotations

from typomatch.infrastructure.similarity import levenshtein_distance
from typomatch.modules.matching.budget import TypoConfig, typo_budget

__all__ = [
    "matches",
    "passes_length_gate",
]


def passes_length_gate(word: str, candidate: str, config: TypoConfig) -> bool:
    """Check the candidate's length against the shrink and expand bounds."""
    difference = len(candidate) - len(word)
    return -difference <= config.shrink and difference <= config.expand


def matches(
    word: str,
    candidate: str,
    config: TypoConfig,
    *,
    budget: int | None = None,
) -> bool:
    """Check whether a candidate is a plausible typo variant of a word.

    The length gate runs first so the edit distance is only computed for
    candidates of a comparable length.

    Args:
        word: The word being completed.
        candidate: Comparable string form of a candidate.
        config: Matching configuration.
        budget: Precomputed typo budget for ``word``; computed from
            ``config.level_policy`` when omitted.
    """
    if not passes_length_gate(word, candidate, config):
        return False
    if budget is None:
        budget = typo_budget(len(word), config.level_policy)
    return levenshtein_distance(word, candidate, limit=budget) <= budget
