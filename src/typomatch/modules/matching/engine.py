"""Typo matching over a candidate source.

``generate_edits`` collects every candidate within the typo budget;
``select_best`` picks the closest one. Both are pure functions of their
arguments and the ``TypoConfig`` passed in.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from typomatch.infrastructure.similarity import levenshtein_distance
from typomatch.modules.matching.budget import TypoConfig, typo_budget
from typomatch.modules.matching.predicate import matches
from typomatch.modules.matching.sources import ExternalPredicate, as_source

__all__ = [
    "all_matches",
    "best_match",
    "generate_edits",
    "select_best",
]

logger = structlog.get_logger()


def generate_edits(
    word: str,
    source: object,
    predicate: ExternalPredicate | None = None,
    *,
    config: TypoConfig,
) -> list[str]:
    """Collect every candidate that is a plausible typo variant of word.

    Args:
        word: The word being completed.
        source: A candidate source or raw collection accepted by ``as_source``.
        predicate: Extra acceptance test supplied by the caller.
        config: Matching configuration.

    Returns:
        Accepted candidates without duplicates, in traversal order.

    Raises:
        InvalidConfigurationError: If the level policy is unusable.
        UnsupportedSourceError: If the source or one of its entries has no
            comparable string form.
    """
    candidate_source = as_source(source)
    budget = typo_budget(len(word), config.level_policy)

    accepted: dict[str, None] = {}
    for candidate in candidate_source.candidates(predicate):
        if candidate in accepted:
            continue
        if matches(word, candidate, config, budget=budget):
            accepted[candidate] = None

    logger.debug(
        "edits_generated",
        word=word,
        source=type(candidate_source).__name__,
        budget=budget,
        count=len(accepted),
    )
    return list(accepted)


def select_best(word: str, candidates: Iterable[str]) -> str | None:
    """Candidate with the smallest edit distance to word.

    Ties keep the candidate seen first. For frequency and name tables that
    order is not defined, so neither is the winner among equal distances.

    Returns:
        The best candidate, or None if there are no candidates.
    """
    best: str | None = None
    best_distance = 0
    for candidate in candidates:
        distance = levenshtein_distance(word, candidate)
        if best is None or distance < best_distance:
            best, best_distance = candidate, distance
    return best


def all_matches(
    word: str,
    source: object,
    predicate: ExternalPredicate | None = None,
    *,
    config: TypoConfig | None = None,
) -> list[str]:
    """Every accepted candidate, or nothing when listing is disabled."""
    if config is None:
        config = TypoConfig()
    if not config.all_completions:
        logger.debug("all_completions_disabled", word=word)
        return []
    return generate_edits(word, source, predicate, config=config)


def best_match(
    word: str,
    source: object,
    predicate: ExternalPredicate | None = None,
    *,
    config: TypoConfig | None = None,
) -> tuple[str, int] | None:
    """The closest accepted candidate and its length, or None.

    Not affected by ``config.all_completions``.
    """
    if config is None:
        config = TypoConfig()
    best = select_best(word, generate_edits(word, source, predicate, config=config))
    if best is None:
        return None
    return best, len(best)
