"""Typo budget policies and engine configuration."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

from typomatch.modules.matching.errors import InvalidConfigurationError

__all__ = [
    "DEFAULT_EXPAND",
    "DEFAULT_SHRINK",
    "NAMED_POLICIES",
    "LevelPolicy",
    "TypoConfig",
    "half_level",
    "resolve_level_policy",
    "sqrt_level",
    "typo_budget",
]

LevelPolicy = int | Callable[[int], float]

DEFAULT_SHRINK = 1
DEFAULT_EXPAND = 4


def sqrt_level(length: int) -> float:
    """Square root of the word length (the default policy)."""
    return math.sqrt(length)


def half_level(length: int) -> float:
    """Half the word length."""
    return length / 2


NAMED_POLICIES: dict[str, Callable[[int], float]] = {
    "sqrt": sqrt_level,
    "half": half_level,
}


def _is_natural(value: object) -> bool:
    # bool is an int subclass but never a meaningful count
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


@dataclass(frozen=True)
class TypoConfig:
    """Immutable matching configuration, passed into every query.

    Attributes:
        level_policy: Fixed maximum edit distance, or a function of the
            word length whose result is rounded up.
        shrink: How many characters shorter than the word a candidate may be.
        expand: How many characters longer than the word a candidate may be.
        all_completions: When false, listing every match returns nothing.
            Best-match selection is unaffected.
    """

    level_policy: LevelPolicy = sqrt_level
    shrink: int = DEFAULT_SHRINK
    expand: int = DEFAULT_EXPAND
    all_completions: bool = True

    def __post_init__(self) -> None:
        for field_name in ("shrink", "expand"):
            value = getattr(self, field_name)
            if not _is_natural(value):
                raise InvalidConfigurationError(
                    f"{field_name} must be a non-negative integer, got {value!r}"
                )


def typo_budget(word_length: int, policy: LevelPolicy) -> int:
    """Maximum edit distance tolerated for a word of the given length.

    Args:
        word_length: Length of the word being completed.
        policy: Fixed count, or a length -> budget function.

    Returns:
        The budget; function results are rounded up.

    Raises:
        InvalidConfigurationError: If the policy is neither form, or a
            function policy yields a negative or non-numeric value.
    """
    if _is_natural(policy):
        return policy  # type: ignore[return-value]

    if isinstance(policy, bool | int) or not callable(policy):
        raise InvalidConfigurationError(
            f"Level policy must be a non-negative integer or a function, "
            f"got {policy!r}"
        )

    value = policy(word_length)
    try:
        budget = math.ceil(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidConfigurationError(
            f"Level policy returned {value!r} for length {word_length}"
        ) from e

    if budget < 0:
        raise InvalidConfigurationError(
            f"Level policy returned negative budget {value!r} "
            f"for length {word_length}"
        )
    return budget


def resolve_level_policy(value: int | str) -> LevelPolicy:
    """Turn a configured level (count, digit string or policy name) into a policy.

    Raises:
        InvalidConfigurationError: If the value is not a known policy.
    """
    if _is_natural(value):
        return value  # type: ignore[return-value]

    if isinstance(value, str):
        text = value.strip().lower()
        if text.isdigit():
            return int(text)
        if text in NAMED_POLICIES:
            return NAMED_POLICIES[text]

    known = ", ".join(sorted(NAMED_POLICIES))
    raise InvalidConfigurationError(
        f"Unknown level {value!r}: use a non-negative integer or one of {known}"
    )
