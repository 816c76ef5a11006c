"""Typo-tolerant matching engine."""

from typomatch.modules.matching.budget import (
    NAMED_POLICIES,
    LevelPolicy,
    TypoConfig,
    resolve_level_policy,
    typo_budget,
)
from typomatch.modules.matching.completion import (
    TYPO_STYLE,
    CompletionStyle,
    all_completions,
    try_completion,
)
from typomatch.modules.matching.engine import (
    all_matches,
    best_match,
    generate_edits,
    select_best,
)
from typomatch.modules.matching.errors import (
    InvalidConfigurationError,
    MatchError,
    UnsupportedSourceError,
)
from typomatch.modules.matching.predicate import matches, passes_length_gate
from typomatch.modules.matching.sources import (
    AssociativeListSource,
    CandidateSource,
    FrequencyTableSource,
    GeneratorSource,
    NameTableSource,
    SequenceSource,
    Symbol,
    as_source,
)

__all__ = [
    "NAMED_POLICIES",
    "TYPO_STYLE",
    "AssociativeListSource",
    "CandidateSource",
    "CompletionStyle",
    "FrequencyTableSource",
    "GeneratorSource",
    "InvalidConfigurationError",
    "LevelPolicy",
    "MatchError",
    "NameTableSource",
    "SequenceSource",
    "Symbol",
    "TypoConfig",
    "UnsupportedSourceError",
    "all_completions",
    "all_matches",
    "as_source",
    "best_match",
    "generate_edits",
    "matches",
    "passes_length_gate",
    "resolve_level_policy",
    "select_best",
    "typo_budget",
]
