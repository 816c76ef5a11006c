"""String similarity utilities for typo matching."""

from __future__ import annotations

__all__ = [
    "find_similar_names",
    "levenshtein_distance",
]


def levenshtein_distance(s1: str, s2: str, *, limit: int | None = None) -> int:
    """Calculate Levenshtein (edit) distance between two strings.

    The Levenshtein distance is the minimum number of single-character
    edits (insertions, deletions, substitutions) to transform s1 into s2.
    Characters are compared as Unicode code points, so a transposition
    counts as two edits.

    Args:
        s1: First string.
        s2: Second string.
        limit: Stop as soon as the distance is known to exceed this.
            The result is then ``limit + 1`` rather than the exact distance.

    Returns:
        The edit distance between the strings, capped at ``limit + 1``.
    """
    if len(s1) < len(s2):
        s1, s2 = s2, s1

    if limit is not None and len(s1) - len(s2) > limit:
        return limit + 1

    if len(s2) == 0:
        return len(s1)

    # Two rows, the shorter string along the columns
    previous_row = list(range(len(s2) + 1))

    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        # Row minima never decrease
        if limit is not None and min(current_row) > limit:
            return limit + 1
        previous_row = current_row

    if limit is not None:
        return min(previous_row[-1], limit + 1)
    return previous_row[-1]


def find_similar_names(
    target: str,
    candidates: list[str],
    *,
    max_distance: int = 3,
    max_suggestions: int = 3,
) -> list[str]:
    """Suggest names close to a misspelled one.

    Used by the CLI for "Did you mean?" hints. Unlike the matching engine
    this is case-insensitive and ordered, closest first with alphabetical
    tie-break.

    Args:
        target: The string to match against.
        candidates: List of possible matches.
        max_distance: Maximum edit distance to consider a match.
        max_suggestions: Maximum number of suggestions to return.

    Returns:
        List of similar names, ordered by distance (closest first).
    """
    if not candidates:
        return []

    scored = [
        (
            name,
            levenshtein_distance(target.lower(), name.lower(), limit=max_distance),
        )
        for name in candidates
    ]
    within_threshold = [(name, dist) for name, dist in scored if dist <= max_distance]
    within_threshold.sort(key=lambda x: (x[1], x[0].lower()))

    return [name for name, _ in within_threshold[:max_suggestions]]
