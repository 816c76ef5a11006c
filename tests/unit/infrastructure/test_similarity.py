"""Tests for string similarity utilities."""

from __future__ import annotations

from typomatch.infrastructure.similarity import (
    find_similar_names,
    levenshtein_distance,
)


class TestLevenshteinDistance:
    """Tests for levenshtein_distance function."""

    def test_identical_strings_return_zero(self) -> None:
        """Identical strings should have distance 0."""
        assert levenshtein_distance("hello", "hello") == 0

    def test_empty_strings_return_zero(self) -> None:
        """Two empty strings should have distance 0."""
        assert levenshtein_distance("", "") == 0

    def test_one_empty_string(self) -> None:
        """Distance to empty string is length of other string."""
        assert levenshtein_distance("hello", "") == 5
        assert levenshtein_distance("", "world") == 5

    def test_single_edits(self) -> None:
        """Insertion, deletion and substitution each cost 1."""
        assert levenshtein_distance("cat", "cats") == 1
        assert levenshtein_distance("cats", "cat") == 1
        assert levenshtein_distance("foobor", "foobar") == 1

    def test_multiple_operations(self) -> None:
        """'kitten' -> 'sitting' needs k->s, e->i, +g."""
        assert levenshtein_distance("kitten", "sitting") == 3

    def test_transposition_is_two_edits(self) -> None:
        """Swapping adjacent characters is not a single edit."""
        assert levenshtein_distance("ab", "ba") == 2

    def test_case_sensitive(self) -> None:
        """Distance should be case-sensitive."""
        assert levenshtein_distance("Hello", "hello") == 1

    def test_code_points(self) -> None:
        """Non-ASCII characters count as one character each."""
        assert levenshtein_distance("café", "cafe") == 1
        assert levenshtein_distance("日本語", "日本") == 1

    def test_symmetric(self) -> None:
        """Distance should be symmetric."""
        pairs = [("abc", "def"), ("foobor", "barfoo"), ("", "x"), ("cat", "cast")]
        for a, b in pairs:
            assert levenshtein_distance(a, b) == levenshtein_distance(b, a)

    def test_triangle_inequality(self) -> None:
        """d(a, c) <= d(a, b) + d(b, c)."""
        words = ["cat", "cast", "cats", "dog", ""]
        for a in words:
            for b in words:
                for c in words:
                    assert levenshtein_distance(a, c) <= levenshtein_distance(
                        a, b
                    ) + levenshtein_distance(b, c)


class TestFindSimilarNames:
    """Tests for find_similar_names function."""

    def test_empty_candidates_returns_empty(self) -> None:
        """Empty candidate list should return empty list."""
        assert find_similar_names("test", []) == []

    def test_similar_names_found(self) -> None:
        """Should find names with small edit distance."""
        result = find_similar_names("shrnk", ["level", "shrink", "expand"])
        assert result[0] == "shrink"

    def test_respects_max_distance(self) -> None:
        """Should not return names exceeding max_distance."""
        result = find_similar_names("abc", ["abc", "xyz"], max_distance=1)
        assert result == ["abc"]

    def test_respects_max_suggestions(self) -> None:
        """Should limit number of suggestions."""
        candidates = ["aaa", "aab", "aac", "aad", "aae"]
        assert len(find_similar_names("aaa", candidates, max_suggestions=2)) == 2

    def test_case_insensitive_matching(self) -> None:
        """Matching should be case-insensitive."""
        assert "Level" in find_similar_names("level", ["Level", "expand"])

    def test_alphabetical_tiebreaker(self) -> None:
        """Names with same distance should be sorted alphabetically."""
        assert find_similar_names("ddd", ["ccc", "aaa", "bbb"]) == [
            "aaa",
            "bbb",
            "ccc",
        ]


class TestLevenshteinLimit:
    """Tests for the early-exit limit of levenshtein_distance."""

    def test_within_limit_is_exact(self) -> None:
        """Distances up to the limit are returned unchanged."""
        assert levenshtein_distance("kitten", "sitting", limit=3) == 3
        assert levenshtein_distance("foobor", "foobar", limit=3) == 1

    def test_over_limit_is_capped(self) -> None:
        """Distances beyond the limit are reported as limit + 1."""
        assert levenshtein_distance("foobor", "barfoo", limit=3) == 4
        assert levenshtein_distance("kitten", "sitting", limit=1) == 2

    def test_length_difference_short_circuits(self) -> None:
        """A length gap beyond the limit is enough to stop."""
        assert levenshtein_distance("a", "abcdef", limit=2) == 3
        assert levenshtein_distance("", "abc", limit=0) == 1

    def test_limit_agrees_with_exact_comparison(self) -> None:
        """d <= limit holds with and without the limit."""
        words = ["cat", "cast", "cats", "dog", "", "foobar", "barfoo"]
        for a in words:
            for b in words:
                exact = levenshtein_distance(a, b)
                for limit in range(4):
                    capped = levenshtein_distance(a, b, limit=limit)
                    assert (capped <= limit) == (exact <= limit)
                    assert capped == min(exact, limit + 1)
