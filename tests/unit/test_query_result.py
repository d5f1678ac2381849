"""Unit tests for MatchResult scoring and ranking."""

from __future__ import annotations

import pytest

from stemindex.query_result import MatchResult


pytestmark = pytest.mark.unit


def test_score_is_match_over_word_count() -> None:
    result = MatchResult(4, 1, "a.txt")

    assert result.score == 0.25
    assert result.word_count == 4
    assert result.match_count == 1


@pytest.mark.parametrize("word_count", [0, -3])
def test_non_positive_word_count_rejected(word_count: int) -> None:
    with pytest.raises(ValueError):
        MatchResult(word_count, 1, "a.txt")


def test_combine_adds_match_counts() -> None:
    result = MatchResult(10, 2, "a.txt")

    result.combine(MatchResult(99, 3, "a.txt"))

    assert result.match_count == 5
    assert result.word_count == 10
    assert result.score == 0.5


def test_combine_rejects_other_location() -> None:
    result = MatchResult(10, 2, "a.txt")

    with pytest.raises(ValueError):
        result.combine(MatchResult(10, 3, "b.txt"))
    assert result.match_count == 2


def test_set_match_count_recomputes_score() -> None:
    result = MatchResult(8, 2, "a.txt")

    result.set_match_count(6)

    assert result.score == 0.75


def test_ranking_by_score_then_count() -> None:
    a = MatchResult(10, 9, "a.txt")
    b = MatchResult(20, 18, "b.txt")
    c = MatchResult(10, 5, "c.txt")

    assert sorted([c, a, b]) == [b, a, c]


def test_ranking_ties_broken_by_location_ignoring_case() -> None:
    upper = MatchResult(10, 2, "B.txt")
    lower = MatchResult(10, 2, "a.txt")

    assert sorted([upper, lower]) == [lower, upper]
    assert lower.compare(upper) < 0
    assert upper.compare(lower) > 0
    assert lower.compare(MatchResult(10, 2, "A.TXT")) == 0


def test_score_string_has_eight_decimals() -> None:
    assert MatchResult(3, 1, "a").score_string() == "0.33333333"
    assert MatchResult(3, 2, "a").score_string() == "0.66666667"
    assert MatchResult(1, 1, "a").score_string() == "1.00000000"
    assert MatchResult(1000000000, 1, "a").score_string() == "0.00000000"


def test_str_summary() -> None:
    assert str(MatchResult(4, 2, "a.txt")) == 'count: 2, score: 0.50000000, where: "a.txt"'
