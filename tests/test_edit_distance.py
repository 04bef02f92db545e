"""Tests for Damerau-Levenshtein distance and approximate containment."""

from __future__ import annotations

import pytest

from palette.services.edit_distance import (
    approx_includes,
    damerau_levenshtein,
    distance,
    max_distance_for,
)


def test_transposition_counts_as_one_edit() -> None:
    assert distance("ab", "ba") == 1
    assert damerau_levenshtein("شارزر", "شارژر") == 1


def test_unrestricted_transposition_with_insertion() -> None:
    assert damerau_levenshtein("ca", "abc") == 2


def test_distance_is_symmetric_and_zero_on_identity() -> None:
    pairs = [("قاب", "قاپ"), ("kitten", "sitting"), ("", "abc")]
    for left, right in pairs:
        assert distance(left, right) == distance(right, left)
    assert distance("a52", "a52") == 0
    assert distance("", "") == 0
    assert distance("", "abc") == 3


@pytest.mark.parametrize(
    ("needle", "expected"),
    [("abcd", 1), ("abcde", 2), ("abcdefg", 2), ("abcdefgh", 3)],
)
def test_budget_scales_with_length(needle: str, expected: int) -> None:
    assert max_distance_for(needle) == expected


def test_literal_substring_matches() -> None:
    assert approx_includes("شارژر سامسونگ", "سامس")


def test_empty_needle_always_matches() -> None:
    assert approx_includes("", "")
    assert approx_includes("anything", "")


def test_short_needle_threshold_boundary() -> None:
    assert approx_includes("foo abxd bar", "abcd")
    assert not approx_includes("foo axyd bar", "abcd")


def test_long_needle_threshold_boundary() -> None:
    assert approx_includes("abcXYZgh", "abcdefgh")
    assert not approx_includes("abWXYZgh", "abcdefgh")


def test_words_with_large_length_gap_are_skipped() -> None:
    assert not approx_includes("xyzxyzxyzxyz", "abc")
    assert not approx_includes("a", "abcdef")
