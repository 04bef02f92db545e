"""Typo-tolerant matching based on Damerau-Levenshtein distance.

The distance counts insertions, deletions, substitutions and transpositions of
adjacent characters, so ``"ab"`` and ``"ba"`` are one edit apart rather than
two. Every comparison costs O(len(a) * len(b)); these helpers are meant for
in-memory collections of a few hundred to a few thousand rows and are no
replacement for server-side full-text search.
"""

from __future__ import annotations

from functools import lru_cache


def damerau_levenshtein(a: str, b: str) -> int:
    """Return the unrestricted Damerau-Levenshtein distance between two strings.

    Examples:
        >>> damerau_levenshtein("شارزر", "شارژر")
        1
        >>> damerau_levenshtein("ab", "ba")
        1
        >>> damerau_levenshtein("a52", "a52")
        0
    """
    len_a, len_b = len(a), len(b)
    if len_a == 0:
        return len_b
    if len_b == 0:
        return len_a

    infinity = len_a + len_b
    last_row_of: dict[str, int] = {}

    # The table carries an extra sentinel row and column filled with infinity.
    table = [[0] * (len_b + 2) for _ in range(len_a + 2)]
    table[0][0] = infinity
    for i in range(len_a + 1):
        table[i + 1][0] = infinity
        table[i + 1][1] = i
    for j in range(len_b + 1):
        table[0][j + 1] = infinity
        table[1][j + 1] = j

    for i in range(1, len_a + 1):
        last_match_col = 0
        for j in range(1, len_b + 1):
            match_row = last_row_of.get(b[j - 1], 0)
            match_col = last_match_col
            if a[i - 1] == b[j - 1]:
                cost = 0
                last_match_col = j
            else:
                cost = 1
            table[i + 1][j + 1] = min(
                table[i][j] + cost,
                table[i + 1][j] + 1,
                table[i][j + 1] + 1,
                table[match_row][match_col] + (i - match_row - 1) + 1 + (j - match_col - 1),
            )
        last_row_of[a[i - 1]] = i

    return table[len_a + 1][len_b + 1]


@lru_cache(maxsize=50000)
def distance(a: str, b: str) -> int:
    """Cached version of :func:`damerau_levenshtein` for repeated lookups."""
    return damerau_levenshtein(a, b)


def max_distance_for(needle: str) -> int:
    """Edit budget granted to a needle, scaled by its length."""
    length = len(needle)
    if length <= 4:
        return 1
    if length <= 7:
        return 2
    return 3


def approx_includes(haystack: str, needle: str) -> bool:
    """
    Check whether ``needle`` occurs in ``haystack`` allowing a few typos.

    A literal substring hit is tried first. Otherwise the haystack is split on
    whitespace and each word is compared to the needle; words whose length
    differs by more than the edit budget are skipped without computing a
    distance.

    Args:
        haystack: Already normalized text to search in
        needle: Normalized token to look for

    Returns:
        True when the needle is contained literally or approximately
    """
    if not needle:
        return True
    if needle in haystack:
        return True

    max_dist = max_distance_for(needle)
    needle_length = len(needle)
    for word in haystack.split():
        if abs(len(word) - needle_length) > max_dist:
            continue
        if distance(word, needle) <= max_dist:
            return True
    return False


__all__ = ["approx_includes", "damerau_levenshtein", "distance", "max_distance_for"]
