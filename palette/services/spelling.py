"""
Dictionary-based spell correction for search tokens.

Each token is compared against a fixed domain dictionary and replaced by its
nearest entry when the edit distance is small relative to the token length.
No cross-token context is used; a token without a close entry is kept as-is.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .edit_distance import distance

# Share of the token length that may be edited, capped at two edits.
_ACCEPT_RATIO = 0.34
_ACCEPT_CAP = 2


@dataclass(frozen=True, slots=True)
class TokenCorrection:
    """Result of correcting one token."""

    suggestion: str
    distance: int


@dataclass(frozen=True, slots=True)
class QueryCorrection:
    """Result of correcting every token of a query."""

    corrected: list[str]
    changed: bool


def acceptance_threshold(token: str) -> int:
    """Largest distance at which a dictionary suggestion replaces ``token``."""
    return min(_ACCEPT_CAP, math.ceil(len(token) * _ACCEPT_RATIO))


class SpellCorrector:
    """Replace tokens with their nearest dictionary word."""

    def __init__(self, dictionary: Sequence[str]) -> None:
        self._dictionary = tuple(dictionary)
        self._lookup = frozenset(self._dictionary)

    @property
    def dictionary(self) -> tuple[str, ...]:
        return self._dictionary

    def correct_token(self, token: str) -> TokenCorrection:
        """
        Return the closest dictionary word for ``token`` if it is close enough.

        Ties are resolved in favour of the word that appears first in the
        dictionary, so results are deterministic.
        """
        if not token or token in self._lookup:
            return TokenCorrection(suggestion=token, distance=0)

        best = token
        best_distance = math.inf
        for word in self._dictionary:
            current = distance(token, word)
            if current < best_distance:
                best_distance = current
                best = word

        if best_distance <= acceptance_threshold(token):
            return TokenCorrection(suggestion=best, distance=int(best_distance))
        return TokenCorrection(suggestion=token, distance=0)

    def correct_query_tokens(self, tokens: Sequence[str]) -> QueryCorrection:
        """Correct every token independently and report whether any changed."""
        corrected: list[str] = []
        changed = False
        for token in tokens:
            result = self.correct_token(token)
            corrected.append(result.suggestion)
            if result.distance > 0 and result.suggestion != token:
                changed = True
        return QueryCorrection(corrected=corrected, changed=changed)


__all__ = ["QueryCorrection", "SpellCorrector", "TokenCorrection", "acceptance_threshold"]
