"""Typo-tolerant filtering of in-memory table rows."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Generic, Iterable, Sequence, TypeVar

from .edit_distance import approx_includes, distance
from .preprocess import normalize_index_text, tokenize

RowT = TypeVar("RowT")


@dataclass(slots=True)
class TableFilterResult(Generic[RowT]):
    """Rows that matched a query plus an optional "did you mean" hint."""

    rows: list[RowT] = field(default_factory=list)
    suggestion: str | None = None


def _suggestion_budget(token: str) -> int:
    return 1 if len(token) <= 4 else 2


class TableFilter(Generic[RowT]):
    """Index rows once and filter them with every-token fuzzy containment."""

    def __init__(self, rows: Iterable[RowT], index_text: Callable[[RowT], str]) -> None:
        self._rows = list(rows)
        self._indexes = [normalize_index_text(index_text(row)) for row in self._rows]
        self._corpus = self._collect_words(self._indexes)

    @staticmethod
    def _collect_words(indexes: Sequence[str]) -> list[str]:
        seen: dict[str, None] = {}
        for index in indexes:
            for word in index.split(" "):
                if word:
                    seen.setdefault(word, None)
        return list(seen)

    @property
    def rows(self) -> list[RowT]:
        return list(self._rows)

    def apply(self, query: str) -> TableFilterResult[RowT]:
        """Return rows whose index contains every query token approximately."""

        tokens = tokenize(normalize_index_text(query))
        if not tokens:
            return TableFilterResult(rows=list(self._rows))

        matched = [
            row
            for row, index in zip(self._rows, self._indexes)
            if all(approx_includes(index, token) for token in tokens)
        ]
        if matched:
            return TableFilterResult(rows=matched)
        return TableFilterResult(rows=[], suggestion=self.suggest(tokens[-1]))

    def suggest(self, token: str) -> str | None:
        """Closest corpus word for ``token``, stopping at the first one-edit hit."""

        best = ""
        best_distance = math.inf
        for word in self._corpus:
            current = distance(token, word)
            if current < best_distance:
                best_distance = current
                best = word
                if current == 1:
                    break
        if best and best_distance <= _suggestion_budget(token):
            return best
        return None


__all__ = ["TableFilter", "TableFilterResult"]
