"""Static synonym expansion for search tokens."""

from __future__ import annotations

from typing import Mapping, Sequence

MAX_EXPANDED_TOKENS = 8


class SynonymExpander:
    """Append known synonyms after the original tokens."""

    def __init__(self, table: Mapping[str, Sequence[str]]) -> None:
        self._table = table

    def expand(self, tokens: Sequence[str]) -> list[str]:
        """Return tokens followed by their synonyms, de-duplicated and capped.

        Lookup is exact; the original tokens always lead the output in their
        original order.
        """

        extra: list[str] = []
        for token in tokens:
            extra.extend(self._table.get(token, ()))

        expanded: list[str] = []
        seen: set[str] = set()
        for token in [*tokens, *extra]:
            if token in seen:
                continue
            seen.add(token)
            expanded.append(token)
        return expanded[:MAX_EXPANDED_TOKENS]


__all__ = ["MAX_EXPANDED_TOKENS", "SynonymExpander"]
