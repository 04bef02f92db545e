"""Header product search box with "did you mean" hints."""

from __future__ import annotations

from typing import Callable
from urllib.parse import quote

from ..services.query import ProcessedQuery, QueryProcessor, build_default_processor

PRODUCTS_SEARCH_PATH = "/products"


class HeaderSearch:
    """Keep the header input text and turn submissions into product searches."""

    def __init__(
        self,
        navigate: Callable[[str], None],
        processor: QueryProcessor | None = None,
    ) -> None:
        self._navigate = navigate
        self._processor = processor or build_default_processor()
        self._text = ""
        self._processed = self._processor.process("")

    @property
    def text(self) -> str:
        return self._text

    @property
    def processed(self) -> ProcessedQuery:
        return self._processed

    @property
    def suggestion(self) -> str | None:
        """Corrected query worth offering, hidden when it equals the typed text."""

        suggestion = self._processed.suggestion
        if suggestion and suggestion != self._text.strip().lower():
            return suggestion
        return None

    def type(self, text: str) -> None:
        self._text = text
        self._processed = self._processor.process(text)

    def apply_suggestion(self) -> None:
        """Replace the input with the current suggestion, if any."""

        suggestion = self.suggestion
        if suggestion:
            self.type(suggestion)

    def submit(self) -> str | None:
        """Navigate to the product listing filtered by the processed query."""

        term = self._processed.final or self._processed.normalized
        if not term:
            return None
        path = f"{PRODUCTS_SEARCH_PATH}?search={quote(term, safe='')}"
        self._navigate(path)
        return path


__all__ = ["HeaderSearch", "PRODUCTS_SEARCH_PATH"]
