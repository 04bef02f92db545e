"""Compose normalization, spelling correction and synonym expansion."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .preprocess import normalize, tokenize
from .spelling import SpellCorrector
from .synonyms import SynonymExpander
from .vocabulary import DOMAIN_DICTIONARY, SYNONYMS


class ProcessedQuery(BaseModel):
    """Every representation of a query the search surfaces need."""

    model_config = ConfigDict(frozen=True)

    raw: str = Field("", description="Input exactly as typed.")
    normalized: str = Field("", description="Digit and character canonicalized input.")
    final: str = Field(
        "",
        description="Corrected query when a token changed, otherwise the normalized input.",
    )
    suggestion: str | None = Field(
        None, description="Corrected query offered to the user, only when it differs."
    )
    expanded: str = Field("", description="Corrected tokens followed by their synonyms.")


class QueryProcessor:
    """Pure, synchronous pipeline turning raw input into a processed query."""

    def __init__(self, corrector: SpellCorrector, expander: SynonymExpander) -> None:
        self._corrector = corrector
        self._expander = expander

    def process(self, raw: str | None) -> ProcessedQuery:
        """Run the pipeline for one input string."""

        raw_text = raw or ""
        normalized = normalize(raw_text)
        tokens = tokenize(normalized)

        correction = self._corrector.correct_query_tokens(tokens)
        corrected_text = " ".join(correction.corrected)

        # Reuse the normalized text verbatim when nothing changed.
        final = corrected_text if correction.changed else normalized
        expanded = " ".join(self._expander.expand(correction.corrected))

        return ProcessedQuery(
            raw=raw_text,
            normalized=normalized,
            final=final,
            suggestion=corrected_text if correction.changed else None,
            expanded=expanded,
        )


def build_default_processor() -> QueryProcessor:
    """Return a processor backed by the built-in store vocabulary."""

    return QueryProcessor(SpellCorrector(DOMAIN_DICTIONARY), SynonymExpander(SYNONYMS))


_DEFAULT_PROCESSOR = build_default_processor()


def process_query(raw: str | None) -> ProcessedQuery:
    """Process ``raw`` with the default vocabulary."""

    return _DEFAULT_PROCESSOR.process(raw)


__all__ = ["ProcessedQuery", "QueryProcessor", "build_default_processor", "process_query"]
