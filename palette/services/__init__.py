"""Text processing pipeline shared by every search surface."""

from __future__ import annotations

from .edit_distance import approx_includes, damerau_levenshtein, distance, max_distance_for
from .preprocess import normalize, normalize_index_text, tokenize
from .query import ProcessedQuery, QueryProcessor, build_default_processor, process_query
from .spelling import QueryCorrection, SpellCorrector, TokenCorrection
from .synonyms import SynonymExpander
from .table_filter import TableFilter, TableFilterResult

__all__ = [
    "ProcessedQuery",
    "QueryCorrection",
    "QueryProcessor",
    "SpellCorrector",
    "SynonymExpander",
    "TableFilter",
    "TableFilterResult",
    "TokenCorrection",
    "approx_includes",
    "build_default_processor",
    "damerau_levenshtein",
    "distance",
    "max_distance_for",
    "normalize",
    "normalize_index_text",
    "process_query",
    "tokenize",
]
