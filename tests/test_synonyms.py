"""Tests for static synonym expansion."""

from __future__ import annotations

from palette.services.synonyms import MAX_EXPANDED_TOKENS, SynonymExpander
from palette.services.vocabulary import SYNONYMS


def test_synonyms_follow_original_tokens() -> None:
    expander = SynonymExpander(SYNONYMS)

    assert expander.expand(["گوشی"]) == ["گوشی", "موبایل", "iphone"]
    assert expander.expand(["گوشی", "موبایل"]) == ["گوشی", "موبایل", "iphone"]
    assert expander.expand(["کابل"]) == ["کابل"]


def test_expansion_is_capped() -> None:
    table = {"a": tuple(f"s{i}" for i in range(20))}
    expanded = SynonymExpander(table).expand(["a"])

    assert len(expanded) == MAX_EXPANDED_TOKENS
    assert expanded[0] == "a"


def test_originals_lead_even_when_capped() -> None:
    table = {"x": ("s1", "s2", "s3")}
    tokens = [f"t{i}" for i in range(7)] + ["x"]

    assert SynonymExpander(table).expand(tokens) == tokens


def test_empty_input() -> None:
    assert SynonymExpander(SYNONYMS).expand([]) == []
