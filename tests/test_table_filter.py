"""Tests for typo-tolerant table filtering."""

from __future__ import annotations

from typing import Dict, List

import pytest

from palette.services.table_filter import TableFilter

ROWS: List[Dict[str, str]] = [
    {"name": "شارژر سامسونگ", "sku": "CH-100"},
    {"name": "قاب آیفون", "sku": "CS-257"},
    {"name": "کابل شیائومی", "sku": "CB-389"},
]


@pytest.fixture
def table() -> TableFilter[Dict[str, str]]:
    return TableFilter(ROWS, lambda row: f"{row['name']} {row['sku']}")


def test_empty_query_returns_every_row(table: TableFilter[Dict[str, str]]) -> None:
    result = table.apply("  ")

    assert result.rows == ROWS
    assert result.suggestion is None


def test_typo_still_matches(table: TableFilter[Dict[str, str]]) -> None:
    result = table.apply("شارزر")

    assert result.rows == [ROWS[0]]
    assert result.suggestion is None


def test_every_token_must_match(table: TableFilter[Dict[str, str]]) -> None:
    assert table.apply("قاب آیفون").rows == [ROWS[1]]


def test_punctuation_in_query_splits_tokens(table: TableFilter[Dict[str, str]]) -> None:
    assert table.apply("ch-100").rows == [ROWS[0]]


def test_no_match_offers_suggestion_for_last_token(
    table: TableFilter[Dict[str, str]],
) -> None:
    result = table.apply("سامسونگ قاپ")

    assert result.rows == []
    assert result.suggestion == "قاب"


def test_no_suggestion_when_nothing_is_close(table: TableFilter[Dict[str, str]]) -> None:
    result = table.apply("zzzzzz")

    assert result.rows == []
    assert result.suggestion is None
