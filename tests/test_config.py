"""Tests for environment-driven settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from palette.config import get_settings

_KEYS = (
    "PALETTE_API_BASE_URL",
    "PALETTE_SEARCH_ENDPOINT",
    "PALETTE_SEARCH_LIMIT",
    "PALETTE_DEBOUNCE_SECONDS",
    "PALETTE_MIN_TERM_LENGTH",
    "PALETTE_REQUEST_TIMEOUT_SECONDS",
    "PALETTE_SEARCH_LOG_PATH",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults() -> None:
    config = get_settings()

    assert config.search_limit == 24
    assert config.debounce_seconds == pytest.approx(0.22)
    assert config.min_term_length == 2
    assert config.search_log_path is None
    assert config.search_url == "http://localhost:3001/api/search"


def test_values_are_read_from_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("PALETTE_API_BASE_URL", "https://shop.example/")
    monkeypatch.setenv("PALETTE_SEARCH_ENDPOINT", "search")
    monkeypatch.setenv("PALETTE_SEARCH_LIMIT", "10")
    monkeypatch.setenv("PALETTE_DEBOUNCE_SECONDS", "0.5")
    monkeypatch.setenv("PALETTE_SEARCH_LOG_PATH", str(tmp_path / "events.jsonl"))

    config = get_settings()

    assert config.search_url == "https://shop.example/search"
    assert config.search_limit == 10
    assert config.debounce_seconds == pytest.approx(0.5)
    assert config.search_log_path == (tmp_path / "events.jsonl").resolve()


@pytest.mark.parametrize("value", ["abc", "0", "-3"])
def test_invalid_integers_are_rejected(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("PALETTE_SEARCH_LIMIT", value)

    with pytest.raises(RuntimeError):
        get_settings()


def test_non_positive_debounce_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PALETTE_DEBOUNCE_SECONDS", "0")

    with pytest.raises(RuntimeError):
        get_settings()
