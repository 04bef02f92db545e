"""Configuration helpers for the search palette."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env if present to simplify local development.
load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Holds configuration derived from environment variables."""

    api_base_url: str
    search_endpoint: str
    search_limit: int
    debounce_seconds: float
    min_term_length: int
    request_timeout_seconds: float
    search_log_path: Path | None

    @property
    def search_url(self) -> str:
        """Return the absolute URL of the remote search endpoint."""

        return self.api_base_url.rstrip("/") + "/" + self.search_endpoint.lstrip("/")


def _int_from_env(key: str, default: int) -> int:
    """Parse a positive integer from the environment."""

    raw_value = os.getenv(key)
    if raw_value is None:
        return default

    try:
        value = int(raw_value)
    except ValueError as exc:
        raise RuntimeError(f"Environment variable '{key}' must be an integer") from exc

    if value <= 0:
        raise RuntimeError(f"Environment variable '{key}' must be greater than zero")

    return value


def _positive_float_from_env(key: str, default: float) -> float:
    """Parse a strictly positive floating-point value from the environment."""

    raw_value = os.getenv(key)
    if raw_value is None:
        return default

    try:
        value = float(raw_value)
    except ValueError as exc:
        raise RuntimeError(
            f"Environment variable '{key}' must be a floating-point number"
        ) from exc

    if value <= 0:
        raise RuntimeError(f"Environment variable '{key}' must be greater than zero")

    return value


def get_settings() -> Settings:
    """Create settings populated from the environment."""

    log_path_raw = os.getenv("PALETTE_SEARCH_LOG_PATH")
    search_log_path = (
        Path(log_path_raw).expanduser().resolve() if log_path_raw else None
    )

    return Settings(
        api_base_url=os.getenv("PALETTE_API_BASE_URL", "http://localhost:3001"),
        search_endpoint=os.getenv("PALETTE_SEARCH_ENDPOINT", "/api/search"),
        search_limit=_int_from_env("PALETTE_SEARCH_LIMIT", 24),
        debounce_seconds=_positive_float_from_env("PALETTE_DEBOUNCE_SECONDS", 0.22),
        min_term_length=_int_from_env("PALETTE_MIN_TERM_LENGTH", 2),
        request_timeout_seconds=_positive_float_from_env(
            "PALETTE_REQUEST_TIMEOUT_SECONDS", 10.0
        ),
        search_log_path=search_log_path,
    )


settings = get_settings()


__all__ = ["Settings", "get_settings", "settings"]
