"""Logfire setup and search analytics logging."""

from __future__ import annotations

import asyncio
import json
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

import logfire


_LOGFIRE_READY = False


def _configure_logfire() -> None:
    """Configure Logfire instrumentation if it has not been configured yet."""

    token = os.getenv("LOGFIRE_API_KEY")
    if token:
        logfire.configure(token=token)
    else:
        logfire.configure(send_to_logfire="if-token-present")


def _ensure_logfire() -> None:
    """Initialize Logfire once for the process."""

    global _LOGFIRE_READY
    if not _LOGFIRE_READY:
        _configure_logfire()
        _LOGFIRE_READY = True


class SearchEventLogger:
    """Append search analytics events into a JSON lines file."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._lock = asyncio.Lock()
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.touch(exist_ok=True)

    @property
    def path(self) -> Path:
        return self._path

    async def log(
        self,
        *,
        query: str,
        normalized: str,
        zero: bool = False,
        clicked: str | None = None,
    ) -> None:
        """Persist one search event with automatic timestamping."""

        record: Dict[str, Any] = {
            "query": query,
            "normalized": normalized,
            "zero": zero,
            "clicked": clicked,
            "timestamp": datetime.now(tz=timezone.utc).isoformat(),
        }
        json_line = json.dumps(record, ensure_ascii=False)
        async with self._lock:
            await asyncio.to_thread(self._append_line, json_line)

    def _append_line(self, line: str) -> None:
        """Write a line to the log file (runs inside a thread)."""

        with self._path.open("a", encoding="utf-8") as fp:
            fp.write(line + "\n")


__all__ = ["SearchEventLogger", "_ensure_logfire"]
