"""Favorites and recents collaborators consumed by the palette."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import List, Protocol

FAVORITES_LIMIT = 30
RECENTS_LIMIT = 15


@dataclass(frozen=True)
class PinnedPage:
    """A page remembered by path, either starred or recently opened."""

    path: str
    title: str
    icon: str | None = None
    parent_title: str | None = None
    ts: float = field(default_factory=time.time)


class FavoritesStore(Protocol):
    """Key-value store of starred pages keyed by path."""

    def favorites(self) -> List[PinnedPage]: ...

    def is_favorite(self, path: str) -> bool: ...

    def toggle_favorite(self, page: PinnedPage) -> None: ...


class RecentsStore(Protocol):
    """Ordered list of recently opened pages, newest first."""

    def recents(self) -> List[PinnedPage]: ...

    def push(self, page: PinnedPage) -> None: ...


class InMemoryFavorites:
    """Favorites kept in process memory, newest first."""

    def __init__(self, limit: int = FAVORITES_LIMIT) -> None:
        self._limit = limit
        self._pages: List[PinnedPage] = []

    def favorites(self) -> List[PinnedPage]:
        return list(self._pages)

    def is_favorite(self, path: str) -> bool:
        return any(page.path == path for page in self._pages)

    def toggle_favorite(self, page: PinnedPage) -> None:
        """Remove the page when already starred, otherwise star it."""

        if self.is_favorite(page.path):
            self._pages = [existing for existing in self._pages if existing.path != page.path]
            return
        self._pages = [page, *self._pages][: self._limit]

    def remove(self, path: str) -> None:
        self._pages = [page for page in self._pages if page.path != path]

    def clear(self) -> None:
        self._pages = []


class InMemoryRecents:
    """Recently opened pages, de-duplicated by path."""

    def __init__(self, limit: int = RECENTS_LIMIT) -> None:
        self._limit = limit
        self._pages: List[PinnedPage] = []

    def recents(self) -> List[PinnedPage]:
        return sorted(self._pages, key=lambda page: page.ts, reverse=True)

    def push(self, page: PinnedPage) -> None:
        """Record a visit, moving an already known path to the front."""

        others = [existing for existing in self._pages if existing.path != page.path]
        self._pages = [page, *others][: self._limit]


__all__ = [
    "FAVORITES_LIMIT",
    "FavoritesStore",
    "InMemoryFavorites",
    "InMemoryRecents",
    "PinnedPage",
    "RECENTS_LIMIT",
    "RecentsStore",
]
