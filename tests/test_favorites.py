"""Tests for the in-memory favorites and recents stores."""

from __future__ import annotations

from palette.search.favorites import InMemoryFavorites, InMemoryRecents, PinnedPage


def _page(path: str, ts: float = 0.0) -> PinnedPage:
    return PinnedPage(path=path, title=path.strip("/") or "home", ts=ts)


def test_toggle_adds_then_removes() -> None:
    store = InMemoryFavorites()

    store.toggle_favorite(_page("/products"))
    assert store.is_favorite("/products")

    store.toggle_favorite(_page("/products"))
    assert not store.is_favorite("/products")
    assert store.favorites() == []


def test_favorites_are_newest_first_and_capped() -> None:
    store = InMemoryFavorites(limit=2)
    for path in ("/a", "/b", "/c"):
        store.toggle_favorite(_page(path))

    assert [page.path for page in store.favorites()] == ["/c", "/b"]


def test_remove_and_clear() -> None:
    store = InMemoryFavorites()
    store.toggle_favorite(_page("/a"))
    store.toggle_favorite(_page("/b"))

    store.remove("/a")
    assert [page.path for page in store.favorites()] == ["/b"]

    store.clear()
    assert store.favorites() == []


def test_recents_deduplicate_by_path() -> None:
    store = InMemoryRecents()
    store.push(_page("/a", ts=1.0))
    store.push(_page("/b", ts=2.0))
    store.push(_page("/a", ts=3.0))

    assert [page.path for page in store.recents()] == ["/a", "/b"]


def test_recents_are_capped() -> None:
    store = InMemoryRecents(limit=3)
    for index in range(5):
        store.push(_page(f"/p/{index}", ts=float(index)))

    assert [page.path for page in store.recents()] == ["/p/4", "/p/3", "/p/2"]
