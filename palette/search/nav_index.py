"""Flattened navigation index and its synchronous substring search."""

from __future__ import annotations

from typing import Callable, Sequence

from cachetools import LRUCache, cached

from ..services.query import ProcessedQuery
from .contracts import NavEntry, NavNode

EMPTY_QUERY_LIMIT = 30
QUERY_LIMIT = 50

FlatIndex = tuple[NavEntry, ...]
PathPredicate = Callable[[str], bool]


def filter_nav_tree(tree: Sequence[NavNode], can_access: PathPredicate) -> tuple[NavNode, ...]:
    """Drop nodes the current role may not open.

    Group nodes without a path are kept only while at least one descendant
    survives. A node whose own path is forbidden but which still has visible
    children is kept as a path-less group so only the children are indexed.
    """

    kept: list[NavNode] = []
    for node in tree:
        children = filter_nav_tree(node.children, can_access)
        path = node.path if node.path and can_access(node.path) else None
        if path is None and not children:
            continue
        kept.append(node.model_copy(update={"path": path, "children": children}))
    return tuple(kept)


def _flatten(nodes: Sequence[NavNode], parent_title: str | None, out: list[NavEntry]) -> None:
    for node in nodes:
        if node.path:
            out.append(
                NavEntry(
                    id=node.id,
                    title=node.name,
                    path=node.path,
                    icon=node.icon,
                    parent_title=parent_title,
                )
            )
        if node.children:
            _flatten(node.children, node.name, out)


@cached(cache=LRUCache(maxsize=32))
def build_index(tree: tuple[NavNode, ...]) -> FlatIndex:
    """Depth-first flatten of the menu, computed once per distinct tree."""

    entries: list[NavEntry] = []
    _flatten(tree, None, entries)
    return tuple(entries)


def _haystack(entry: NavEntry) -> str:
    return f"{entry.title} {entry.parent_title or ''} {entry.path}".lower()


def search_index(index: FlatIndex, query: ProcessedQuery) -> list[NavEntry]:
    """Return entries containing the final query, in index order."""

    term = query.final.lower().strip()
    if not term:
        return list(index[:EMPTY_QUERY_LIMIT])

    matches: list[NavEntry] = []
    for entry in index:
        if term in _haystack(entry):
            matches.append(entry)
            if len(matches) >= QUERY_LIMIT:
                break
    return matches


__all__ = [
    "EMPTY_QUERY_LIMIT",
    "FlatIndex",
    "QUERY_LIMIT",
    "build_index",
    "filter_nav_tree",
    "search_index",
]
