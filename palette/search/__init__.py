"""Search surfaces: command palette, header search and their collaborators."""

from __future__ import annotations

from .contracts import (
    NavEntry,
    NavNode,
    PaletteStatus,
    QuickAction,
    RemoteResultItem,
    RemoteResults,
    SearchDomain,
)
from .favorites import InMemoryFavorites, InMemoryRecents, PinnedPage
from .gateway import PaletteError, RemoteSearchGateway, SearchNetworkError, create_search_client
from .header import HeaderSearch
from .nav_index import build_index, filter_nav_tree, search_index
from .orchestrator import PaletteRow, PaletteSnapshot, SearchOrchestrator
from .routing import action_path, available_actions, default_path
from .session import RemoteOutcome, RemoteSearchSession, SessionState

__all__ = [
    "HeaderSearch",
    "InMemoryFavorites",
    "InMemoryRecents",
    "NavEntry",
    "NavNode",
    "PaletteError",
    "PaletteRow",
    "PaletteSnapshot",
    "PaletteStatus",
    "PinnedPage",
    "QuickAction",
    "RemoteOutcome",
    "RemoteResultItem",
    "RemoteResults",
    "RemoteSearchGateway",
    "RemoteSearchSession",
    "SearchDomain",
    "SearchNetworkError",
    "SearchOrchestrator",
    "SessionState",
    "action_path",
    "available_actions",
    "build_index",
    "create_search_client",
    "default_path",
    "filter_nav_tree",
    "search_index",
]
