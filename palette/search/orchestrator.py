"""Command palette core: merges local navigation and remote data search."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field, replace
from typing import Callable, Literal, Sequence

import logfire

from ..config import settings
from ..logging import SearchEventLogger, _ensure_logfire
from ..services.query import ProcessedQuery, QueryProcessor, build_default_processor
from .contracts import NavEntry, NavNode, PaletteStatus, QuickAction, RemoteResultItem, RemoteResults
from .favorites import FavoritesStore, PinnedPage, RecentsStore
from .gateway import RemoteSearchGateway
from .nav_index import FlatIndex, build_index, filter_nav_tree, search_index
from .routing import action_path
from .session import RemoteOutcome, RemoteSearchSession, SessionState

PINNED_SECTION_LIMIT = 8

RowKind = Literal["favorite", "recent", "nav", "data"]
AccessPredicate = Callable[[str | None, str], bool]
Listener = Callable[["PaletteSnapshot"], None]


@dataclass(frozen=True, slots=True)
class PaletteRow:
    """One selectable line of the palette."""

    kind: RowKind
    key: str
    title: str
    subtitle: str | None = None
    icon: str | None = None
    path: str | None = None
    item: RemoteResultItem | None = None
    starred: bool = False

    @property
    def navigable(self) -> bool:
        return self.kind != "data"

    def as_page(self) -> PinnedPage | None:
        """Page this row opens, or ``None`` for data rows."""

        if not self.navigable or self.path is None:
            return None
        return PinnedPage(
            path=self.path, title=self.title, icon=self.icon, parent_title=self.subtitle
        )


@dataclass(frozen=True, slots=True)
class PaletteSnapshot:
    """Immutable view of the palette handed to the presentation layer."""

    status: PaletteStatus = PaletteStatus.CLOSED
    query: str = ""
    processed: ProcessedQuery = field(default_factory=ProcessedQuery)
    local_results: tuple[NavEntry, ...] = ()
    remote_results: RemoteResults = field(default_factory=RemoteResults)
    favorites: tuple[PinnedPage, ...] = ()
    recents: tuple[PinnedPage, ...] = ()
    combined_items: tuple[PaletteRow, ...] = ()
    cursor: int = 0
    loading: bool = False
    error: str | None = None

    @property
    def selected(self) -> PaletteRow | None:
        if 0 <= self.cursor < len(self.combined_items):
            return self.combined_items[self.cursor]
        return None


def _clamp(cursor: int, length: int) -> int:
    return max(0, min(cursor, length - 1))


class SearchOrchestrator:
    """Stateful controller behind the global command palette.

    Every mutation (open, keystroke, remote settle, close) rebuilds a
    :class:`PaletteSnapshot` and pushes it to subscribers. Local navigation
    results are recomputed synchronously on each keystroke; the remote search
    runs through a debounced single-flight session whose superseded requests
    are cancelled rather than filtered.
    """

    def __init__(
        self,
        *,
        menu: Sequence[NavNode],
        role: str | None,
        can_access_path: AccessPredicate,
        gateway: RemoteSearchGateway,
        navigate: Callable[[str], None],
        favorites: FavoritesStore,
        recents: RecentsStore,
        processor: QueryProcessor | None = None,
        debounce_seconds: float | None = None,
        min_term_length: int | None = None,
        event_logger: SearchEventLogger | None = None,
        on_focus: Callable[[], None] | None = None,
    ) -> None:
        _ensure_logfire()
        self._menu = tuple(menu)
        self._can_access_path = can_access_path
        self._navigate = navigate
        self._favorites = favorites
        self._recents = recents
        self._processor = processor or build_default_processor()
        self._on_focus = on_focus
        if event_logger is None and settings.search_log_path is not None:
            event_logger = SearchEventLogger(settings.search_log_path)
        self._event_logger = event_logger
        self._log_tasks: set[asyncio.Task[None]] = set()
        self._listeners: list[Listener] = []
        self._session = RemoteSearchSession(
            gateway,
            self._on_remote_settled,
            debounce_seconds=(
                settings.debounce_seconds if debounce_seconds is None else debounce_seconds
            ),
            min_term_length=(
                settings.min_term_length if min_term_length is None else min_term_length
            ),
        )
        self._role = role
        self._index: FlatIndex = self._build_index()
        self._snapshot = PaletteSnapshot()

    @property
    def snapshot(self) -> PaletteSnapshot:
        return self._snapshot

    @property
    def index(self) -> FlatIndex:
        return self._index

    @property
    def session_state(self) -> SessionState:
        return self._session.state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for new snapshots; returns an unsubscribe hook."""

        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def set_role(self, role: str | None) -> None:
        """Switch the role whose visibility rules gate the index."""

        self._role = role
        self._index = self._build_index()
        if self._snapshot.status is not PaletteStatus.CLOSED:
            self._refresh_pins()
            self._publish(local_results=self._local_results(self._snapshot.processed))

    def open(self) -> None:
        """Show the palette with an empty query and the cursor on the first row."""

        self._session.cancel_all()
        processed = self._processor.process("")
        self._snapshot = PaletteSnapshot(status=PaletteStatus.OPEN_EMPTY)
        self._refresh_pins()
        self._publish(
            query="",
            processed=processed,
            local_results=self._local_results(processed),
            cursor=0,
        )
        self._schedule_focus()

    def keystroke(self, text: str) -> None:
        """Apply the current input text."""

        if self._snapshot.status is PaletteStatus.CLOSED:
            return

        processed = self._processor.process(text)
        local_results = self._local_results(processed)

        if not text.strip():
            self._session.cancel_all()
            self._publish(
                status=PaletteStatus.OPEN_EMPTY,
                query=text,
                processed=processed,
                local_results=local_results,
                remote_results=RemoteResults(),
                cursor=0,
                loading=False,
                error=None,
            )
            return

        self._publish(
            status=PaletteStatus.OPEN_QUERY_LOCAL_ONLY,
            query=text,
            processed=processed,
            local_results=local_results,
            remote_results=RemoteResults(term=processed.final),
            cursor=0,
            loading=True,
            error=None,
        )
        self._session.start(processed.final)

    def close(self) -> None:
        """Hide the palette, aborting any pending remote search."""

        self._session.cancel_all()
        self._snapshot = PaletteSnapshot()
        self._emit()

    async def aclose(self) -> None:
        """Close the palette and wait for background work to finish."""

        self.close()
        await self._session.aclose()
        if self._log_tasks:
            await asyncio.gather(*self._log_tasks)

    def handle_key(self, key: str) -> bool:
        """Apply a keyboard event; returns ``True`` when the key was consumed."""

        if self._snapshot.status is PaletteStatus.CLOSED:
            return False

        length = len(self._snapshot.combined_items)
        if key == "ArrowDown":
            self._publish(cursor=_clamp(self._snapshot.cursor + 1, length))
            return True
        if key == "ArrowUp":
            self._publish(cursor=_clamp(self._snapshot.cursor - 1, length))
            return True
        if key == "Enter":
            self.activate()
            return True
        if key == "Escape":
            self.close()
            return True
        return False

    def move_to(self, index: int) -> None:
        """Place the cursor on ``index`` (for example on hover)."""

        self._publish(cursor=_clamp(index, len(self._snapshot.combined_items)))

    def activate(self, index: int | None = None) -> str | None:
        """Run the primary action of a row and return the navigated path."""

        row = self._row_at(index)
        if row is None:
            return None

        if row.item is not None:
            return self._go(action_path(row.item, QuickAction.OPEN, self._term()), row)

        page = row.as_page()
        if page is None:
            return None
        self._recents.push(page)
        return self._go(page.path, row)

    def quick_action(self, index: int, action: QuickAction | str) -> str | None:
        """Run a secondary action of a data row without activating the row."""

        row = self._row_at(index)
        if row is None or row.item is None:
            return None
        return self._go(action_path(row.item, QuickAction(action), self._term()), row)

    def toggle_favorite(self, index: int) -> None:
        """Star or unstar a navigable row; the palette stays open."""

        row = self._row_at(index)
        page = row.as_page() if row is not None else None
        if page is None:
            return
        self._favorites.toggle_favorite(page)
        self._refresh_pins()
        self._publish()

    def dismiss_error(self) -> None:
        """Hide the inline remote search error."""

        if self._snapshot.error is not None:
            self._publish(error=None)

    def _build_index(self) -> FlatIndex:
        tree = filter_nav_tree(self._menu, self._can_access)
        return build_index(tree)

    def _can_access(self, path: str) -> bool:
        return self._can_access_path(self._role, path)

    def _term(self) -> str:
        return self._snapshot.processed.final.strip()

    def _local_results(self, processed: ProcessedQuery) -> tuple[NavEntry, ...]:
        return tuple(search_index(self._index, processed))

    def _refresh_pins(self) -> None:
        favorites = tuple(
            page for page in self._favorites.favorites() if self._can_access(page.path)
        )
        recents = tuple(page for page in self._recents.recents() if self._can_access(page.path))
        self._snapshot = replace(self._snapshot, favorites=favorites, recents=recents)

    def _row_at(self, index: int | None) -> PaletteRow | None:
        snapshot = self._snapshot
        if snapshot.status is PaletteStatus.CLOSED:
            return None
        position = snapshot.cursor if index is None else index
        if 0 <= position < len(snapshot.combined_items):
            return snapshot.combined_items[position]
        return None

    def _go(self, path: str, row: PaletteRow) -> str:
        query = self._snapshot.query
        normalized = self._snapshot.processed.normalized
        logfire.info("palette.activate", kind=row.kind, key=row.key, path=path)
        self._log_event(query=query, normalized=normalized, clicked=row.key)
        self._navigate(path)
        self.close()
        return path

    def _schedule_focus(self) -> None:
        if self._on_focus is None:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self._on_focus()
        else:
            loop.call_soon(self._on_focus)

    def _on_remote_settled(self, outcome: RemoteOutcome) -> None:
        if self._snapshot.status not in {
            PaletteStatus.OPEN_QUERY_LOCAL_ONLY,
            PaletteStatus.OPEN_QUERY_MERGED,
        }:
            return

        if outcome.state is SessionState.FAILED:
            remote, error = RemoteResults(term=outcome.term), outcome.error
        else:
            remote, error = outcome.results, None

        self._publish(
            status=PaletteStatus.OPEN_QUERY_MERGED,
            remote_results=remote,
            loading=False,
            error=error,
        )

        if (
            outcome.state is SessionState.RESOLVED
            and remote.count == 0
            and not self._snapshot.local_results
        ):
            self._log_event(
                query=self._snapshot.query,
                normalized=self._snapshot.processed.normalized,
                zero=True,
            )

    def _log_event(self, **payload: object) -> None:
        if self._event_logger is None:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return
        task = loop.create_task(self._event_logger.log(**payload))  # type: ignore[arg-type]
        self._log_tasks.add(task)
        task.add_done_callback(self._log_tasks.discard)

    def _combine(self, snapshot: PaletteSnapshot) -> tuple[PaletteRow, ...]:
        if snapshot.status is PaletteStatus.CLOSED:
            return ()

        nav_rows = [self._nav_row(entry) for entry in snapshot.local_results]
        if not snapshot.query.strip():
            favorite_rows = [
                self._pinned_row("favorite", page, starred=True)
                for page in snapshot.favorites[:PINNED_SECTION_LIMIT]
            ]
            recent_rows = [
                self._pinned_row("recent", page, starred=self._favorites.is_favorite(page.path))
                for page in snapshot.recents[:PINNED_SECTION_LIMIT]
            ]
            return tuple(favorite_rows + recent_rows + nav_rows)

        data_rows = [
            PaletteRow(
                kind="data",
                key=item.key,
                title=item.label,
                subtitle=item.subtitle or item.snippet,
                item=item,
            )
            for item in snapshot.remote_results.items
        ]
        return tuple(data_rows + nav_rows)

    def _nav_row(self, entry: NavEntry) -> PaletteRow:
        return PaletteRow(
            kind="nav",
            key=entry.path,
            title=entry.title,
            subtitle=entry.parent_title,
            icon=entry.icon,
            path=entry.path,
            starred=self._favorites.is_favorite(entry.path),
        )

    @staticmethod
    def _pinned_row(kind: RowKind, page: PinnedPage, *, starred: bool) -> PaletteRow:
        return PaletteRow(
            kind=kind,
            key=page.path,
            title=page.title,
            subtitle=page.parent_title,
            icon=page.icon,
            path=page.path,
            starred=starred,
        )

    def _publish(self, **changes: object) -> None:
        self._snapshot = replace(self._snapshot, **changes)
        self._emit()

    def _emit(self) -> None:
        combined = self._combine(self._snapshot)
        self._snapshot = replace(
            self._snapshot,
            combined_items=combined,
            cursor=_clamp(self._snapshot.cursor, len(combined)),
        )
        for listener in list(self._listeners):
            listener(self._snapshot)


__all__ = ["PaletteRow", "PaletteSnapshot", "SearchOrchestrator"]
