"""Debounced, single-flight remote search session."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

import logfire

from .contracts import RemoteResults
from .gateway import RemoteSearchGateway, SearchNetworkError

DEFAULT_DEBOUNCE_SECONDS = 0.22
MIN_TERM_LENGTH = 2


class SessionState(str, Enum):
    """Lifecycle of the latest remote search request."""

    IDLE = "idle"
    DEBOUNCING = "debouncing"
    IN_FLIGHT = "in_flight"
    RESOLVED = "resolved"
    FAILED = "failed"
    ABORTED = "aborted"


@dataclass(frozen=True, slots=True)
class RemoteOutcome:
    """Settled result of the most recent search request."""

    term: str
    state: SessionState
    results: RemoteResults = field(default_factory=RemoteResults)
    error: str | None = None


SettleCallback = Callable[[RemoteOutcome], None]


class RemoteSearchSession:
    """Own at most one debounce timer and one in-flight request.

    ``start`` supersedes whatever is pending: the timer is cleared and the
    request task is cancelled before anything new is scheduled. A cancelled
    request never calls ``on_settled``.
    """

    def __init__(
        self,
        gateway: RemoteSearchGateway,
        on_settled: SettleCallback,
        *,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        min_term_length: int = MIN_TERM_LENGTH,
    ) -> None:
        self._gateway = gateway
        self._on_settled = on_settled
        self._debounce_seconds = debounce_seconds
        self._min_term_length = min_term_length
        self._state = SessionState.IDLE
        self._timer: asyncio.TimerHandle | None = None
        self._task: asyncio.Task[None] | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def pending(self) -> bool:
        """Whether a timer or request is outstanding."""

        return self._state in {SessionState.DEBOUNCING, SessionState.IN_FLIGHT}

    def start(self, term: str) -> None:
        """Debounce a search for ``term``, cancelling any earlier one."""

        self.cancel_all()
        term = term.strip()
        if len(term) < self._min_term_length or not self._gateway.authorized:
            self._state = SessionState.IDLE
            self._on_settled(RemoteOutcome(term=term, state=SessionState.IDLE))
            return

        loop = asyncio.get_running_loop()
        self._state = SessionState.DEBOUNCING
        self._timer = loop.call_later(self._debounce_seconds, self._fire, term)

    def cancel_all(self) -> None:
        """Clear the pending timer and abort the in-flight request."""

        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        if self._task is not None:
            self._task.cancel()
            self._task = None
        if self.pending:
            self._state = SessionState.ABORTED

    async def aclose(self) -> None:
        """Cancel everything and wait for the aborted request to unwind."""

        task = self._task
        self.cancel_all()
        if task is not None:
            try:
                await task
            except asyncio.CancelledError:
                pass

    def _fire(self, term: str) -> None:
        self._timer = None
        self._state = SessionState.IN_FLIGHT
        self._task = asyncio.get_running_loop().create_task(self._run(term))

    async def _run(self, term: str) -> None:
        try:
            results = await self._gateway.search(term)
        except SearchNetworkError as exc:
            logfire.warning(
                "palette.remote.failed",
                term=term,
                status_code=exc.status_code,
                error=exc.message,
            )
            self._settle(RemoteOutcome(term=term, state=SessionState.FAILED, error=exc.message))
            return

        logfire.info("palette.remote.resolved", term=term, count=results.count)
        self._settle(RemoteOutcome(term=term, state=SessionState.RESOLVED, results=results))

    def _settle(self, outcome: RemoteOutcome) -> None:
        self._task = None
        self._state = outcome.state
        # Runs inside the request task, which nobody awaits.
        try:
            self._on_settled(outcome)
        except Exception as exc:
            logfire.exception(
                "palette.remote.settle_failed",
                term=outcome.term,
                state=outcome.state.value,
                error=str(exc),
            )


__all__ = [
    "DEFAULT_DEBOUNCE_SECONDS",
    "MIN_TERM_LENGTH",
    "RemoteOutcome",
    "RemoteSearchSession",
    "SessionState",
]
