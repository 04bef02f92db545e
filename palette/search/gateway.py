"""HTTP client for the multi-domain server search endpoint."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Mapping

import httpx
from pydantic import ValidationError

from ..config import Settings, settings
from .contracts import REMOTE_RESULT_ADAPTER, RemoteResultItem, RemoteResults

logger = logging.getLogger(__name__)

SEARCH_FAILED_MESSAGE = "خطا در جستجوی سراسری"
UNKNOWN_ERROR_MESSAGE = "خطای ناشناخته"

TokenProvider = Callable[[], str | None]


class PaletteError(Exception):
    """Base class for errors raised by the search palette."""


class SearchNetworkError(PaletteError):
    """The remote search call failed or returned a non-success status.

    Cancellation of a superseded request is not a network error; it surfaces
    as :class:`asyncio.CancelledError` and must never reach the user.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_message(response: httpx.Response) -> str:
    """Extract the user-facing message from a failure body."""

    try:
        payload = response.json()
    except ValueError:
        return SEARCH_FAILED_MESSAGE
    if isinstance(payload, Mapping):
        message = payload.get("message")
        if isinstance(message, str) and message.strip():
            return message
    return SEARCH_FAILED_MESSAGE


def parse_items(raw_items: Iterable[Any]) -> list[RemoteResultItem]:
    """Validate raw hits, dropping unknown domains and duplicate identities."""

    items: list[RemoteResultItem] = []
    seen: set[str] = set()
    for raw in raw_items:
        try:
            item = REMOTE_RESULT_ADAPTER.validate_python(raw)
        except ValidationError:
            logger.debug("Dropping malformed search hit: %r", raw)
            continue
        if item.key in seen:
            continue
        seen.add(item.key)
        items.append(item)
    return items


def group_by_domain(term: str, items: Iterable[RemoteResultItem]) -> RemoteResults:
    """Bucket hits by domain, keeping the server's order inside each bucket."""

    groups: dict[str, list[RemoteResultItem]] = {}
    for item in items:
        groups.setdefault(item.domain, []).append(item)
    return RemoteResults(
        term=term,
        groups={domain: tuple(bucket) for domain, bucket in groups.items()},
    )


def create_search_client(config: Settings = settings) -> httpx.AsyncClient:
    """Return an HTTP client pointed at the configured API."""

    return httpx.AsyncClient(
        base_url=config.api_base_url, timeout=config.request_timeout_seconds
    )


class RemoteSearchGateway:
    """Issue one authorized search request and decode its payload."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        token_provider: TokenProvider,
        *,
        endpoint: str | None = None,
        limit: int | None = None,
    ) -> None:
        self._client = client
        self._token_provider = token_provider
        self._endpoint = endpoint or settings.search_endpoint
        self._limit = limit or settings.search_limit

    @property
    def authorized(self) -> bool:
        """Whether a bearer token is currently available."""

        return bool(self._token_provider())

    async def search(self, term: str) -> RemoteResults:
        """Fetch hits for ``term``.

        Raises :class:`SearchNetworkError` on transport failures, non-success
        statuses and undecodable bodies. Task cancellation propagates unchanged
        so callers can tell an aborted request from a failed one.
        """

        token = self._token_provider()
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        try:
            response = await self._client.get(
                self._endpoint,
                params={"q": term, "limit": self._limit},
                headers=headers,
            )
        except httpx.HTTPError as exc:
            raise SearchNetworkError(UNKNOWN_ERROR_MESSAGE) from exc

        if response.is_error:
            raise SearchNetworkError(
                _error_message(response), status_code=response.status_code
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise SearchNetworkError(UNKNOWN_ERROR_MESSAGE) from exc

        raw_items = payload.get("items") if isinstance(payload, Mapping) else None
        if not isinstance(raw_items, list):
            raw_items = []
        return group_by_domain(term, parse_items(raw_items))


__all__ = [
    "PaletteError",
    "RemoteSearchGateway",
    "SEARCH_FAILED_MESSAGE",
    "SearchNetworkError",
    "UNKNOWN_ERROR_MESSAGE",
    "create_search_client",
    "group_by_domain",
    "parse_items",
]
