"""Tests for the remote search gateway."""

from __future__ import annotations

from typing import Any, Callable, Dict, List

import httpx
import pytest

from palette.config import Settings
from palette.search.gateway import (
    SEARCH_FAILED_MESSAGE,
    UNKNOWN_ERROR_MESSAGE,
    RemoteSearchGateway,
    SearchNetworkError,
    create_search_client,
    group_by_domain,
    parse_items,
)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


def _gateway(
    handler: Callable[[httpx.Request], httpx.Response],
    token: str | None = "secret",
) -> RemoteSearchGateway:
    client = httpx.AsyncClient(
        base_url="http://testserver", transport=httpx.MockTransport(handler)
    )
    return RemoteSearchGateway(client, lambda: token, endpoint="/api/search", limit=24)


@pytest.mark.anyio
async def test_search_sends_authorized_request_and_groups_hits() -> None:
    seen: List[httpx.Request] = []
    payload: Dict[str, Any] = {
        "items": [
            {"domain": "customer", "id": 1, "title": "علی"},
            {"domain": "product", "id": 5, "title": "شارژر", "titleHL": "<b>شارژر</b>"},
            {"domain": "customer", "id": 2, "title": "رضا"},
            {"domain": "customer", "id": 1, "title": "duplicate"},
            {"domain": "warehouse", "id": 9},
        ]
    }

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=payload)

    results = await _gateway(handler).search("شارژر")

    request = seen[0]
    assert request.url.path == "/api/search"
    assert request.url.params["q"] == "شارژر"
    assert request.url.params["limit"] == "24"
    assert "%D8%B4" in str(request.url)
    assert request.headers["Authorization"] == "Bearer secret"

    assert results.term == "شارژر"
    assert list(results.groups) == ["customer", "product"]
    assert [item.key for item in results.items] == ["customer:1", "customer:2", "product:5"]
    assert results.count == 3
    assert results.groups["product"][0].title_hl == "<b>شارژر</b>"


@pytest.mark.anyio
async def test_missing_items_yield_empty_results() -> None:
    gateway = _gateway(lambda request: httpx.Response(200, json={"items": "nope"}))

    results = await gateway.search("ab")

    assert results.count == 0
    assert results.items == []


@pytest.mark.anyio
async def test_error_status_uses_server_message() -> None:
    gateway = _gateway(lambda request: httpx.Response(500, json={"message": "سرور در دسترس نیست"}))

    with pytest.raises(SearchNetworkError) as excinfo:
        await gateway.search("ab")

    assert excinfo.value.message == "سرور در دسترس نیست"
    assert excinfo.value.status_code == 500


@pytest.mark.anyio
async def test_error_status_without_message_uses_default() -> None:
    gateway = _gateway(lambda request: httpx.Response(502, text="bad gateway"))

    with pytest.raises(SearchNetworkError) as excinfo:
        await gateway.search("ab")

    assert excinfo.value.message == SEARCH_FAILED_MESSAGE
    assert excinfo.value.status_code == 502


@pytest.mark.anyio
async def test_transport_failure_is_a_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(SearchNetworkError) as excinfo:
        await _gateway(handler).search("ab")

    assert excinfo.value.message == UNKNOWN_ERROR_MESSAGE
    assert excinfo.value.status_code is None


def test_authorization_follows_token_provider() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"items": []})

    assert _gateway(handler).authorized
    assert not _gateway(handler, token=None).authorized


@pytest.mark.anyio
async def test_search_client_uses_configured_base_url_and_timeout() -> None:
    config = Settings(
        api_base_url="https://shop.example",
        search_endpoint="/api/search",
        search_limit=24,
        debounce_seconds=0.22,
        min_term_length=2,
        request_timeout_seconds=3.5,
        search_log_path=None,
    )

    client = create_search_client(config)
    try:
        assert client.base_url.scheme == "https"
        assert client.base_url.host == "shop.example"
        assert client.timeout.read == 3.5
        assert client.timeout.connect == 3.5
    finally:
        await client.aclose()


def test_parse_and_group_keep_server_order() -> None:
    items = parse_items(
        [
            {"domain": "phone", "id": 3},
            {"domain": "invoice", "id": 4},
            {"domain": "phone", "id": 1},
            {"domain": "invoice"},
        ]
    )
    grouped = group_by_domain("x", items)

    assert [item.key for item in grouped.items] == ["phone:3", "phone:1", "invoice:4"]
    assert grouped.items[0].label == "#3"
