"""Tests for the aiohttp token list fetcher, served by a local test server."""

from __future__ import annotations

from typing import Any, AsyncIterator

import aiohttp
import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer, unused_port

from token_list import DecodeError, TokenList, TransportError
from token_list.services.fetch import TokenListService, fetch_token_list


@pytest.fixture
def seen_headers() -> list[Any]:
    """Request headers received by the test server, in arrival order."""
    return []


@pytest_asyncio.fixture
async def server(full_document: dict[str, Any], seen_headers: list[Any]) -> AsyncIterator[TestServer]:
    async def tokenlist(request: web.Request) -> web.Response:
        seen_headers.append(request.headers.copy())
        return web.json_response(full_document)

    async def missing(request: web.Request) -> web.Response:
        return web.json_response(full_document, status=404)

    async def garbage(request: web.Request) -> web.Response:
        return web.Response(text='{"name": ', content_type="application/json")

    async def moved(request: web.Request) -> web.Response:
        raise web.HTTPFound("/tokenlist.json")

    app = web.Application()
    app.router.add_get("/tokenlist.json", tokenlist)
    app.router.add_get("/missing.json", missing)
    app.router.add_get("/garbage.json", garbage)
    app.router.add_get("/moved.json", moved)

    async with TestServer(app) as test_server:
        yield test_server


@pytest.mark.asyncio
async def test_fetch_decodes_document(server: TestServer, full_document: dict[str, Any]) -> None:
    token_list = await fetch_token_list(str(server.make_url("/tokenlist.json")))

    assert isinstance(token_list, TokenList)
    assert token_list == TokenList.from_dict(full_document)


@pytest.mark.asyncio
async def test_fetch_sends_default_headers(server: TestServer, seen_headers: list[Any]) -> None:
    await fetch_token_list(server.make_url("/tokenlist.json"))

    headers = seen_headers[0]
    assert headers["Accept"] == "application/json"
    assert headers["User-Agent"].startswith("token-list-python/")


@pytest.mark.asyncio
async def test_fetch_follows_redirects(server: TestServer) -> None:
    token_list = await fetch_token_list(str(server.make_url("/moved.json")))
    assert token_list.name == "TELcoins"


@pytest.mark.asyncio
async def test_not_found_is_a_transport_error(server: TestServer) -> None:
    url = str(server.make_url("/missing.json"))

    with pytest.raises(TransportError) as excinfo:
        await fetch_token_list(url)

    assert excinfo.value.status == 404
    assert excinfo.value.uri == url
    assert not isinstance(excinfo.value, DecodeError)


@pytest.mark.asyncio
async def test_bad_body_is_a_decode_error(server: TestServer) -> None:
    with pytest.raises(DecodeError):
        await fetch_token_list(str(server.make_url("/garbage.json")))


@pytest.mark.asyncio
async def test_connection_failure_is_a_transport_error() -> None:
    url = f"http://127.0.0.1:{unused_port()}/tokenlist.json"

    with pytest.raises(TransportError) as excinfo:
        await fetch_token_list(url)

    assert excinfo.value.status is None
    assert isinstance(excinfo.value.__cause__, aiohttp.ClientError)


@pytest.mark.asyncio
async def test_borrowed_session_stays_open(server: TestServer) -> None:
    async with aiohttp.ClientSession() as session:
        await fetch_token_list(str(server.make_url("/tokenlist.json")), session=session)
        assert not session.closed


@pytest.mark.asyncio
async def test_service_closes_its_own_session(server: TestServer, seen_headers: list[Any]) -> None:
    async with TokenListService(headers={"x-client": "tests"}) as service:
        await service.fetch(str(server.make_url("/tokenlist.json")))
        await service.fetch(str(server.make_url("/tokenlist.json")))
        session = service.session

    assert session.closed
    assert seen_headers[1]["x-client"] == "tests"
