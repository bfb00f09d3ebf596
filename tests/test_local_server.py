"""End-to-end against a local aiohttp stand-in for the Pinata API."""

from __future__ import annotations

from contextlib import asynccontextmanager

import httpx
import pytest
from aiohttp import web

from pinata_client import AsyncPinataClient
from pinata_client.errors import PinJsonError, UnpinError
from pinata_client.transport.native import AsyncHttpxTransport

from tests.conftest import TEST_API_KEY, TEST_API_SECRET
from tests.factories import fake_cid, make_pin_payload


@asynccontextmanager
async def _client(base_url: str, api_key: str, api_secret: str):
    """AsyncPinataClient pointed at the local server, ignoring proxy env vars."""
    http = httpx.AsyncClient(trust_env=False)
    transport = AsyncHttpxTransport(base_url, client=http)
    try:
        yield AsyncPinataClient(api_key, api_secret, transport=transport)
    finally:
        await http.aclose()


@pytest.fixture
async def pinata_server(unused_tcp_port):
    """Local HTTP server implementing pinFileToIPFS / pinJSONToIPFS / unpin.

    Returns (base_url, state). Requests without the test credentials get 401.
    """
    state = {"pins": {}, "requests": []}

    def authorized(request: web.Request) -> bool:
        return (
            request.headers.get("pinata_api_key") == TEST_API_KEY
            and request.headers.get("pinata_secret_api_key") == TEST_API_SECRET
        )

    async def pin_json(request):
        state["requests"].append(("json", request.content_type))
        if not authorized(request):
            return web.json_response({"error": "unauthorized"}, status=401)
        raw = await request.read()
        cid = fake_cid(raw.decode())
        state["pins"][cid] = raw
        return web.json_response(make_pin_payload(ipfs_hash=cid, pin_size=len(raw)))

    async def pin_file(request):
        state["requests"].append(("file", request.content_type))
        if not authorized(request):
            return web.json_response({"error": "unauthorized"}, status=401)
        form = await request.post()
        part = form["file"]
        raw = part.file.read()
        cid = fake_cid(part.filename + raw.decode())
        state["pins"][cid] = raw
        return web.json_response(make_pin_payload(ipfs_hash=cid, pin_size=len(raw)))

    async def unpin(request):
        if not authorized(request):
            return web.json_response({"error": "unauthorized"}, status=401)
        cid = request.match_info["cid"]
        if state["pins"].pop(cid, None) is None:
            return web.json_response({"error": "not pinned"}, status=404)
        return web.Response(text="OK")

    app = web.Application()
    app.router.add_post("/pinning/pinJSONToIPFS", pin_json)
    app.router.add_post("/pinning/pinFileToIPFS", pin_file)
    app.router.add_delete("/pinning/unpin/{cid}", unpin)

    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", unused_tcp_port)
    await site.start()
    yield f"http://127.0.0.1:{unused_tcp_port}", state
    await runner.cleanup()


async def test_pin_json_then_unpin(pinata_server):
    base_url, state = pinata_server
    async with _client(base_url, TEST_API_KEY, TEST_API_SECRET) as client:
        resp = await client.pin_json({"name": "test", "value": 42})
        assert resp.ipfs_hash in state["pins"]
        assert resp.pin_size > 0
        assert resp.timestamp

        await client.unpin(resp.ipfs_hash)
        assert resp.ipfs_hash not in state["pins"]

    assert state["requests"] == [("json", "application/json")]


async def test_pin_file_upload(pinata_server, sample_file):
    base_url, state = pinata_server
    async with _client(base_url, TEST_API_KEY, TEST_API_SECRET) as client:
        resp = await client.pin_file(sample_file)

    assert state["pins"][resp.ipfs_hash] == b"Test content"
    assert resp.pin_size == len(b"Test content")
    assert state["requests"] == [("file", "multipart/form-data")]


async def test_rejected_credentials_fold_into_operation_error(pinata_server):
    base_url, _ = pinata_server
    async with _client(base_url, "wrong", "creds") as client:
        with pytest.raises(PinJsonError) as exc_info:
            await client.pin_json({"a": 1})
    assert exc_info.value.status_code == 401


async def test_unpin_unknown_hash(pinata_server):
    base_url, _ = pinata_server
    async with _client(base_url, TEST_API_KEY, TEST_API_SECRET) as client:
        with pytest.raises(UnpinError, match="404"):
            await client.unpin("QmNeverPinned")
