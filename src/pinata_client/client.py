"""Client facades - hold the credentials and dispatch to a transport."""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

from pinata_client.interfaces.transport import AsyncPinTransport, PinTransport
from pinata_client.models.config import DEFAULT_BASE_URL, ClientConfig
from pinata_client.models.records import Credentials, PinResponse
from pinata_client.transport.host import PyodideFetchTransport
from pinata_client.transport.native import AsyncHttpxTransport, HttpxTransport

log = logging.getLogger(__name__)


def in_browser_host() -> bool:
    """True when running under Pyodide (CPython compiled to WASM)."""
    return sys.platform == "emscripten"


def default_async_transport(
    base_url: str = DEFAULT_BASE_URL, timeout: float | None = None,
) -> AsyncPinTransport:
    if in_browser_host():
        log.debug("Browser host detected, using fetch transport")
        return PyodideFetchTransport(base_url)
    return AsyncHttpxTransport(base_url, timeout)


class PinataClient:
    """Blocking Pinata client.

    Usage::

        with PinataClient(api_key, api_secret) as client:
            resp = client.pin_json({"name": "test", "value": 42})
            client.unpin(resp.ipfs_hash)
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
        transport: PinTransport | None = None,
    ) -> None:
        self._credentials = Credentials(api_key, api_secret)
        self._owns_transport = transport is None
        self._transport = transport or HttpxTransport(base_url, timeout)

    @classmethod
    def from_config(cls, cfg: ClientConfig, **kwargs: Any) -> PinataClient:
        return cls(
            cfg.api_key, cfg.api_secret,
            base_url=cfg.base_url, timeout=cfg.timeout, **kwargs,
        )

    @property
    def transport(self) -> PinTransport:
        return self._transport

    def pin_file(self, path: str | os.PathLike, filename: str | None = None) -> PinResponse:
        return self._transport.pin_file(self._credentials, path, filename)

    def pin_json(self, data: Any) -> PinResponse:
        return self._transport.pin_json(self._credentials, data)

    def unpin(self, ipfs_hash: str) -> None:
        self._transport.unpin(self._credentials, ipfs_hash)

    def close(self) -> None:
        if self._owns_transport:
            self._transport.close()

    def __enter__(self) -> PinataClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class AsyncPinataClient:
    """Awaitable Pinata client.

    Picks the browser host's fetch under Pyodide and httpx everywhere else,
    unless a transport is given explicitly. ``pin_file`` takes whatever
    the transport accepts: a path natively, a blob in the browser.
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
        transport: AsyncPinTransport | None = None,
    ) -> None:
        self._credentials = Credentials(api_key, api_secret)
        self._owns_transport = transport is None
        self._transport = transport or default_async_transport(base_url, timeout)

    @classmethod
    def from_config(cls, cfg: ClientConfig, **kwargs: Any) -> AsyncPinataClient:
        return cls(
            cfg.api_key, cfg.api_secret,
            base_url=cfg.base_url, timeout=cfg.timeout, **kwargs,
        )

    @property
    def transport(self) -> AsyncPinTransport:
        return self._transport

    async def pin_file(self, file: Any, filename: str | None = None) -> PinResponse:
        return await self._transport.pin_file(self._credentials, file, filename)

    async def pin_json(self, data: Any) -> PinResponse:
        return await self._transport.pin_json(self._credentials, data)

    async def unpin(self, ipfs_hash: str) -> None:
        await self._transport.unpin(self._credentials, ipfs_hash)

    async def aclose(self) -> None:
        if self._owns_transport:
            await self._transport.aclose()

    async def __aenter__(self) -> AsyncPinataClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
