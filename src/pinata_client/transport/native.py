"""Native pinning backend - talks to the Pinata API through httpx."""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Any

import httpx

from pinata_client.errors import (
    NetworkError,
    PinFileStatusError,
    PinJsonStatusError,
    UnpinStatusError,
)
from pinata_client.models.config import DEFAULT_BASE_URL
from pinata_client.models.records import Credentials, PinResponse
from pinata_client.transport import wire

log = logging.getLogger(__name__)

# Errors httpx raises before or while sending; all of them mean the
# exchange never produced a response.
_TRANSPORT_ERRORS = (httpx.RequestError, httpx.InvalidURL)


class _HttpxBase:
    """Request construction shared by the blocking and async transports."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = httpx.Timeout(timeout)

    @property
    def base_url(self) -> str:
        return self._base_url

    def _pin_file_request(
        self, credentials: Credentials, filename: str, content: bytes,
    ) -> dict[str, Any]:
        log.info("Pinning file %s (%d bytes)", filename, len(content))
        return dict(
            method="POST",
            url=wire.endpoint(self._base_url, wire.PIN_FILE_PATH),
            headers=credentials.headers(),
            files={wire.FILE_FIELD: (filename, content)},
        )

    def _pin_json_request(self, credentials: Credentials, data: Any) -> dict[str, Any]:
        body = wire.encode_json(data)
        log.info("Pinning JSON document (%d bytes)", len(body))
        headers = credentials.headers()
        headers["Content-Type"] = wire.JSON_CONTENT_TYPE
        return dict(
            method="POST",
            url=wire.endpoint(self._base_url, wire.PIN_JSON_PATH),
            headers=headers,
            content=body,
        )

    def _unpin_request(self, credentials: Credentials, ipfs_hash: str) -> dict[str, Any]:
        log.info("Unpinning %s", ipfs_hash)
        return dict(
            method="DELETE",
            url=wire.unpin_url(self._base_url, ipfs_hash),
            headers=credentials.headers(),
        )

    @staticmethod
    def _pin_result(resp: httpx.Response, error_cls) -> PinResponse:
        wire.check_status(resp.status_code, resp.reason_phrase, error_cls)
        result = wire.decode_pin_response(resp.content)
        log.info("Pinned %s (%d bytes)", result.ipfs_hash, result.pin_size)
        return result


class HttpxTransport(_HttpxBase):
    """Blocking backend built on ``httpx.Client``.

    Pass ``client`` to reuse an existing client, or ``transport`` to swap
    the network layer (e.g. ``httpx.MockTransport``). A client created
    here is owned and closed by this transport.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
        client: httpx.Client | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        super().__init__(base_url, timeout)
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=self._timeout, transport=transport)

    def _send(self, request: dict[str, Any]) -> httpx.Response:
        try:
            return self._client.request(**request)
        except _TRANSPORT_ERRORS as exc:
            log.error("%s %s failed: %s", request["method"], request["url"], exc)
            raise NetworkError(str(exc) or type(exc).__name__) from exc

    def pin_file(
        self, credentials: Credentials, path: str | os.PathLike, filename: str | None = None,
    ) -> PinResponse:
        """Upload the file at ``path``; ``filename`` overrides its basename in the form."""
        name, content = wire.read_file(path)
        resp = self._send(self._pin_file_request(credentials, filename or name, content))
        return self._pin_result(resp, PinFileStatusError)

    def pin_json(self, credentials: Credentials, data: Any) -> PinResponse:
        resp = self._send(self._pin_json_request(credentials, data))
        return self._pin_result(resp, PinJsonStatusError)

    def unpin(self, credentials: Credentials, ipfs_hash: str) -> None:
        resp = self._send(self._unpin_request(credentials, ipfs_hash))
        wire.check_status(resp.status_code, resp.reason_phrase, UnpinStatusError)
        log.info("Unpinned %s", ipfs_hash)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpxTransport:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class AsyncHttpxTransport(_HttpxBase):
    """Async backend built on ``httpx.AsyncClient``; same contract as HttpxTransport."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(base_url, timeout)
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=self._timeout, transport=transport)

    async def _send(self, request: dict[str, Any]) -> httpx.Response:
        try:
            return await self._client.request(**request)
        except _TRANSPORT_ERRORS as exc:
            log.error("%s %s failed: %s", request["method"], request["url"], exc)
            raise NetworkError(str(exc) or type(exc).__name__) from exc

    async def pin_file(
        self, credentials: Credentials, file: str | os.PathLike, filename: str | None = None,
    ) -> PinResponse:
        # Whole-file read runs in a worker thread to keep the loop free.
        name, content = await asyncio.to_thread(wire.read_file, file)
        resp = await self._send(self._pin_file_request(credentials, filename or name, content))
        return self._pin_result(resp, PinFileStatusError)

    async def pin_json(self, credentials: Credentials, data: Any) -> PinResponse:
        resp = await self._send(self._pin_json_request(credentials, data))
        return self._pin_result(resp, PinJsonStatusError)

    async def unpin(self, credentials: Credentials, ipfs_hash: str) -> None:
        resp = await self._send(self._unpin_request(credentials, ipfs_hash))
        wire.check_status(resp.status_code, resp.reason_phrase, UnpinStatusError)
        log.info("Unpinned %s", ipfs_hash)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> AsyncHttpxTransport:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
