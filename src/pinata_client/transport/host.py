"""Browser/WASM pinning backend - issues requests through Pyodide's fetch.

Under Pyodide there is no socket stack and no filesystem access for
uploads, so requests go through the host's ``fetch`` (``pyodide.http.pyfetch``)
and files arrive as in-memory blobs. The ``pyodide`` and ``js`` modules only
exist inside the host runtime, so they are imported on first use.
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable

from pinata_client.errors import (
    DeserializationError,
    HttpStatusError,
    NetworkError,
    PinFileError,
    PinFileStatusError,
    PinJsonStatusError,
    UnpinStatusError,
)
from pinata_client.models.config import DEFAULT_BASE_URL
from pinata_client.models.records import Credentials, PinResponse
from pinata_client.transport import wire

log = logging.getLogger(__name__)

FetchFn = Callable[..., Awaitable[Any]]
FormFactory = Callable[[Any, str], Any]

BINARY_TYPES = (bytes, bytearray, memoryview)


def pyodide_fetch() -> FetchFn:
    """Return the host's ``pyfetch``; only importable inside Pyodide."""
    from pyodide.http import pyfetch

    return pyfetch


def host_form_data(blob: Any, filename: str) -> Any:
    """Build a JS ``FormData`` with the blob as its single ``file`` part."""
    from js import Blob, FormData
    from pyodide.ffi import to_js

    if isinstance(blob, BINARY_TYPES):
        blob = Blob.new([to_js(bytes(blob))])
    form = FormData.new()
    form.append(wire.FILE_FIELD, blob, filename)
    return form


class PyodideFetchTransport:
    """Async backend for code running inside a browser/WASM host.

    Same endpoints, headers and status handling as the httpx backends.
    ``fetch`` and ``form_factory`` default to the host's own primitives and
    can be replaced to run outside the browser.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        fetch: FetchFn | None = None,
        form_factory: FormFactory | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._fetch = fetch
        self._form_factory = form_factory or host_form_data

    @property
    def base_url(self) -> str:
        return self._base_url

    async def _send(self, url: str, **options: Any) -> Any:
        fetch = self._fetch
        if fetch is None:
            try:
                fetch = self._fetch = pyodide_fetch()
            except ImportError as exc:
                raise NetworkError(f"host fetch is unavailable: {exc}") from exc

        options.setdefault("mode", "cors")
        try:
            return await fetch(url, **options)
        except Exception as exc:
            # pyfetch surfaces fetch rejections as OSError; anything else
            # from the host (JsException) is treated the same way.
            log.error("%s %s failed: %s", options.get("method"), url, exc)
            raise NetworkError(f"Failed to fetch: {exc}") from exc

    @staticmethod
    def _check(resp: Any, error_cls: type[HttpStatusError]) -> None:
        try:
            status = int(resp.status)
            reason = getattr(resp, "status_text", "") or ""
        except (AttributeError, TypeError, ValueError) as exc:
            raise NetworkError(f"Failed to convert response: {exc}") from exc
        wire.check_status(status, reason, error_cls)

    async def _pin_result(self, resp: Any, error_cls: type[HttpStatusError]) -> PinResponse:
        self._check(resp, error_cls)
        try:
            body = await resp.json()
        except Exception as exc:
            raise DeserializationError(f"Failed to parse JSON: {exc}") from exc
        if hasattr(body, "to_py"):
            body = body.to_py()
        result = wire.decode_pin_response(body)
        log.info("Pinned %s (%d bytes)", result.ipfs_hash, result.pin_size)
        return result

    async def pin_file(
        self, credentials: Credentials, file: Any, filename: str | None = None,
    ) -> PinResponse:
        """Pin an in-memory blob (bytes or a host ``Blob``/``File``)."""
        filename = filename or wire.FILE_FIELD
        if file is None:
            raise PinFileError("no file content given")
        try:
            form = self._form_factory(file, filename)
        except Exception as exc:
            raise PinFileError(f"Failed to create form data: {exc}") from exc

        log.info("Pinning file %s", filename)
        resp = await self._send(
            wire.endpoint(self._base_url, wire.PIN_FILE_PATH),
            method="POST",
            headers=credentials.headers(),
            body=form,
        )
        return await self._pin_result(resp, PinFileStatusError)

    async def pin_json(self, credentials: Credentials, data: Any) -> PinResponse:
        body = wire.encode_json(data)
        log.info("Pinning JSON document (%d bytes)", len(body))
        headers = credentials.headers()
        headers["Content-Type"] = wire.JSON_CONTENT_TYPE
        resp = await self._send(
            wire.endpoint(self._base_url, wire.PIN_JSON_PATH),
            method="POST",
            headers=headers,
            body=body.decode("utf-8"),
        )
        return await self._pin_result(resp, PinJsonStatusError)

    async def unpin(self, credentials: Credentials, ipfs_hash: str) -> None:
        log.info("Unpinning %s", ipfs_hash)
        resp = await self._send(
            wire.unpin_url(self._base_url, ipfs_hash),
            method="DELETE",
            headers=credentials.headers(),
        )
        self._check(resp, UnpinStatusError)
        log.info("Unpinned %s", ipfs_hash)

    async def aclose(self) -> None:
        # Nothing to release; the host owns its fetch machinery.
        return None

    async def __aenter__(self) -> PyodideFetchTransport:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
