"""Transport protocols - the capability every pinning backend implements."""

from __future__ import annotations

import os
from typing import Any, Protocol

from pinata_client.models.records import Credentials, PinResponse


class PinTransport(Protocol):
    """Blocking backend: one HTTP exchange per call."""

    def pin_file(
        self, credentials: Credentials, path: str | os.PathLike, filename: str | None = None,
    ) -> PinResponse:
        """Upload the file at ``path`` to pinFileToIPFS."""
        ...

    def pin_json(self, credentials: Credentials, data: Any) -> PinResponse:
        """Upload ``data`` as a JSON document to pinJSONToIPFS."""
        ...

    def unpin(self, credentials: Credentials, ipfs_hash: str) -> None:
        """Remove the pin for ``ipfs_hash``."""
        ...

    def close(self) -> None:
        ...


class AsyncPinTransport(Protocol):
    """Awaitable backend (native httpx or the browser host's fetch).

    ``pin_file`` takes whatever file form the backend supports: a
    filesystem path natively, an in-memory blob in the browser host.
    ``filename`` names the multipart part on every backend.
    """

    async def pin_file(
        self, credentials: Credentials, file: Any, filename: str | None = None,
    ) -> PinResponse:
        ...

    async def pin_json(self, credentials: Credentials, data: Any) -> PinResponse:
        ...

    async def unpin(self, credentials: Credentials, ipfs_hash: str) -> None:
        ...

    async def aclose(self) -> None:
        ...
