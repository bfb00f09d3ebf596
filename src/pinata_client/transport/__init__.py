"""Pinning backends: native httpx and the browser host's fetch."""

from pinata_client.transport.host import PyodideFetchTransport
from pinata_client.transport.native import AsyncHttpxTransport, HttpxTransport

__all__ = ["HttpxTransport", "AsyncHttpxTransport", "PyodideFetchTransport"]
