"""Protocol interfaces for pinata_client backends."""

from pinata_client.interfaces.transport import AsyncPinTransport, PinTransport

__all__ = ["PinTransport", "AsyncPinTransport"]
