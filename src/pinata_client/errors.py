"""Exception types raised by pinata_client.

Every failure coming out of a transport backend is re-raised as one of
these, so callers only ever catch ``PinataError`` subclasses.
"""

from __future__ import annotations


class PinataError(Exception):
    """Base class for every error raised by this library."""

    prefix = "Pinata error"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"{self.prefix}: {detail}")


class InvalidCredentialsError(PinataError):
    prefix = "Invalid API key or secret"


class NetworkError(PinataError):
    prefix = "Network error"


class SerializationError(PinataError):
    prefix = "Serialization error"


class DeserializationError(PinataError):
    prefix = "Deserialization error"


class PinFileError(PinataError):
    prefix = "Failed to pin file"


class PinJsonError(PinataError):
    prefix = "Failed to pin JSON"


class UnpinError(PinataError):
    prefix = "Failed to unpin"


class HttpStatusError(PinataError):
    """Mixin for operation errors caused by a non-2xx response."""

    status_code: int | None = None

    @classmethod
    def from_status(cls, status_code: int, reason: str = "") -> HttpStatusError:
        detail = f"HTTP error: {status_code}"
        if reason:
            detail = f"{detail} {reason}"
        err = cls(detail)
        err.status_code = status_code
        return err


class PinFileStatusError(HttpStatusError, PinFileError):
    pass


class PinJsonStatusError(HttpStatusError, PinJsonError):
    pass


class UnpinStatusError(HttpStatusError, UnpinError):
    pass
