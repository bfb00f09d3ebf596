"""Data models for pinata_client."""

from pinata_client.models.records import (
    API_KEY_HEADER,
    SECRET_KEY_HEADER,
    Credentials,
    PinResponse,
)
from pinata_client.models.config import DEFAULT_BASE_URL, ClientConfig

__all__ = [
    "API_KEY_HEADER", "SECRET_KEY_HEADER",
    "Credentials", "PinResponse",
    "DEFAULT_BASE_URL", "ClientConfig",
]
