"""pinata_client - pin files and JSON documents to IPFS through Pinata."""

from pinata_client.client import AsyncPinataClient, PinataClient
from pinata_client.errors import (
    DeserializationError,
    HttpStatusError,
    InvalidCredentialsError,
    NetworkError,
    PinataError,
    PinFileError,
    PinJsonError,
    SerializationError,
    UnpinError,
)
from pinata_client.models import ClientConfig, Credentials, PinResponse

__version__ = "0.1.0"

__all__ = [
    "PinataClient", "AsyncPinataClient",
    "ClientConfig", "Credentials", "PinResponse",
    "PinataError", "InvalidCredentialsError", "NetworkError",
    "SerializationError", "DeserializationError", "HttpStatusError",
    "PinFileError", "PinJsonError", "UnpinError",
]
