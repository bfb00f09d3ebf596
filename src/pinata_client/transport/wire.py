"""Request/response shaping shared by every backend.

Endpoints, payload encoding, status checks and response decoding live
here so the native and host backends issue byte-identical requests.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from pinata_client.errors import (
    DeserializationError,
    HttpStatusError,
    PinFileError,
    SerializationError,
)
from pinata_client.models.records import PinResponse

PIN_FILE_PATH = "/pinning/pinFileToIPFS"
PIN_JSON_PATH = "/pinning/pinJSONToIPFS"
UNPIN_PATH = "/pinning/unpin/{hash}"

FILE_FIELD = "file"
JSON_CONTENT_TYPE = "application/json"


def endpoint(base_url: str, path: str) -> str:
    return f"{base_url.rstrip('/')}{path}"


def unpin_url(base_url: str, ipfs_hash: str) -> str:
    # The hash is used as-is; the service is the judge of its format.
    return endpoint(base_url, UNPIN_PATH.format(hash=ipfs_hash))


def encode_json(data: Any) -> bytes:
    """Encode ``data`` as strict JSON (no NaN/Infinity)."""
    try:
        return json.dumps(data, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError, RecursionError) as exc:
        raise SerializationError(str(exc)) from exc


def read_file(path: str | os.PathLike) -> tuple[str, bytes]:
    """Read a whole file for upload, returning (filename, content)."""
    p = Path(path)
    try:
        content = p.read_bytes()
    except OSError as exc:
        raise PinFileError(f"{path}: {exc.strerror or exc}") from exc
    return p.name or FILE_FIELD, content


def is_success(status_code: int) -> bool:
    return 200 <= status_code <= 299


def check_status(
    status_code: int, reason: str, error_cls: type[HttpStatusError],
) -> None:
    """Raise ``error_cls`` carrying the status for anything outside 2xx."""
    if not is_success(status_code):
        raise error_cls.from_status(status_code, reason)


def decode_pin_response(body: str | bytes | Any) -> PinResponse:
    """Decode a pin response body (raw text or an already-parsed object)."""
    if isinstance(body, (str, bytes, bytearray)):
        try:
            body = json.loads(body)
        except (ValueError, RecursionError) as exc:
            raise DeserializationError(f"response is not valid JSON: {exc}") from exc
    return PinResponse.from_dict(body)
