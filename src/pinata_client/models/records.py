"""Value types exchanged with the pinning service."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pinata_client.errors import DeserializationError, InvalidCredentialsError

API_KEY_HEADER = "pinata_api_key"
SECRET_KEY_HEADER = "pinata_secret_api_key"


@dataclass(frozen=True)
class Credentials:
    """API key/secret pair sent on every request."""

    api_key: str = field(repr=False)
    api_secret: str = field(repr=False)

    def __post_init__(self) -> None:
        for name in ("api_key", "api_secret"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise InvalidCredentialsError(f"{name} must be a non-empty string")
            # Sent verbatim as HTTP header values.
            if not value.isascii() or not value.isprintable():
                raise InvalidCredentialsError(
                    f"{name} must contain only printable ASCII characters"
                )

    def headers(self) -> dict[str, str]:
        return {
            API_KEY_HEADER: self.api_key,
            SECRET_KEY_HEADER: self.api_secret,
        }


# (wire key, alternate keys) per PinResponse field. The wire key is what
# to_dict() emits; the alternates cover the lower/snake-cased API versions.
_REQUIRED_KEYS = {
    "ipfs_hash": ("IpfsHash", ("ipfs_hash", "cid")),
    "pin_size": ("PinSize", ("pin_size", "size")),
    "timestamp": ("Timestamp", ("timestamp", "created_at")),
}
_OPTIONAL_KEYS = {
    "id": ("ID", ("id",)),
    "name": ("Name", ("name",)),
    "number_of_files": ("NumberOfFiles", ("number_of_files",)),
    "mime_type": ("MimeType", ("mime_type",)),
    "group_id": ("GroupId", ("group_id",)),
    "keyvalues": ("KeyValues", ("keyvalues",)),
}


def _lookup(data: dict, wire_key: str, alternates: tuple[str, ...]) -> Any:
    for key in (wire_key, *alternates):
        if key in data:
            return data[key]
    return None


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class PinResponse:
    """Result of a successful pinFileToIPFS / pinJSONToIPFS call.

    Only the hash, size and timestamp are guaranteed. The remaining fields
    appear in some API versions and are passed through uninterpreted.
    """

    ipfs_hash: str
    pin_size: int
    timestamp: str
    id: str | None = None
    name: str | None = None
    number_of_files: int | None = None
    mime_type: str | None = None
    group_id: str | None = None
    keyvalues: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> PinResponse:
        """Build a PinResponse from a decoded response body.

        Accepts capitalized (``IpfsHash``) and snake-cased (``ipfs_hash``)
        keys, and unwraps a ``{"data": {...}}`` envelope.
        """
        if isinstance(data, dict) and isinstance(data.get("data"), dict):
            data = data["data"]
        if not isinstance(data, dict):
            raise DeserializationError(
                f"expected a JSON object, got {type(data).__name__}"
            )

        values: dict[str, Any] = {}
        for attr, (wire_key, alternates) in _REQUIRED_KEYS.items():
            value = _lookup(data, wire_key, alternates)
            if value is None:
                raise DeserializationError(f"missing field {wire_key!r}")
            values[attr] = value
        for attr, (wire_key, alternates) in _OPTIONAL_KEYS.items():
            values[attr] = _lookup(data, wire_key, alternates)

        if not isinstance(values["ipfs_hash"], str):
            raise DeserializationError("IpfsHash must be a string")
        if not _is_int(values["pin_size"]) or values["pin_size"] < 0:
            raise DeserializationError(
                f"PinSize must be a non-negative integer, got {values['pin_size']!r}"
            )
        if not isinstance(values["timestamp"], str):
            raise DeserializationError("Timestamp must be a string")
        nfiles = values["number_of_files"]
        if nfiles is not None and not _is_int(nfiles):
            raise DeserializationError(f"NumberOfFiles must be an integer, got {nfiles!r}")
        kv = values["keyvalues"]
        if kv is not None and not isinstance(kv, dict):
            raise DeserializationError("KeyValues must be an object")
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the capitalized wire shape, omitting absent fields."""
        out: dict[str, Any] = {}
        for attr, (wire_key, _) in _REQUIRED_KEYS.items():
            out[wire_key] = getattr(self, attr)
        for attr, (wire_key, _) in _OPTIONAL_KEYS.items():
            value = getattr(self, attr)
            if value is not None:
                out[wire_key] = value
        return out
