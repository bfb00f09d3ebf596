"""Configuration model for the client."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.pinata.cloud"


@dataclass
class ClientConfig:
    """Complete client configuration."""

    # Credentials (usually from PINATA_API_KEY / PINATA_SECRET_KEY)
    api_key: str = ""
    api_secret: str = ""

    # Service
    base_url: str = DEFAULT_BASE_URL
    timeout: float | None = None  # seconds; None leaves requests unbounded

    # Logging
    log_level: str = "warning"

    def has_credentials(self) -> bool:
        return bool(self.api_key.strip() and self.api_secret.strip())
