"""Configuration loading: TOML file + environment variables."""

from __future__ import annotations

import os
from pathlib import Path

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib  # type: ignore[no-redef]

from pinata_client.models.config import ClientConfig


def load_config(
    config_path: str | Path | None = None,
    env_prefix: str = "PINATA_",
) -> ClientConfig:
    """Load client configuration from a TOML file and env vars.

    Priority (highest wins):
        1. Environment variables (PINATA_API_KEY, PINATA_SECRET_KEY, etc.)
        2. TOML config file, ``[pinata]`` section
        3. Defaults from ClientConfig
    """
    raw: dict = {}
    if config_path is not None:
        p = Path(config_path).expanduser()
        if p.exists():
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    cfg = ClientConfig()

    # ── Pinata section ─────────────────────────────────────
    pinata = raw.get("pinata", {})
    if v := pinata.get("api_key"):
        cfg.api_key = str(v)
    if v := pinata.get("api_secret"):
        cfg.api_secret = str(v)
    if v := pinata.get("base_url"):
        cfg.base_url = str(v)
    if v := pinata.get("timeout"):
        cfg.timeout = float(v)
    if v := pinata.get("log_level"):
        cfg.log_level = str(v)

    # ── Environment variable overrides (highest priority) ──
    if key := os.environ.get(f"{env_prefix}API_KEY"):
        cfg.api_key = key
    if secret := (
        os.environ.get(f"{env_prefix}SECRET_KEY")
        or os.environ.get(f"{env_prefix}API_SECRET")
    ):
        cfg.api_secret = secret
    if url := os.environ.get(f"{env_prefix}BASE_URL"):
        cfg.base_url = url
    if timeout := os.environ.get(f"{env_prefix}TIMEOUT"):
        cfg.timeout = float(timeout)

    cfg.base_url = cfg.base_url.rstrip("/")

    return cfg
