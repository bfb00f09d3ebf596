"""Live fixtures: the real Pinata API.

Skipped unless PINATA_API_KEY and PINATA_SECRET_KEY are set.
"""

from __future__ import annotations

import os

import pytest

from pinata_client import AsyncPinataClient, PinataClient


def _live_credentials() -> tuple[str, str]:
    key = os.environ.get("PINATA_API_KEY")
    secret = os.environ.get("PINATA_SECRET_KEY")
    if not (key and secret):
        pytest.skip("PINATA_API_KEY / PINATA_SECRET_KEY not set")
    return key, secret


@pytest.fixture
def live_client():
    key, secret = _live_credentials()
    with PinataClient(key, secret, timeout=60) as client:
        yield client


@pytest.fixture
async def live_async_client():
    key, secret = _live_credentials()
    async with AsyncPinataClient(key, secret, timeout=60) as client:
        yield client
