"""Shared fixtures for pinata_client tests."""

from __future__ import annotations

import pytest
from pytest_metadata.plugin import metadata_key

from pinata_client.models.config import DEFAULT_BASE_URL
from pinata_client.models.records import Credentials
from pinata_client.transport.host import PyodideFetchTransport
from pinata_client.transport.native import AsyncHttpxTransport, HttpxTransport

from tests.mocks import FakeFetch, MockPinataService, fake_form_factory

TEST_API_KEY = "test-api-key-0123456789"
TEST_API_SECRET = "test-api-secret-abcdef"

MOCK_BASE_URL = "https://pinata.test"


def pytest_configure(config):
    """Add service info to the HTML report Environment table."""
    meta = config.stash.setdefault(metadata_key, {})
    meta["Pinata API"] = DEFAULT_BASE_URL
    meta["Mock API"] = MOCK_BASE_URL


@pytest.fixture
def credentials():
    return Credentials(TEST_API_KEY, TEST_API_SECRET)


@pytest.fixture
def service():
    """Mock Pinata API answering 200 with a pin payload."""
    return MockPinataService()


@pytest.fixture
def sync_transport(service):
    """HttpxTransport wired to the mock service."""
    t = HttpxTransport(MOCK_BASE_URL, transport=service.transport())
    yield t
    t.close()


@pytest.fixture
async def async_transport(service):
    """AsyncHttpxTransport wired to the mock service."""
    t = AsyncHttpxTransport(MOCK_BASE_URL, transport=service.transport())
    yield t
    await t.aclose()


@pytest.fixture
def fake_fetch():
    return FakeFetch()


@pytest.fixture
def host_transport(fake_fetch):
    """PyodideFetchTransport with the host fetch and FormData faked out."""
    return PyodideFetchTransport(
        MOCK_BASE_URL, fetch=fake_fetch, form_factory=fake_form_factory,
    )


@pytest.fixture
def sample_file(tmp_path):
    p = tmp_path / "test.txt"
    p.write_text("Test content")
    return p
