"""
conftest.py — Shared pytest fixtures for the labbook unit tests.

HTTP is mocked with respx; no backend is required.
"""

import httpx
import pytest
import respx

from labbook.core.config import Settings
from labbook.core.storage import KeyValueStore, MemoryStore
from labbook.exceptions import StorageError


def healthy(*addresses: str) -> httpx.Response:
    """A /health response reporting the given interface addresses."""
    body: dict = {"status": "healthy"}
    if addresses:
        body["server"] = {
            "networkInterfaces": [{"name": f"en{i}", "address": a} for i, a in enumerate(addresses)]
        }
    return httpx.Response(200, json=body)


class BrokenStore(KeyValueStore):
    """Every operation fails like an unavailable keychain."""

    def get(self, key):
        raise StorageError("keychain locked")

    def set(self, key, value):
        raise StorageError("keychain locked")

    def delete(self, key):
        raise StorageError("keychain locked")


@pytest.fixture
def health_response():
    return healthy


@pytest.fixture
def broken_store():
    return BrokenStore()


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def dev_settings(tmp_path):
    """Development build whose dev server was reached on 10.0.0.5."""
    return Settings(
        production=False,
        dev_host_uri="10.0.0.5:19000",
        probe_timeout=1.0,
        request_timeout=2.0,
        store_path=tmp_path / "secure.json",
    )


@pytest.fixture
def prod_settings(tmp_path):
    return Settings(
        production=True,
        production_url="https://labbook.example.com/api",
        store_path=tmp_path / "secure.json",
    )


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def mock_http():
    """respx router; every request a test makes must be routed."""
    with respx.mock(assert_all_called=False) as router:
        yield router
