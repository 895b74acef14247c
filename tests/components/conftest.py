"""Fixtures for CLI component tests (respx mocks the backend).

Run standalone: pytest tests/components/ -v
No real services required.
"""

import pytest
import respx

API = "https://labbook.example.com/api"


@pytest.fixture
def cli_env(tmp_path, monkeypatch):
    """Production build pointed at a fake backend with a private store."""
    store = tmp_path / "secure.json"
    monkeypatch.setenv("LABBOOK_ENV", "production")
    monkeypatch.setenv("LABBOOK_API_URL", API)
    monkeypatch.setenv("LABBOOK_STORE", str(store))
    monkeypatch.delenv("LABBOOK_DEV_HOST", raising=False)
    return store


@pytest.fixture
def backend():
    """respx router over the fake backend; paths are relative to its /api root."""
    with respx.mock(base_url=API, assert_all_called=False) as router:
        yield router


@pytest.fixture
def health_route():
    """The backend's /health lives outside /api, so it gets its own router."""
    with respx.mock(assert_all_called=False) as router:
        yield router.get("https://labbook.example.com/health")
