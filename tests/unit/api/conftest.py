"""Fixtures for API unit tests: fresh in-memory store per test, AsyncClient."""

import pytest
from httpx import ASGITransport, AsyncClient

from shortlinks.infrastructure.store.memory_store import InMemoryKeyValueStore
from shortlinks.main import app


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def app_with_overrides(store):
    """App with the key-value store overridden for testing."""
    from shortlinks.api import dependencies

    app.dependency_overrides[dependencies.get_store] = lambda: store
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(app_with_overrides):
    """Async HTTP client for testing; uses overridden app. Redirects are not followed."""
    transport = ASGITransport(app=app_with_overrides)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
