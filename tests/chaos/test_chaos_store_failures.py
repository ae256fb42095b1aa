"""
Chaos: key-value store outage on the link namespace.
System must: surface the failure unchanged, record action.error, not corrupt state.
"""

import pytest

from shortlinks.application.access_tracker import AccessTracker
from shortlinks.application.action_middleware import ActionMiddleware
from shortlinks.application.audit_log import AuditLog
from shortlinks.application.link_service import ShortLinkService
from shortlinks.application.registry import Registry
from shortlinks.infrastructure.store.memory_store import InMemoryKeyValueStore


class LinkOutageStore(InMemoryKeyValueStore):
    """Store whose link namespace refuses writes (simulated backend outage); audit writes still work."""

    async def set_if_absent(self, key, value):
        if key.startswith("link:"):
            raise ConnectionError("Redis connection refused")
        return await super().set_if_absent(key, value)

    async def update(self, key, fn):
        if key.startswith("link:"):
            raise ConnectionError("Redis connection refused")
        return await super().update(key, fn)


@pytest.fixture
def store():
    return LinkOutageStore()


@pytest.fixture
def service(store):
    audit_log = AuditLog(store=store)
    registry = Registry(store=store, audit_log=audit_log)
    tracker = AccessTracker(registry=registry, audit_log=audit_log)
    return ShortLinkService(
        registry=registry,
        access_tracker=tracker,
        audit_log=audit_log,
        middleware=ActionMiddleware(audit_log),
    )


@pytest.mark.asyncio
async def test_create_fails_cleanly_on_store_outage(service, store):
    with pytest.raises(ConnectionError):
        await service.create_short_link("https://a.com", custom_code="abc")

    entries = await service.get_audit_log()
    assert [e.event_type for e in entries] == ["action.error", "action.start"]
    assert entries[0].payload["message"] == "Redis connection refused"
    assert await store.keys("link:") == []


@pytest.mark.asyncio
async def test_resolve_fails_cleanly_and_keeps_record(service, store):
    await store.set(
        "link:abc",
        {
            "code": "abc",
            "long_url": "https://a.com",
            "created_at": "2099-01-01T00:00:00+00:00",
            "expires_at": "2099-01-01T00:30:00+00:00",
            "validity_mins": 30,
            "clicks": 0,
            "last_accessed": None,
            "history": [],
        },
    )

    with pytest.raises(ConnectionError):
        await service.resolve_short_link("abc")

    record = await service.get_short_link("abc")
    assert record.clicks == 0
    assert (await service.get_audit_log())[0].event_type == "action.error"
