"""Fixtures for application-layer tests: in-memory store, simulated clock, wired components."""

from datetime import datetime, timedelta, timezone

import pytest

from shortlinks.application.access_tracker import AccessTracker
from shortlinks.application.action_middleware import ActionMiddleware
from shortlinks.application.audit_log import AuditLog
from shortlinks.application.link_service import ShortLinkService
from shortlinks.application.registry import Registry
from shortlinks.infrastructure.store.memory_store import InMemoryKeyValueStore


class FakeClock:
    """Simulated UTC clock; advance() moves time forward."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def audit_log(store, clock):
    return AuditLog(store=store, clock=clock)


@pytest.fixture
def registry(store, audit_log, clock):
    return Registry(store=store, audit_log=audit_log, clock=clock)


@pytest.fixture
def access_tracker(registry, audit_log, clock):
    return AccessTracker(registry=registry, audit_log=audit_log, clock=clock)


@pytest.fixture
def link_service(registry, access_tracker, audit_log):
    return ShortLinkService(
        registry=registry,
        access_tracker=access_tracker,
        audit_log=audit_log,
        middleware=ActionMiddleware(audit_log),
    )


@pytest.fixture
def audit_events(audit_log):
    async def _event_types() -> list[str]:
        """Audit event types in chronological order (oldest first)."""
        return [e.event_type for e in reversed(await audit_log.get_all())]

    return _event_types
