"""FastAPI dependency injection: key-value store, audit log, ShortLinkService."""

import logging
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from shortlinks.application.access_tracker import AccessTracker
from shortlinks.application.action_middleware import ActionMiddleware
from shortlinks.application.audit_log import AuditLog
from shortlinks.application.key_value_store import KeyValueStore
from shortlinks.application.link_service import ShortLinkService
from shortlinks.application.registry import Registry
from shortlinks.config.settings import AppSettings, get_settings
from shortlinks.infrastructure.store.memory_store import InMemoryKeyValueStore
from shortlinks.infrastructure.store.redis_client import RedisClient
from shortlinks.infrastructure.store.redis_store import RedisKeyValueStore

_store: KeyValueStore | None = None


def get_store() -> KeyValueStore:
    """Return the process-wide store selected by settings.storage_backend."""
    global _store
    if _store is None:
        settings = get_settings()
        if settings.storage_backend == "redis":
            _store = RedisKeyValueStore(RedisClient(settings.redis_url))
        else:
            _store = InMemoryKeyValueStore()
    return _store


def route_prefixes(app: FastAPI) -> frozenset[str]:
    """Fixed first path segments of the app's routes, e.g. 'links' or 'docs'."""
    prefixes = set()
    for route in app.routes:
        segment = getattr(route, "path", "").strip("/").split("/")[0]
        if segment and not segment.startswith("{"):
            prefixes.add(segment.lower())
    return frozenset(prefixes)


def get_audit_log(
    store: Annotated[KeyValueStore, Depends(get_store)],
    settings: Annotated[AppSettings, Depends(get_settings)],
) -> AuditLog:
    """Audit log over the shared store. Explicit instance, injected wherever events are written."""
    return AuditLog(store=store, limit=settings.audit_log_limit)


def get_link_service(
    request: Request,
    store: Annotated[KeyValueStore, Depends(get_store)],
    audit_log: Annotated[AuditLog, Depends(get_audit_log)],
    settings: Annotated[AppSettings, Depends(get_settings)],
) -> ShortLinkService:
    """Build ShortLinkService with injected registry, access tracker, audit log and middleware."""
    registry = Registry(
        store=store,
        audit_log=audit_log,
        default_validity_mins=settings.default_validity_mins,
        code_length=settings.code_length,
        reserved_codes=route_prefixes(request.app),
    )
    access_tracker = AccessTracker(
        registry=registry,
        audit_log=audit_log,
        history_limit=settings.access_history_limit,
    )
    return ShortLinkService(
        registry=registry,
        access_tracker=access_tracker,
        audit_log=audit_log,
        middleware=ActionMiddleware(audit_log),
        logger=logging.getLogger("shortlinks.application.link_service"),
    )

