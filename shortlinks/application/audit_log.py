"""Append-only, capped audit log of business actions. Persisted through the key-value store."""

import logging
import uuid
from typing import Any, Dict, List, Optional

from shortlinks.application.key_value_store import KeyValueStore
from shortlinks.core.clock import Clock, utc_now
from shortlinks.domain.models.audit import AuditLogEntry

AUDIT_LOG_KEY = "audit:log"
DEFAULT_AUDIT_LOG_LIMIT = 1000


class AuditLog:
    """
    Newest-first audit trail under a single store key.
    Appends beyond `limit` evict the oldest entries. Entries are never mutated.
    Every entry is also emitted as a structured log line.
    """

    def __init__(
        self,
        store: KeyValueStore,
        limit: int = DEFAULT_AUDIT_LOG_LIMIT,
        clock: Clock = utc_now,
        key: str = AUDIT_LOG_KEY,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._store = store
        self._limit = limit
        self._clock = clock
        self._key = key
        self._logger = logger or logging.getLogger("shortlinks.audit")

    async def append(self, event_type: str, payload: Optional[Dict[str, Any]] = None) -> AuditLogEntry:
        """Prepend a new entry and truncate to the cap in one atomic store update."""
        entry = AuditLogEntry(
            id=str(uuid.uuid4()),
            timestamp=self._clock(),
            event_type=event_type,
            payload=dict(payload or {}),
        )
        serialized = entry.to_dict()

        def _prepend(current: Optional[List[Dict[str, Any]]]) -> List[Dict[str, Any]]:
            return ([serialized] + list(current or []))[: self._limit]

        await self._store.update(self._key, _prepend)
        self._logger.info(
            event_type,
            extra={"audit_id": entry.id, "event_type": event_type, "payload": entry.payload},
        )
        return entry

    async def get_all(self) -> List[AuditLogEntry]:
        """All retained entries, newest first."""
        raw = await self._store.get(self._key)
        return [AuditLogEntry.from_dict(item) for item in raw or []]

    async def clear(self) -> None:
        await self._store.set(self._key, [])
