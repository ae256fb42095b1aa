"""Access tracker: resolves short codes, applying expiry and click analytics."""

import logging
from typing import Optional

from shortlinks.application.audit_log import AuditLog
from shortlinks.application.registry import Registry
from shortlinks.core.clock import Clock, utc_now
from shortlinks.domain.models.link import LinkRecord, ResolveResult

EVENT_MISS = "shortlink.miss"
EVENT_EXPIRED = "shortlink.expired"
EVENT_ACCESS = "shortlink.access"


class AccessTracker:
    """
    Resolve a code to its record. Unknown and expired codes are normal outcomes.
    Expired records are left untouched and stay registered until deleted.
    The click update is a single atomic store update, so concurrent resolves never lose a count.
    """

    def __init__(
        self,
        registry: Registry,
        audit_log: AuditLog,
        clock: Clock = utc_now,
        history_limit: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._registry = registry
        self._audit_log = audit_log
        self._clock = clock
        self._history_limit = history_limit
        self._logger = logger or logging.getLogger(__name__)

    async def _miss(self, code: str) -> ResolveResult:
        await self._audit_log.append(EVENT_MISS, {"code": code})
        return ResolveResult.miss()

    async def resolve(self, code: str, referrer: Optional[str] = None) -> ResolveResult:
        now = self._clock()
        record = await self._registry.get(code)
        if record is None:
            return await self._miss(code)

        if record.is_expired(now):
            await self._audit_log.append(EVENT_EXPIRED, {"code": code})
            return ResolveResult.expired_link()

        def _count_access(current: LinkRecord) -> None:
            current.register_access(now, referrer, self._history_limit)

        updated = await self._registry.update(code, _count_access)
        if updated is None:
            # Deleted between lookup and update
            self._logger.info("link_vanished_during_access", extra={"code": code})
            return await self._miss(code)

        await self._audit_log.append(EVENT_ACCESS, {"code": code, "referrer": referrer})
        return ResolveResult.hit(updated)
