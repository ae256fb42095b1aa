"""Short link application service. Operation surface for callers; no HTTP, no FastAPI."""

import logging
from typing import List, Optional

from shortlinks.application.access_tracker import AccessTracker
from shortlinks.application.action_middleware import ActionMiddleware
from shortlinks.application.audit_log import AuditLog
from shortlinks.application.registry import Registry
from shortlinks.domain.models.audit import AuditLogEntry
from shortlinks.domain.models.link import LinkRecord, ResolveResult


class ShortLinkService:
    """
    Application-layer orchestration only.
    Create, resolve and delete run through the action middleware, so each call leaves
    action.start plus action.success or action.error in the audit log.
    """

    def __init__(
        self,
        registry: Registry,
        access_tracker: AccessTracker,
        audit_log: AuditLog,
        middleware: ActionMiddleware,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._registry = registry
        self._access_tracker = access_tracker
        self._audit_log = audit_log
        self._logger = logger or logging.getLogger(__name__)
        self._create = middleware.wrap("create_short_link", registry.create)
        self._access = middleware.wrap("access_short_link", access_tracker.resolve)
        self._delete = middleware.wrap("delete_short_link", registry.delete)

    async def create_short_link(
        self,
        long_url: str,
        custom_code: Optional[str] = None,
        validity_mins: Optional[int] = None,
    ) -> LinkRecord:
        """Raises ValidationError or ConflictError; both are audited before propagating."""
        # Forward only supplied arguments; action.start arg_count counts these
        kwargs = {}
        if custom_code is not None:
            kwargs["custom_code"] = custom_code
        if validity_mins is not None:
            kwargs["validity_mins"] = validity_mins
        return await self._create(long_url, **kwargs)

    async def resolve_short_link(self, code: str, referrer: Optional[str] = None) -> ResolveResult:
        if referrer is None:
            return await self._access(code)
        return await self._access(code, referrer=referrer)

    async def delete_short_link(self, code: str) -> None:
        await self._delete(code)

    async def get_short_link(self, code: str) -> Optional[LinkRecord]:
        """Read a record for stats display. Does not count as an access."""
        return await self._registry.get(code)

    async def list_short_links(self) -> List[LinkRecord]:
        """All records, newest first."""
        records = await self._registry.list()
        return sorted(records, key=lambda r: r.created_at, reverse=True)

    async def get_audit_log(self) -> List[AuditLogEntry]:
        return await self._audit_log.get_all()

    async def clear_audit_log(self) -> None:
        await self._audit_log.clear()
        self._logger.info("audit_log_cleared")
