"""Domain models. Pure business entities."""

from shortlinks.domain.models.audit import AuditLogEntry
from shortlinks.domain.models.link import AccessEntry, LinkRecord, ResolveResult

__all__ = [
    "AccessEntry",
    "AuditLogEntry",
    "LinkRecord",
    "ResolveResult",
]
