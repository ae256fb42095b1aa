"""Domain schemas. Request/response shapes."""

from shortlinks.domain.schemas.link import (
    AccessEntryResponse,
    AuditLogEntryResponse,
    LinkCreateRequest,
    LinkResponse,
)

__all__ = [
    "AccessEntryResponse",
    "AuditLogEntryResponse",
    "LinkCreateRequest",
    "LinkResponse",
]
