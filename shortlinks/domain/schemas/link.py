"""Pydantic schemas for the short link API. Request/response shapes only, no store access."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from shortlinks.domain.models.audit import AuditLogEntry
from shortlinks.domain.models.link import LinkRecord


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------

class LinkCreateRequest(BaseModel):
    """Request schema for creating a short link. Domain rules are enforced by the registry."""

    long_url: str = Field(..., description="URL to shorten; surrounding whitespace is trimmed")
    custom_code: Optional[str] = Field(None, description="Optional 3-20 char code [A-Za-z0-9_-]")
    validity_mins: Optional[int] = Field(None, description="Minutes until expiry; server default when omitted")


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------

class AccessEntryResponse(BaseModel):
    ts: datetime
    referrer: Optional[str] = None


class LinkResponse(BaseModel):
    """Response schema for a short link with its analytics."""

    code: str
    short_url: str
    long_url: str
    created_at: datetime
    expires_at: datetime
    validity_mins: int
    clicks: int
    last_accessed: Optional[datetime] = None
    history: List[AccessEntryResponse] = Field(default_factory=list)

    @classmethod
    def from_record(
        cls,
        record: LinkRecord,
        base_url: str,
        history_limit: Optional[int] = None,
    ) -> "LinkResponse":
        history = record.history if history_limit is None else record.history[:history_limit]
        return cls(
            code=record.code,
            short_url=f"{base_url.rstrip('/')}/{record.code}",
            long_url=record.long_url,
            created_at=record.created_at,
            expires_at=record.expires_at,
            validity_mins=record.validity_mins,
            clicks=record.clicks,
            last_accessed=record.last_accessed,
            history=[AccessEntryResponse(ts=h.ts, referrer=h.referrer) for h in history],
        )


class AuditLogEntryResponse(BaseModel):
    """Response schema for one audit log entry."""

    id: str
    timestamp: datetime
    event_type: str
    payload: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_entry(cls, entry: AuditLogEntry) -> "AuditLogEntryResponse":
        return cls(
            id=entry.id,
            timestamp=entry.timestamp,
            event_type=entry.event_type,
            payload=entry.payload,
        )
