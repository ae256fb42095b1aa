"""Domain model for short links. Pure business semantics — no storage or HTTP."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional


def _parse_ts(value: Optional[str]) -> Optional[datetime]:
    if value is None:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


@dataclass(frozen=True)
class AccessEntry:
    """One resolved access: when it happened and who referred it."""

    ts: datetime
    referrer: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"ts": self.ts.isoformat(), "referrer": self.referrer}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AccessEntry":
        return cls(ts=_parse_ts(data["ts"]), referrer=data.get("referrer"))


@dataclass
class LinkRecord:
    """
    A long URL registered under a short code, with its validity window and analytics.
    `code` never changes after creation. Analytics fields change only via register_access().
    """

    code: str
    long_url: str
    created_at: datetime
    expires_at: datetime
    validity_mins: int
    clicks: int = 0
    last_accessed: Optional[datetime] = None
    history: List[AccessEntry] = field(default_factory=list)

    @classmethod
    def new(cls, code: str, long_url: str, validity_mins: int, now: datetime) -> "LinkRecord":
        """Build a fresh record expiring validity_mins after now."""
        return cls(
            code=code,
            long_url=long_url,
            created_at=now,
            expires_at=now + timedelta(minutes=validity_mins),
            validity_mins=validity_mins,
        )

    def is_expired(self, now: datetime) -> bool:
        """Expired once expires_at lies strictly in the past."""
        return self.expires_at < now

    def register_access(
        self,
        now: datetime,
        referrer: Optional[str] = None,
        history_limit: Optional[int] = None,
    ) -> None:
        """Count one click and prepend it to history (most recent first)."""
        self.clicks += 1
        self.last_accessed = now
        self.history.insert(0, AccessEntry(ts=now, referrer=referrer))
        if history_limit is not None:
            del self.history[history_limit:]

    def to_dict(self) -> Dict[str, Any]:
        """Persisted representation. Datetimes as ISO 8601 strings."""
        return {
            "code": self.code,
            "long_url": self.long_url,
            "created_at": self.created_at.isoformat(),
            "expires_at": self.expires_at.isoformat(),
            "validity_mins": self.validity_mins,
            "clicks": self.clicks,
            "last_accessed": self.last_accessed.isoformat() if self.last_accessed else None,
            "history": [entry.to_dict() for entry in self.history],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LinkRecord":
        return cls(
            code=data["code"],
            long_url=data["long_url"],
            created_at=_parse_ts(data["created_at"]),
            expires_at=_parse_ts(data["expires_at"]),
            validity_mins=data["validity_mins"],
            clicks=data.get("clicks", 0),
            last_accessed=_parse_ts(data.get("last_accessed")),
            history=[AccessEntry.from_dict(h) for h in data.get("history") or []],
        )


@dataclass(frozen=True)
class ResolveResult:
    """
    Outcome of resolving a short code. Not-found and expired are ordinary results,
    not exceptions: found=False, and expired=True only for an expired record.
    """

    found: bool
    expired: bool = False
    record: Optional[LinkRecord] = None

    @classmethod
    def hit(cls, record: LinkRecord) -> "ResolveResult":
        return cls(found=True, record=record)

    @classmethod
    def miss(cls) -> "ResolveResult":
        return cls(found=False)

    @classmethod
    def expired_link(cls) -> "ResolveResult":
        return cls(found=False, expired=True)
