"""Immutable audit log entry model. Domain-level immutability."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict


@dataclass(frozen=True)
class AuditLogEntry:
    """
    Immutable audit entry: id, when (UTC), what happened, structured payload.
    """

    id: str
    timestamp: datetime
    event_type: str
    payload: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Structured representation for JSON storage."""
        return {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type,
            "payload": self.payload,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AuditLogEntry":
        return cls(
            id=data["id"],
            timestamp=datetime.fromisoformat(data["timestamp"].replace("Z", "+00:00")),
            event_type=data["event_type"],
            payload=data.get("payload") or {},
        )
