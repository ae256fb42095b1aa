# shortlinks/config/logging.py

import json
import logging
from datetime import datetime, timezone

from shortlinks.core.context import correlation_id_ctx


# Structured fields passed via `extra=` by the service layer
_EXTRA_FIELDS = (
    "code",
    "event_type",
    "payload",
    "audit_id",
    "validity_mins",
    "key",
    "attempt",
    "attempts",
    "base_length",
)


class JsonFormatter(logging.Formatter):
    def format(self, record):
        log_record = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "correlation_id": correlation_id_ctx.get(),
        }
        for field in _EXTRA_FIELDS:
            if hasattr(record, field):
                log_record[field] = getattr(record, field)
        return json.dumps(log_record, default=str)


def configure_logging(log_level: str):
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.addHandler(handler)
