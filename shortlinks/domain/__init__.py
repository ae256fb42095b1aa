"""Domain layer: models, schemas, validators, exceptions. Pure business logic only."""

from shortlinks.domain.exceptions import ConflictError, DomainError, ValidationError
from shortlinks.domain.models import AccessEntry, AuditLogEntry, LinkRecord, ResolveResult
from shortlinks.domain.schemas import (
    AuditLogEntryResponse,
    LinkCreateRequest,
    LinkResponse,
)
from shortlinks.domain.validators import (
    CodeValidation,
    is_valid_custom_code,
    validate_custom_code,
    validate_long_url,
    validate_validity_mins,
)

__all__ = [
    "AccessEntry",
    "AuditLogEntry",
    "AuditLogEntryResponse",
    "CodeValidation",
    "ConflictError",
    "DomainError",
    "LinkCreateRequest",
    "LinkRecord",
    "LinkResponse",
    "ResolveResult",
    "ValidationError",
    "is_valid_custom_code",
    "validate_custom_code",
    "validate_long_url",
    "validate_validity_mins",
]
