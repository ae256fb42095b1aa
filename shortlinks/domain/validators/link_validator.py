"""Validators for short link domain rules. Pure functions, no infrastructure or store access."""

import re
from dataclasses import dataclass
from typing import Any, Optional

from shortlinks.domain.exceptions import ValidationError

# Custom code bounds (domain constants; avoid magic numbers)
CUSTOM_CODE_MIN_LENGTH = 3
CUSTOM_CODE_MAX_LENGTH = 20
_CUSTOM_CODE_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


@dataclass(frozen=True)
class CodeValidation:
    """Tagged validation result: valid, or invalid with the reason."""

    valid: bool
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.valid


def validate_custom_code(code: Any) -> CodeValidation:
    """Check a caller-chosen short code: str, 3-20 chars, letters/digits/underscore/dash."""
    if not isinstance(code, str):
        return CodeValidation(False, "custom code must be a string")
    if not (CUSTOM_CODE_MIN_LENGTH <= len(code) <= CUSTOM_CODE_MAX_LENGTH):
        return CodeValidation(
            False,
            f"custom code must be {CUSTOM_CODE_MIN_LENGTH}-{CUSTOM_CODE_MAX_LENGTH} characters, got {len(code)}",
        )
    if not _CUSTOM_CODE_PATTERN.fullmatch(code):
        return CodeValidation(False, "custom code may only contain letters, digits, '_' and '-'")
    return CodeValidation(True)


def is_valid_custom_code(code: Any) -> bool:
    return validate_custom_code(code).valid


def validate_long_url(long_url: Any) -> str:
    """Return the trimmed long URL. Raises ValidationError if missing or blank."""
    if not isinstance(long_url, str) or not long_url.strip():
        raise ValidationError("long_url must be a non-empty string")
    return long_url.strip()


def validate_validity_mins(validity_mins: Any, default: int) -> int:
    """Return the validity window in minutes; default when None. Raises ValidationError if not a positive int."""
    if validity_mins is None:
        return default
    # bool is an int subclass
    if isinstance(validity_mins, bool) or not isinstance(validity_mins, int) or validity_mins <= 0:
        raise ValidationError(f"validity_mins must be a positive integer, got {validity_mins!r}")
    return validity_mins
