"""Domain validators. Pure validation functions."""

from shortlinks.domain.validators.link_validator import (
    CodeValidation,
    is_valid_custom_code,
    validate_custom_code,
    validate_long_url,
    validate_validity_mins,
)

__all__ = [
    "CodeValidation",
    "is_valid_custom_code",
    "validate_custom_code",
    "validate_long_url",
    "validate_validity_mins",
]
