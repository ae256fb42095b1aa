"""Domain-specific exceptions. Pure domain layer — no infrastructure."""


class DomainError(Exception):
    """Base for all domain-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Raised when a long URL, custom code or validity window is malformed."""


class ConflictError(DomainError):
    """Raised when a custom short code is already registered."""
