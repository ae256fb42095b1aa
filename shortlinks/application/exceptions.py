"""Application-layer exceptions. Do not reuse domain exceptions."""


class ApplicationError(Exception):
    """Base for all application-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConcurrentUpdateError(ApplicationError):
    """Raised when an atomic store update keeps losing to other writers."""
