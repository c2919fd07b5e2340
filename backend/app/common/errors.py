class DomainError(Exception):
    """Base domain error with a user-facing message."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Raised when input is malformed or a required value is missing."""


class InvalidStateError(DomainError):
    """Raised when the operation is not legal from the current status."""


class NotFoundError(DomainError):
    """Raised when a mutating operation targets an unknown identifier."""
