class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a member, event or record does not exist."""


class StoreError(Exception):
    """Raised when a call against the backing store fails."""
