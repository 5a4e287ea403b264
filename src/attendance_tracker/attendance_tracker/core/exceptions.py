class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class CorruptStateError(DomainError):
    """Raised when a persisted slot cannot be decoded."""
