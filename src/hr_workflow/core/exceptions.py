class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced employee, task, leave, report or review does not exist."""


class ConflictError(DomainError):
    """Raised on duplicate keys or when a row changed since it was read."""


class AuthenticationError(DomainError):
    """Raised when login credentials or the bearer token are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""
