class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when an operation targets a request id that does not exist."""


class InvalidStateError(DomainError):
    """Raised when a request is no longer Pending and cannot be resolved again."""


class AuthorizationError(DomainError):
    """Raised when an actor lacks permission for an action."""


class StorageError(Exception):
    """Raised when the record store is unavailable or holds a corrupt payload.

    Not a DomainError: callers decide whether a retry is safe.
    """
