class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    def __init__(self, message: str, details=None):
        super().__init__(message)
        self.details = details


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""

    status_code = 404


class ConflictError(DomainError):
    """Raised when a write would break a uniqueness or state rule."""

    status_code = 409


class AuthorizationError(DomainError):
    """Raised when an entity exists but may not be used (e.g. inactive employee)."""

    status_code = 403
