class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ConflictError(DomainError):
    """Raised when a record that must be unique already exists."""


class NotFoundError(DomainError):
    """Raised when a referenced user or record does not exist."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a session token is missing, invalid or expired."""


class PermissionDeniedError(DomainError):
    """Raised when an authenticated user lacks permission for an action."""


class ConfigurationError(Exception):
    """Raised at startup when mandatory configuration is missing."""
