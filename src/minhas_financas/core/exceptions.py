class DomainError(Exception):
    """Base exception for business rule violations."""


class BusinessRuleError(DomainError):
    """Raised when input data violates a business rule (e.g. duplicate email)."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""
