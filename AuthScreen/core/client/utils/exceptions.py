"""
Custom exceptions for the auth screen client.
"""

from AuthScreen.core.client.models import AuthErrorCode, ValidationErrorKind


class ClientError(Exception):
    """Base exception for client errors."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class AuthenticationError(ClientError):
    """Exception raised for authentication-related errors."""
    pass


class ValidationError(AuthenticationError):
    """Form input rejected before any call to the identity provider."""

    def __init__(self, kind: ValidationErrorKind, details: dict = None):
        super().__init__(f"Validation failed: {kind.name}", details)
        self.kind = kind


class ProviderError(AuthenticationError):
    """Failure reported by the identity provider."""

    def __init__(self, code: AuthErrorCode, raw_code: str = "", details: dict = None):
        raw_code = raw_code or code.name
        super().__init__(f"Identity provider error: {raw_code}", details)
        self.code = code
        self.raw_code = raw_code


class DispatcherError(ClientError):
    """Exception raised when the main-thread dispatcher is misused."""
    pass
