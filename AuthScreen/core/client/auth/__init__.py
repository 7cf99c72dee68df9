"""
Authentication module for the auth screen client.
Handles login, registration, and session management.
"""

from .auth_flow import AuthFlowController, validate_login, validate_registration
from .messages import describe_error, error_message, validation_message

__all__ = [
    'AuthFlowController',
    'validate_login',
    'validate_registration',
    'describe_error',
    'error_message',
    'validation_message',
]
