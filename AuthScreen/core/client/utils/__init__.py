"""
Utility functions and shared components for the auth screen client.
"""

from .constants import (
    API_TIMEOUT_SECONDS,
    DEFAULT_IDENTITY_BASE_URL,
    DEFAULT_LOCALE,
    MAIN_SCREEN_NAME,
    MESSAGE_DISPLAY_TIME,
    MIN_PASSWORD_LENGTH,
    TICK_INTERVAL_MS,
)
from .exceptions import (
    AuthenticationError,
    ClientError,
    DispatcherError,
    ProviderError,
    ValidationError,
)

__all__ = [
    'ClientError',
    'AuthenticationError',
    'ValidationError',
    'ProviderError',
    'DispatcherError',
    'API_TIMEOUT_SECONDS',
    'DEFAULT_IDENTITY_BASE_URL',
    'DEFAULT_LOCALE',
    'MAIN_SCREEN_NAME',
    'MESSAGE_DISPLAY_TIME',
    'MIN_PASSWORD_LENGTH',
    'TICK_INTERVAL_MS',
]
