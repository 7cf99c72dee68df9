"""
Configuration module for the AuthScreen application.
Stores all application settings and sensitive information.
"""

import os
from typing import Dict, Any

from AuthScreen.core.client.utils import constants


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.environ.get(name, default))
    except ValueError:
        return default


class Config:
    """Application configuration class."""

    # Identity provider
    IDENTITY_API_KEY = os.environ.get("AUTHSCREEN_API_KEY", "")
    IDENTITY_BASE_URL = os.environ.get("AUTHSCREEN_IDENTITY_URL", constants.DEFAULT_IDENTITY_BASE_URL)
    API_TIMEOUT_SECONDS = _env_float("AUTHSCREEN_API_TIMEOUT", constants.API_TIMEOUT_SECONDS)

    # Form rules
    MIN_PASSWORD_LENGTH = constants.MIN_PASSWORD_LENGTH

    # UI
    MESSAGE_DISPLAY_TIME = _env_float("AUTHSCREEN_MESSAGE_TIME", constants.MESSAGE_DISPLAY_TIME)
    LOCALE = os.environ.get("AUTHSCREEN_LOCALE", constants.DEFAULT_LOCALE)
    TICK_INTERVAL_MS = constants.TICK_INTERVAL_MS

    # Screen shown after a successful login
    MAIN_SCREEN_NAME = os.environ.get("AUTHSCREEN_MAIN_SCREEN", constants.MAIN_SCREEN_NAME)

    @classmethod
    def get_config(cls) -> Dict[str, Any]:
        """Get all configuration values as a dictionary."""
        return {
            "IDENTITY_API_KEY": cls.IDENTITY_API_KEY,
            "IDENTITY_BASE_URL": cls.IDENTITY_BASE_URL,
            "API_TIMEOUT_SECONDS": cls.API_TIMEOUT_SECONDS,
            "MIN_PASSWORD_LENGTH": cls.MIN_PASSWORD_LENGTH,
            "MESSAGE_DISPLAY_TIME": cls.MESSAGE_DISPLAY_TIME,
            "LOCALE": cls.LOCALE,
            "TICK_INTERVAL_MS": cls.TICK_INTERVAL_MS,
            "MAIN_SCREEN_NAME": cls.MAIN_SCREEN_NAME,
        }
