"""
Constants and default values for the auth screen client.
"""

# Identity provider REST endpoint
DEFAULT_IDENTITY_BASE_URL = "https://identitytoolkit.googleapis.com/v1"

# Form rules
MIN_PASSWORD_LENGTH = 6

# UI settings
MESSAGE_DISPLAY_TIME = 2.0  # seconds; overlay lifetime and transition delay
REFRESH_RATE_HZ = 100  # Dispatcher drain rate (100Hz = 10ms)
TICK_INTERVAL_MS = 1000 // REFRESH_RATE_HZ
DEFAULT_LOCALE = "ko"
MAIN_SCREEN_NAME = "MainScene"

# Timeout settings
API_TIMEOUT_SECONDS = 30
API_CONNECT_TIMEOUT_SECONDS = 10
