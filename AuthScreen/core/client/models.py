"""
Data models shared by the auth flow, the identity provider adapter and the views.
"""
import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional


class AuthErrorCode(Enum):
    """Failure categories reported by the identity provider."""
    INVALID_EMAIL = auto()
    EMAIL_IN_USE = auto()
    WEAK_PASSWORD = auto()
    WRONG_PASSWORD = auto()
    USER_NOT_FOUND = auto()
    TOO_MANY_REQUESTS = auto()
    NETWORK_FAILURE = auto()
    UNKNOWN = auto()


class ValidationErrorKind(Enum):
    """Local form checks, evaluated in this order."""
    EMPTY_EMAIL = auto()
    EMPTY_PASSWORD = auto()
    MISMATCH = auto()
    TOO_SHORT = auto()


class Screen(Enum):
    """Top-level panels; exactly one is visible."""
    LOGIN = auto()
    REGISTER = auto()
    MAIN = auto()


class SubmitResult(Enum):
    """Outcome of a login/register submit on the UI thread."""
    PENDING = auto()
    INVALID = auto()
    BUSY = auto()
    NOT_READY = auto()


@dataclass
class Session:
    """Authenticated identity returned by the provider."""
    user_id: str
    email: str
    id_token: str = field(default="", repr=False)
    refresh_token: str = field(default="", repr=False)

    def is_valid(self) -> bool:
        """Check if session has an identity."""
        return bool(self.user_id)


@dataclass
class MessageOverlay:
    """Transient status message shown over the current screen."""
    text: str
    is_success: bool
    expires_at: float

    def expired(self, now: Optional[float] = None) -> bool:
        now = time.monotonic() if now is None else now
        return now >= self.expires_at


@dataclass
class FormInputs:
    """Current text of every input field on the login and register panels."""
    login_email: str = ""
    login_password: str = ""
    register_email: str = ""
    register_password: str = ""
    register_confirm: str = ""

    def clear(self) -> None:
        self.login_email = ""
        self.login_password = ""
        self.register_email = ""
        self.register_password = ""
        self.register_confirm = ""


@dataclass
class ScreenState:
    """
    Everything a view needs to render the auth screen.

    ``version`` is bumped on every mutation so views can skip redundant redraws.
    """
    screen: Screen = Screen.LOGIN
    inputs: FormInputs = field(default_factory=FormInputs)
    message: Optional[MessageOverlay] = None
    busy: bool = False
    version: int = 0

    def touch(self) -> None:
        self.version += 1
