"""
Authentication flow controller for the login/register screen.

Validates form input, hands account creation and sign-in to the identity
provider on the async service, and applies the provider's answer to the
screen state only from the UI thread, via the main-thread dispatcher.
"""

import heapq
import itertools
import time
from concurrent.futures import Future
from typing import Callable, Coroutine, List, Optional, Tuple, TYPE_CHECKING

from AuthScreen.core.client.auth import messages
from AuthScreen.core.client.models import (
    MessageOverlay,
    Screen,
    ScreenState,
    Session,
    SubmitResult,
    ValidationErrorKind,
)
from AuthScreen.core.client.utils.constants import (
    DEFAULT_LOCALE,
    MESSAGE_DISPLAY_TIME,
    MIN_PASSWORD_LENGTH,
)
from AuthScreen.core.client.utils.exceptions import ValidationError
from AuthScreen.core.logging import get_logger

if TYPE_CHECKING:
    from AuthScreen.api.client import IdentityProvider
    from AuthScreen.core.client.services import AsyncService
    from AuthScreen.core.dispatch import MainThreadDispatcher

logger = get_logger(__name__)


def validate_login(email: str, password: str) -> str:
    """
    Check login form input.

    Returns:
        The email with surrounding whitespace removed

    Raises:
        ValidationError: EMPTY_EMAIL or EMPTY_PASSWORD
    """
    email = (email or "").strip()
    if not email:
        raise ValidationError(ValidationErrorKind.EMPTY_EMAIL)
    if not password:
        raise ValidationError(ValidationErrorKind.EMPTY_PASSWORD)
    return email


def validate_registration(email: str, password: str, confirm_password: str,
                          min_length: int = MIN_PASSWORD_LENGTH) -> str:
    """
    Check registration form input, in the order the form reports problems.

    Returns:
        The email with surrounding whitespace removed

    Raises:
        ValidationError: EMPTY_EMAIL, EMPTY_PASSWORD, MISMATCH or TOO_SHORT
    """
    email = validate_login(email, password)
    if password != confirm_password:
        raise ValidationError(ValidationErrorKind.MISMATCH)
    if len(password) < min_length:
        raise ValidationError(ValidationErrorKind.TOO_SHORT, {"min_length": min_length})
    return email


class AuthFlowController:
    """
    State machine behind the login, register and main panels.

    All public methods must be called on the UI thread. Provider calls run on
    the async service; their completions are queued on the dispatcher and
    applied during the next drain. tick() must run after every drain to expire
    the message overlay and fire delayed screen transitions.
    """

    def __init__(self, provider: 'IdentityProvider', dispatcher: 'MainThreadDispatcher',
                 runner: 'AsyncService',
                 navigate_to_main: Optional[Callable[[Session], None]] = None,
                 reset_screen: Optional[Callable[[], None]] = None,
                 message_display_time: float = MESSAGE_DISPLAY_TIME,
                 min_password_length: int = MIN_PASSWORD_LENGTH,
                 locale: str = DEFAULT_LOCALE,
                 clock: Callable[[], float] = time.monotonic):
        """
        Initialize the controller.

        Args:
            provider: Identity provider performing the actual authentication
            dispatcher: Queue drained by the UI loop
            runner: Object with run_async(coro) -> Future
            navigate_to_main: Called with the session once login completes
            reset_screen: Called after sign-out to reset the hosting UI
            message_display_time: Overlay lifetime and transition delay (seconds)
            min_password_length: Shortest password accepted at registration
            locale: Message catalog name
            clock: Monotonic time source
        """
        self._provider = provider
        self._dispatcher = dispatcher
        self._runner = runner
        self._navigate_to_main = navigate_to_main
        self._reset_screen = reset_screen
        self.message_display_time = message_display_time
        self.min_password_length = min_password_length
        self.locale = locale
        self._clock = clock

        self.state = ScreenState()
        self._session: Optional[Session] = None
        self._ready = False
        self._init_failed = False
        self._scheduled: List[Tuple[float, int, Callable[[], None]]] = []
        self._seq = itertools.count()

    # ==================== Properties ====================

    @property
    def session(self) -> Optional[Session]:
        return self._session

    @property
    def is_authenticated(self) -> bool:
        return self._session is not None and self._session.is_valid()

    @property
    def ready(self) -> bool:
        """True once the provider finished initializing."""
        return self._ready

    @property
    def init_failed(self) -> bool:
        """True if provider initialization failed; submits are refused for good."""
        return self._init_failed

    # ==================== Lifecycle ====================

    def start(self) -> None:
        """Show the login panel and initialize the provider in the background."""
        self.show_login()
        future = self._runner.run_async(self._provider.initialize())
        if future is None:
            self._init_failed = True
            self.show_message(self._text("init.failed"), False)
            return
        self._deliver(future, self._finish_initialize)

    def _finish_initialize(self, future: Future) -> None:
        if future.cancelled():
            logger.warning("Identity provider initialization cancelled")
            self._init_failed = True
            return
        exc = future.exception()
        if exc is not None:
            logger.error("Identity provider initialization failed: %s", exc)
            self._init_failed = True
            self.show_message(self._text("init.failed"), False)
            return
        self._ready = True
        logger.info("Identity provider initialized")

    # ==================== Screens ====================

    def show_login(self) -> None:
        self._switch(Screen.LOGIN)

    def show_register(self) -> None:
        self._switch(Screen.REGISTER)

    def _switch(self, screen: Screen) -> None:
        self.state.screen = screen
        self.state.inputs.clear()
        self.state.message = None
        self.state.touch()
        logger.debug("Showing %s panel", screen.name)

    def show_message(self, text: str, is_success: bool) -> None:
        """Show the overlay for message_display_time seconds."""
        self.state.message = MessageOverlay(
            text=text,
            is_success=is_success,
            expires_at=self._clock() + self.message_display_time,
        )
        self.state.touch()

    # ==================== UI triggers ====================

    def on_register_submit(self) -> SubmitResult:
        inputs = self.state.inputs
        return self.register(inputs.register_email, inputs.register_password, inputs.register_confirm)

    def on_login_submit(self) -> SubmitResult:
        inputs = self.state.inputs
        return self.login(inputs.login_email, inputs.login_password)

    def on_back_to_login(self) -> None:
        self.show_login()

    def on_open_register(self) -> None:
        self.show_register()

    # ==================== Operations ====================

    def register(self, email: str, password: str, confirm_password: str) -> SubmitResult:
        """
        Validate the register form and create the account.

        On success the user is returned to the login panel after the message
        delay, to sign in with the new account.
        """
        try:
            email = validate_registration(email, password, confirm_password, self.min_password_length)
        except ValidationError as e:
            return self._reject(e)

        blocked = self._check_available()
        if blocked is not None:
            return blocked

        logger.info("Creating account for %s", email)
        return self._start_call(self._provider.create_account(email, password), self._finish_register)

    def login(self, email: str, password: str) -> SubmitResult:
        """Validate the login form and sign in."""
        try:
            email = validate_login(email, password)
        except ValidationError as e:
            return self._reject(e)

        blocked = self._check_available()
        if blocked is not None:
            return blocked

        logger.info("Signing in %s", email)
        return self._start_call(self._provider.authenticate(email, password), self._finish_login)

    def sign_out(self) -> bool:
        """
        Sign out and reset the screen to its initial state.

        Returns:
            True if a session was signed out
        """
        if self._session is None:
            return False

        logger.info("Signing out %s", self._session.email)
        self._provider.sign_out()
        self._session = None
        self._scheduled.clear()
        self.show_login()
        if self._reset_screen:
            self._reset_screen()
        return True

    # ==================== Completion handlers (UI thread) ====================

    def _finish_register(self, future: Future) -> None:
        if not self._settle(future, "register.cancelled"):
            return
        self._session = future.result()
        logger.info("Account created: %s", self._session.email)
        self.show_message(self._text("register.success"), True)
        self._schedule(self.message_display_time, self._return_to_login)

    def _finish_login(self, future: Future) -> None:
        if not self._settle(future, "login.cancelled"):
            return
        self._session = future.result()
        logger.info("Signed in: %s", self._session.email)
        self.show_message(self._text("login.success"), True)
        self._schedule(self.message_display_time, self._enter_main)

    def _settle(self, future: Future, cancelled_key: str) -> bool:
        """Clear the busy flag and report failures; True if the call succeeded."""
        self._set_busy(False)
        if future.cancelled():
            logger.warning("Identity request cancelled")
            self.show_message(self._text(cancelled_key), False)
            return False
        exc = future.exception()
        if exc is not None:
            logger.warning("Identity request failed: %s", exc)
            self.show_message(messages.describe_error(exc, self.locale), False)
            return False
        return True

    def _return_to_login(self) -> None:
        # show_login() also clears every input field
        self.show_login()

    def _enter_main(self) -> None:
        if self._session is None:
            return
        self.state.screen = Screen.MAIN
        self.state.inputs.clear()
        self.state.message = None
        self.state.touch()
        if self._navigate_to_main:
            self._navigate_to_main(self._session)

    # ==================== Timing ====================

    def tick(self) -> None:
        """Expire the overlay and run delayed transitions that are due."""
        now = self._clock()
        message = self.state.message
        if message is not None and message.expired(now):
            self.state.message = None
            self.state.touch()

        while self._scheduled and self._scheduled[0][0] <= now:
            _, _, action = heapq.heappop(self._scheduled)
            try:
                action()
            except Exception:
                logger.error("Scheduled transition %r failed", action, exc_info=True)

    def _schedule(self, delay: float, action: Callable[[], None]) -> None:
        heapq.heappush(self._scheduled, (self._clock() + delay, next(self._seq), action))

    # ==================== Helpers ====================

    def _reject(self, error: ValidationError) -> SubmitResult:
        logger.info("Form rejected: %s", error.kind.name)
        self.show_message(
            messages.validation_message(error.kind, self.locale, self.min_password_length), False
        )
        return SubmitResult.INVALID

    def _check_available(self) -> Optional[SubmitResult]:
        if self._init_failed:
            self.show_message(self._text("init.failed"), False)
            return SubmitResult.NOT_READY
        if not self._ready:
            self.show_message(self._text("init.pending"), False)
            return SubmitResult.NOT_READY
        if self.state.busy:
            logger.debug("Ignoring submit while a request is outstanding")
            self.show_message(self._text("busy"), False)
            return SubmitResult.BUSY
        return None

    def _start_call(self, coro: Coroutine, on_done: Callable[[Future], None]) -> SubmitResult:
        future = self._runner.run_async(coro)
        if future is None:
            self.show_message(self._text("init.pending"), False)
            return SubmitResult.NOT_READY
        self._set_busy(True)
        self._deliver(future, on_done)
        return SubmitResult.PENDING

    def _deliver(self, future: Future, on_done: Callable[[Future], None]) -> None:
        # Completion fires on the async service thread; hop to the UI thread.
        future.add_done_callback(lambda f: self._dispatcher.submit(lambda: on_done(f)))

    def _set_busy(self, busy: bool) -> None:
        if self.state.busy != busy:
            self.state.busy = busy
            self.state.touch()

    def _text(self, key: str) -> str:
        return messages.text(key, self.locale)


__all__ = ['AuthFlowController', 'validate_login', 'validate_registration']
