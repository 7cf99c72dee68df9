"""
Tk GUI client for the AuthScreen login screen.

The Tk main loop is the owning thread: every tick it drains the main-thread
dispatcher, advances the auth flow timers, and re-renders the view.
Identity provider calls run on the AsyncService loop thread.
"""

import concurrent.futures
import tkinter as tk
from typing import Optional

import darkdetect
import sv_ttk

from AuthScreen.api.client import IdentityProvider, IdentityToolkitClient
from AuthScreen.config import Config
from AuthScreen.core.client.auth import AuthFlowController
from AuthScreen.core.client.models import Session
from AuthScreen.core.client.services import AsyncService
from AuthScreen.core.dispatch import MainThreadDispatcher
from AuthScreen.core.logging import get_logger
from .controllers.auth_view import AuthView

logger = get_logger(__name__)


class GUIClient:
    """
    Hosts the auth screen in a Tk window.

    Owns the single dispatcher instance for the process and passes it to the
    auth flow controller.
    """

    def __init__(self, provider: Optional[IdentityProvider] = None,
                 message_display_time: float = Config.MESSAGE_DISPLAY_TIME,
                 min_password_length: int = Config.MIN_PASSWORD_LENGTH,
                 locale: str = Config.LOCALE,
                 tick_interval_ms: int = Config.TICK_INTERVAL_MS,
                 main_screen_name: str = Config.MAIN_SCREEN_NAME):
        self._provider = provider or IdentityToolkitClient(
            Config.IDENTITY_API_KEY, Config.IDENTITY_BASE_URL, Config.API_TIMEOUT_SECONDS
        )
        self._tick_interval_ms = tick_interval_ms
        self._main_screen_name = main_screen_name
        self._closing = False

        self.root: Optional[tk.Tk] = None
        self._auth_view: Optional[AuthView] = None

        # Services
        self._dispatcher = MainThreadDispatcher()
        self._async_service = AsyncService()

        self._controller = AuthFlowController(
            self._provider,
            self._dispatcher,
            self._async_service,
            navigate_to_main=self._handle_navigate_to_main,
            reset_screen=self._handle_reset_screen,
            message_display_time=message_display_time,
            min_password_length=min_password_length,
            locale=locale,
        )

    @property
    def controller(self) -> AuthFlowController:
        return self._controller

    # ==================== Lifecycle ====================

    def run(self):
        """Start the GUI client."""
        self.root = tk.Tk()
        self.root.title("AuthScreen")
        self.root.geometry("960x540")
        self.root.minsize(720, 420)

        sv_ttk.set_theme((darkdetect.theme() or "light").lower())

        self._dispatcher.bind_owner()
        self._async_service.start()

        self._show_auth_view()
        self._controller.start()

        self.root.protocol("WM_DELETE_WINDOW", self._on_close)
        self.root.after(self._tick_interval_ms, self._tick)

        logger.info("Auth screen started")
        self.root.mainloop()

    def _ui_alive(self) -> bool:
        """Check if UI is still alive."""
        return bool(self.root) and bool(self.root.winfo_exists()) and not self._closing

    def _tick(self):
        """One pass of the owning loop."""
        if not self._ui_alive():
            return
        try:
            self._dispatcher.drain()
            self._controller.tick()
            if self._auth_view:
                self._auth_view.render()
        finally:
            if self._ui_alive():
                self.root.after(self._tick_interval_ms, self._tick)

    def _on_close(self):
        """Close the provider, stop the async loop and destroy the window."""
        self._closing = True
        if self._async_service.is_running():
            future = self._async_service.run_async(self._provider.close())
            if future is not None:
                try:
                    future.result(timeout=2.0)
                except concurrent.futures.TimeoutError:
                    logger.warning("Timed out closing identity provider")
                except Exception:
                    logger.error("Error closing identity provider", exc_info=True)
        self._async_service.stop()
        # Completions queued by cancelled requests
        self._dispatcher.drain()
        if self.root:
            self.root.destroy()
            self.root = None
        logger.info("Auth screen closed")

    # ==================== Views ====================

    def _show_auth_view(self):
        if self._auth_view:
            self._auth_view.hide()
        self._auth_view = AuthView(self.root, self._controller, title=self.root.title())
        self._auth_view.show()

    def _handle_navigate_to_main(self, session: Session):
        logger.info("Entering %s as %s", self._main_screen_name, session.email)
        if self.root:
            self.root.title(f"AuthScreen - {self._main_screen_name}")

    def _handle_reset_screen(self):
        if self.root:
            self.root.title("AuthScreen")
            self._show_auth_view()
