"""
Authentication view for login/register with sv_ttk styling.
"""
import tkinter as tk
from tkinter import ttk
from typing import Dict, Optional, TYPE_CHECKING

from AuthScreen.core.client.models import Screen, ScreenState
from ..components import MessageBanner, WinUI3Entry
from ..models import Theme, WinUI3Styles

if TYPE_CHECKING:
    from AuthScreen.core.client.auth import AuthFlowController


class AuthView:
    """Login, register and signed-in panels rendered from the controller's ScreenState."""

    def __init__(self, root: tk.Tk, controller: 'AuthFlowController',
                 title: str = "AuthScreen", theme: Optional[Theme] = None):
        self.root = root
        self.controller = controller
        self.title = title
        self.theme = theme or Theme()
        self.frame: Optional[ttk.Frame] = None
        self.panels: Dict[Screen, ttk.Frame] = {}
        self.entries: Dict[str, WinUI3Entry] = {}
        self.submit_buttons = []
        self.banner: Optional[MessageBanner] = None
        self.main_label: Optional[ttk.Label] = None
        self._rendered_version = -1
        self._visible_screen: Optional[Screen] = None

    def show(self):
        """Build the widgets - horizontal layout with branding on the left."""
        self.frame = ttk.Frame(self.root)
        self.frame.grid(row=0, column=0, sticky="nsew")

        self.root.grid_rowconfigure(0, weight=1)
        self.root.grid_columnconfigure(0, weight=1)

        self.frame.grid_columnconfigure(0, weight=1)
        self.frame.grid_columnconfigure(1, weight=0)  # Separator
        self.frame.grid_columnconfigure(2, weight=1)
        self.frame.grid_rowconfigure(0, weight=1)

        # Left side - title
        left_frame = ttk.Frame(self.frame, padding=(WinUI3Styles.SPACE_64, WinUI3Styles.SPACE_64))
        left_frame.grid(row=0, column=0, sticky="nsew")
        left_frame.grid_rowconfigure(0, weight=1)
        left_frame.grid_rowconfigure(2, weight=1)
        left_frame.grid_columnconfigure(0, weight=1)

        left_content = ttk.Frame(left_frame)
        left_content.grid(row=1, column=0, sticky="w")
        ttk.Label(left_content, text=self.title, font=self.theme.title_font).pack(
            anchor="w", pady=(0, WinUI3Styles.SPACE_16))
        ttk.Label(left_content, text="Sign in with your email",
                  font=self.theme.subtitle_font).pack(anchor="w")

        ttk.Separator(self.frame, orient="vertical").grid(row=0, column=1, sticky="ns", padx=32)

        # Right side - forms
        right_frame = ttk.Frame(self.frame, padding=(WinUI3Styles.SPACE_64, WinUI3Styles.SPACE_64))
        right_frame.grid(row=0, column=2, sticky="nsew")
        right_frame.grid_rowconfigure(0, weight=1)
        right_frame.grid_rowconfigure(2, weight=1)
        right_frame.grid_columnconfigure(0, weight=1)

        container = ttk.Frame(right_frame)
        container.grid(row=1, column=0, sticky="ew")

        self.panels[Screen.LOGIN] = self._build_login(container)
        self.panels[Screen.REGISTER] = self._build_register(container)
        self.panels[Screen.MAIN] = self._build_main(container)

        self.banner = MessageBanner(container, self.theme.success_fg, self.theme.error_fg)

        self.root.unbind('<Return>')
        self.root.bind('<Return>', lambda e: self._submit_current())

        self.render(force=True)

    def hide(self):
        """Destroy the view."""
        if self.frame:
            self.frame.destroy()
            self.frame = None
        self.panels.clear()
        self.entries.clear()
        self.submit_buttons = []
        self._visible_screen = None

    # ==================== Panels ====================

    def _entry(self, parent, key: str, label: str, password: bool = False) -> WinUI3Entry:
        inputs = self.controller.state.inputs
        entry = WinUI3Entry(parent, label=label, password=password,
                            on_change=lambda value: setattr(inputs, key, value))
        entry.pack(fill="x", pady=(0, WinUI3Styles.SPACE_16))
        self.entries[key] = entry
        return entry

    def _build_login(self, parent) -> ttk.Frame:
        panel = ttk.Frame(parent)
        self._entry(panel, "login_email", "Email")
        self._entry(panel, "login_password", "Password", password=True)

        sign_in = ttk.Button(panel, text="Sign In", style="Accent.TButton",
                             command=self.controller.on_login_submit)
        sign_in.pack(fill="x", pady=(WinUI3Styles.SPACE_8, WinUI3Styles.SPACE_8))
        self.submit_buttons.append(sign_in)

        ttk.Button(panel, text="Create Account",
                   command=self.controller.on_open_register).pack(fill="x")
        return panel

    def _build_register(self, parent) -> ttk.Frame:
        panel = ttk.Frame(parent)
        self._entry(panel, "register_email", "Email")
        self._entry(panel, "register_password", "Password", password=True)
        self._entry(panel, "register_confirm", "Confirm password", password=True)

        create = ttk.Button(panel, text="Register", style="Accent.TButton",
                            command=self.controller.on_register_submit)
        create.pack(fill="x", pady=(WinUI3Styles.SPACE_8, WinUI3Styles.SPACE_8))
        self.submit_buttons.append(create)

        ttk.Button(panel, text="Back to Sign In",
                   command=self.controller.on_back_to_login).pack(fill="x")
        return panel

    def _build_main(self, parent) -> ttk.Frame:
        panel = ttk.Frame(parent)
        self.main_label = ttk.Label(panel, text="", font=self.theme.subtitle_font)
        self.main_label.pack(anchor="w", pady=(0, WinUI3Styles.SPACE_24))
        ttk.Button(panel, text="Sign Out", command=self.controller.sign_out).pack(fill="x")
        return panel

    def _submit_current(self):
        screen = self.controller.state.screen
        if screen is Screen.LOGIN:
            self.controller.on_login_submit()
        elif screen is Screen.REGISTER:
            self.controller.on_register_submit()

    # ==================== Rendering ====================

    def render(self, force: bool = False):
        """Apply the controller state to the widgets if it changed."""
        if not self.frame:
            return
        state: ScreenState = self.controller.state
        if not force and state.version == self._rendered_version:
            return
        self._rendered_version = state.version

        if state.screen is not self._visible_screen:
            if self._visible_screen is not None:
                self.panels[self._visible_screen].pack_forget()
            self.panels[state.screen].pack(fill="x", before=self.banner if self.banner.visible else None)
            self._visible_screen = state.screen

        for key, entry in self.entries.items():
            entry.set(getattr(state.inputs, key))

        button_state = ["disabled"] if state.busy else ["!disabled"]
        for button in self.submit_buttons:
            button.state(button_state)

        if state.screen is Screen.MAIN and self.controller.session is not None:
            self.main_label.configure(text=f"Signed in as {self.controller.session.email}")

        if state.message is None:
            self.banner.hide()
        else:
            self.banner.show(state.message.text, state.message.is_success)
