"""
Form components using sv_ttk (Sun Valley theme) - standard ttk widgets.
"""
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional


class WinUI3Entry(ttk.Frame):
    """Labelled entry field whose text is mirrored into a callback.

    ``on_change`` receives the full text after every edit, so the owner can
    keep its form model current without polling the widget.
    """

    def __init__(self, parent, label: str = "", password: bool = False, width: int = 40,
                 on_change: Optional[Callable[[str], None]] = None, **kwargs):
        super().__init__(parent, **kwargs)

        self.variable = tk.StringVar(self)
        if on_change is not None:
            self.variable.trace_add("write", lambda *_: on_change(self.variable.get()))

        if label:
            self.label_widget = ttk.Label(self, text=label)
            self.label_widget.pack(anchor="w", pady=(0, 4))

        self.entry = ttk.Entry(self, width=width, textvariable=self.variable,
                               show="*" if password else "")
        self.entry.pack(fill="x")

    def get(self) -> str:
        """Get entry value."""
        try:
            return self.variable.get()
        except tk.TclError:
            # Widget was destroyed
            return ""

    def set(self, value: str):
        """Set entry value if it differs from the current text."""
        try:
            if self.variable.get() != value:
                self.variable.set(value)
        except tk.TclError:
            pass


class MessageBanner(ttk.Label):
    """Status line shown under the active form; hidden when empty."""

    def __init__(self, parent, success_color: str, error_color: str, **kwargs):
        super().__init__(parent, anchor="center", **kwargs)
        self.success_color = success_color
        self.error_color = error_color
        self._visible = False

    @property
    def visible(self) -> bool:
        return self._visible

    def show(self, text: str, is_success: bool):
        self.configure(text=text, foreground=self.success_color if is_success else self.error_color)
        if not self._visible:
            self.pack(fill="x", pady=(16, 0))
            self._visible = True

    def hide(self):
        if self._visible:
            self.pack_forget()
            self._visible = False
