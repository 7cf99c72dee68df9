"""
Tk GUI client for AuthScreen with sv_ttk (Sun Valley) theme.

This package is laid out as:
- models: theme constants
- components: reusable sv_ttk widgets
- controllers: the auth view
- client: the GUI client owning the Tk loop and the dispatcher
"""

from .client import GUIClient
from .components import MessageBanner, WinUI3Entry
from .models import Theme, WinUI3Styles

__all__ = [
    'GUIClient',
    'Theme',
    'WinUI3Styles',
    'MessageBanner',
    'WinUI3Entry',
]
