"""
GUI Components package using sv_ttk (Sun Valley theme).
"""
from .common import MessageBanner, WinUI3Entry

__all__ = [
    'MessageBanner',
    'WinUI3Entry',
]
