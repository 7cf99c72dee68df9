"""
GUI models package.
"""
from .theme import Theme, WinUI3Styles

__all__ = [
    'Theme',
    'WinUI3Styles',
]
