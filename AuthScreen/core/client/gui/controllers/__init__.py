"""
GUI Controllers package.
"""
from .auth_view import AuthView

__all__ = [
    'AuthView',
]
