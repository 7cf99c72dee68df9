"""
Identity provider access for AuthScreen.
"""

from .client import IdentityProvider, IdentityToolkitClient, parse_provider_error

__all__ = ['IdentityProvider', 'IdentityToolkitClient', 'parse_provider_error']
