"""
Client services package.
"""
from .async_service import AsyncService

__all__ = [
    'AsyncService',
]
