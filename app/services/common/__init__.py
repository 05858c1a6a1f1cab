"""Shared service utilities."""

from app.services.common.cache import CacheBackend, ResilientCache
from app.services.common.retry import RetryPolicy

__all__ = [
    "CacheBackend",
    "ResilientCache",
    "RetryPolicy",
]
