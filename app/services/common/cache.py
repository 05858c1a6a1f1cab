"""Resilient cache - JSON values over a key-value backend with retries."""

import json
from typing import Any, Protocol

from loguru import logger

from app.services.common.retry import RetryPolicy
from settings import CACHE_TTL


class CacheBackend(Protocol):
    """Key-value store with expiry and pattern deletion."""

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str, ttl_seconds: int) -> None: ...

    async def delete(self, key: str) -> None: ...

    async def delete_pattern(self, pattern: str) -> None: ...


class ResilientCache:
    """Cache wrapper where every failure degrades to a miss or a no-op.

    The cache is an optimization only. Reads that keep failing or return
    unparsable data count as misses, and failed writes and deletes are
    logged and dropped.
    """

    def __init__(self, backend: CacheBackend, retry: RetryPolicy, ttl: int = CACHE_TTL):
        self._backend = backend
        self._retry = retry
        self._ttl = ttl

    async def get(self, key: str) -> Any | None:
        """Cached JSON value, None on miss or failure."""
        try:
            raw = await self._retry.call(f"cache get {key}", lambda: self._backend.get(key))
        except Exception as e:
            logger.warning("Failed to get cached result after retries: key={}, error={}", key, e)
            return None

        if raw is None:
            return None

        try:
            return json.loads(raw)
        except (TypeError, ValueError) as e:
            logger.warning("Malformed cached payload: key={}, error={}", key, e)
            return None

    async def set(self, key: str, data: Any) -> bool:
        """Store a JSON value with the configured TTL."""
        payload = json.dumps(data)
        try:
            await self._retry.call(f"cache set {key}", lambda: self._backend.set(key, payload, self._ttl))
        except Exception as e:
            logger.warning("Failed to set cached result after retries: key={}, error={}", key, e)
            return False
        return True

    async def delete(self, key: str) -> bool:
        """Invalidate one key."""
        try:
            await self._retry.call(f"cache delete {key}", lambda: self._backend.delete(key))
        except Exception as e:
            logger.warning("Failed to invalidate cache after retries: key={}, error={}", key, e)
            return False
        return True

    async def delete_pattern(self, pattern: str) -> bool:
        """Invalidate every key matching a `*` glob."""
        try:
            await self._retry.call(f"cache delete {pattern}", lambda: self._backend.delete_pattern(pattern))
        except Exception as e:
            logger.warning("Failed to invalidate cache after retries: pattern={}, error={}", pattern, e)
            return False
        return True
