"""Cache repository - key-value storage with expiry."""

from datetime import datetime, timedelta, timezone

from loguru import logger

from app.repositories.base import BaseRepository


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def glob_to_like(pattern: str) -> str:
    """Translate a `*` glob into a LIKE pattern with `\\` as escape."""
    escaped = pattern.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return escaped.replace("*", "%")


class CacheRepository(BaseRepository):
    """Repository for cached query results.

    Values are opaque strings. Expired rows are never returned and are
    removed lazily by `purge_expired`.
    """

    def now(self) -> datetime:
        """Current time used for expiry."""
        return _utcnow()

    async def get(self, key: str) -> str | None:
        """Load a live cache value."""
        row = await self.afetchone(
            "SELECT value FROM kv_cache WHERE key = ? AND expires_at > ?",
            [key, self.now()],
        )
        if row:
            logger.debug("Cache hit: {}", key)
            return row[0]
        return None

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """Save a value that expires ttl_seconds from now."""
        self._check_writable("write cache")

        await self.aexecute(
            "INSERT OR REPLACE INTO kv_cache (key, value, expires_at) VALUES (?, ?, ?)",
            [key, value, self.now() + timedelta(seconds=ttl_seconds)],
        )
        logger.debug("Cache saved: {} (ttl={}s)", key, ttl_seconds)

    async def delete(self, key: str) -> None:
        """Remove a single key."""
        self._check_writable("clear cache")

        await self.aexecute("DELETE FROM kv_cache WHERE key = ?", [key])
        logger.debug("Cache deleted: {}", key)

    async def delete_pattern(self, pattern: str) -> None:
        """Remove every key matching a `*` glob."""
        self._check_writable("clear cache")

        await self.aexecute(
            "DELETE FROM kv_cache WHERE key LIKE ? ESCAPE '\\'",
            [glob_to_like(pattern)],
        )
        logger.debug("Cache deleted pattern: {}", pattern)

    async def purge_expired(self) -> int:
        """Drop expired rows, return how many were removed."""
        self._check_writable("clear cache")

        def purge(cur) -> int:
            now = self.now()
            count = cur.execute("SELECT COUNT(*) FROM kv_cache WHERE expires_at <= ?", [now]).fetchone()[0]
            cur.execute("DELETE FROM kv_cache WHERE expires_at <= ?", [now])
            return count

        removed = await self.run(purge)
        logger.info("Cache purged: {} expired entries", removed)
        return removed
