"""Base repository class."""

import asyncio
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

import duckdb
from loguru import logger


class BaseRepository:
    """Base repository with common functionality.

    DuckDB calls block, so the async helpers run them in a worker thread,
    each on its own cursor. A cursor is a separate connection to the same
    database, which keeps concurrent calls and their transactions apart.
    """

    def __init__(self, conn: duckdb.DuckDBPyConnection, read_only: bool = True):
        self._db = conn
        self._read_only = read_only
        logger.debug("{} initialized", self.__class__.__name__)

    def _check_writable(self, operation: str) -> None:
        if self._read_only:
            raise RuntimeError(f"Cannot {operation} in read-only mode")

    @contextmanager
    def cursor(self) -> Iterator[duckdb.DuckDBPyConnection]:
        """Open a dedicated cursor, closed on exit."""
        cur = self._db.cursor()
        try:
            yield cur
        finally:
            cur.close()

    @contextmanager
    def transaction(self) -> Iterator[duckdb.DuckDBPyConnection]:
        """Run statements on a fresh cursor inside one transaction."""
        with self.cursor() as cur:
            cur.execute("BEGIN TRANSACTION")
            try:
                yield cur
            except Exception:
                cur.execute("ROLLBACK")
                raise
            cur.execute("COMMIT")

    async def run(self, fn: Callable[[duckdb.DuckDBPyConnection], Any]) -> Any:
        """Run fn(cursor) in a worker thread without blocking the event loop."""

        def call():
            with self.cursor() as cur:
                return fn(cur)

        return await asyncio.to_thread(call)

    async def afetchall(self, query: str, params: list | None = None) -> list:
        """Async fetch all rows."""
        return await self.run(lambda cur: _execute(cur, query, params).fetchall())

    async def afetchone(self, query: str, params: list | None = None) -> Any:
        """Async fetch one row."""
        return await self.run(lambda cur: _execute(cur, query, params).fetchone())

    async def aexecute(self, query: str, params: list | None = None) -> None:
        """Async execute a statement."""
        await self.run(lambda cur: _execute(cur, query, params))


def _execute(cur: duckdb.DuckDBPyConnection, query: str, params: list | None) -> duckdb.DuckDBPyConnection:
    if params:
        return cur.execute(query, params)
    return cur.execute(query)
