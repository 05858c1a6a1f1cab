"""DuckDB connection management."""

import duckdb
from loguru import logger

from app.models import ALL_DDL
from settings import DB_PATH


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize all tables from DDL statements (idempotent - uses IF NOT EXISTS)."""
    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.info("DB tables initialized")


def get_write_connection(path: str = DB_PATH) -> duckdb.DuckDBPyConnection:
    """Open a writable connection with all tables in place.

    Repositories share this one connection and open a cursor per call.
    """
    conn = duckdb.connect(path)
    init_tables(conn)
    logger.debug("DB connected: {}", path)
    return conn
