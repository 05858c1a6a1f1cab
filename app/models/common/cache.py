"""Key-value cache table - query results with expiry."""

CACHE_DDL = """
CREATE TABLE IF NOT EXISTS kv_cache (
    key VARCHAR PRIMARY KEY,
    value VARCHAR NOT NULL,
    expires_at TIMESTAMP NOT NULL
)
"""
