"""Word index tables - positional index and per-article counts."""

WORD_INDEX_DDL = """
CREATE TABLE IF NOT EXISTS word_index (
    article_id VARCHAR NOT NULL,
    word VARCHAR NOT NULL,
    positions INTEGER[] NOT NULL
)
"""

WORD_ARTICLE_COUNT_DDL = """
CREATE TABLE IF NOT EXISTS word_article_count (
    article_id VARCHAR NOT NULL,
    word VARCHAR NOT NULL,
    count INTEGER NOT NULL
)
"""

WORD_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_word_index_word ON word_index(word)",
    "CREATE INDEX IF NOT EXISTS idx_word_index_article ON word_index(article_id)",
    "CREATE INDEX IF NOT EXISTS idx_word_count_word ON word_article_count(word, count)",
    "CREATE INDEX IF NOT EXISTS idx_word_count_article ON word_article_count(article_id)",
]
