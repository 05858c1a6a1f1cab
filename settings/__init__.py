"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("WORDS_DB_PATH", "words.duckdb")

# Logging
LOG_DIR = Path(os.getenv("WORDS_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("WORDS_LOG_LEVEL", "INFO")
LOG_RETENTION = os.getenv("WORDS_LOG_RETENTION", "7 days")

# Cache
CACHE_TTL = int(os.getenv("WORDS_CACHE_TTL", "600"))

# Retry (attempts after the first failure)
RETRY_ATTEMPTS = int(os.getenv("WORDS_RETRY_ATTEMPTS", "3"))
RETRY_MIN_DELAY = float(os.getenv("WORDS_RETRY_MIN_DELAY", "1.0"))
RETRY_FACTOR = float(os.getenv("WORDS_RETRY_FACTOR", "2"))
RETRY_MAX_DELAY = float(os.getenv("WORDS_RETRY_MAX_DELAY", "5.0"))

# Queries
TOP_WORDS_LIMIT = 10
MAX_TOP_WORDS_LIMIT = 100
