"""Repositories package - data access layer for our database."""

from app.repositories.articles import ArticleRepository
from app.repositories.base import BaseRepository
from app.repositories.common import CacheRepository
from app.repositories.db import get_write_connection, init_tables
from app.repositories.words import WordIndexRepository

__all__ = [
    # DB
    "init_tables",
    "get_write_connection",
    # Base
    "BaseRepository",
    # Common
    "CacheRepository",
    # Articles
    "ArticleRepository",
    # Words
    "WordIndexRepository",
]
