"""Dependency Injection container - initialized at app startup."""

import duckdb

from app.repositories.articles import ArticleRepository
from app.repositories.common import CacheRepository
from app.repositories.db import get_write_connection
from app.repositories.words import WordIndexRepository
from app.services.articles import ArticleService
from app.services.common import ResilientCache, RetryPolicy
from app.services.words import WordIndexer, WordQueryService
from settings import CACHE_TTL


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(
        self,
        conn: duckdb.DuckDBPyConnection | None = None,
        retry: RetryPolicy | None = None,
    ) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        self._conn = conn if conn is not None else get_write_connection()
        self._retry = retry or RetryPolicy()

        # Repositories (singletons)
        self._article_repo = ArticleRepository(self._conn, read_only=False)
        self._index_repo = WordIndexRepository(self._conn, read_only=False)
        self._cache_repo = CacheRepository(self._conn, read_only=False)

        self._cache = ResilientCache(self._cache_repo, self._retry, ttl=CACHE_TTL)

        # Services (with injected repos)
        self.word_query = WordQueryService(
            index_repo=self._index_repo,
            cache=self._cache,
            retry=self._retry,
        )

        self.word_indexer = WordIndexer(
            index_repo=self._index_repo,
            cache=self._cache,
            retry=self._retry,
        )

        self.articles = ArticleService(
            article_repo=self._article_repo,
            indexer=self.word_indexer,
        )

        self._initialized = True

    @property
    def cache_repo(self) -> CacheRepository:
        return self._cache_repo

    def reset(self) -> None:
        """Forget all instances so init() can run again."""
        self._initialized = False


# Global container instance
container = Container()
