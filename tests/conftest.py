"""Shared fixtures and in-memory fakes."""

import copy
import fnmatch

import duckdb
import pytest
from loguru import logger

from app.models.words import TopWord, WordArticleCount, WordIndex
from app.repositories.db import init_tables
from app.services.common import ResilientCache, RetryPolicy


class FakeCacheBackend:
    """Dict-backed cache recording every call; ops in `failing` always raise."""

    def __init__(self):
        self.data: dict[str, str] = {}
        self.ttls: dict[str, int] = {}
        self.calls: list[tuple] = []
        self.failing: set[str] = set()

    def _record(self, op: str, *args) -> None:
        self.calls.append((op, *args))
        if op in self.failing:
            raise ConnectionError(f"cache {op} unavailable")

    def calls_of(self, op: str) -> list[tuple]:
        return [c for c in self.calls if c[0] == op]

    async def get(self, key):
        self._record("get", key)
        return self.data.get(key)

    async def set(self, key, value, ttl_seconds):
        self._record("set", key, value, ttl_seconds)
        self.data[key] = value
        self.ttls[key] = ttl_seconds

    async def delete(self, key):
        self._record("delete", key)
        self.data.pop(key, None)

    async def delete_pattern(self, pattern):
        self._record("delete_pattern", pattern)
        for key in [k for k in self.data if fnmatch.fnmatchcase(k, pattern)]:
            del self.data[key]


class FakeIndexRepository:
    """In-memory word index with the same contract as WordIndexRepository."""

    def __init__(self):
        self.articles: dict[str, tuple[dict[str, list[int]], dict[str, int]]] = {}
        self.calls: list[tuple] = []
        self.replace_failures = 0
        self.query_failures = 0

    def _maybe_fail_query(self) -> None:
        if self.query_failures:
            self.query_failures -= 1
            raise ConnectionError("store unavailable")

    def calls_of(self, op: str) -> list[tuple]:
        return [c for c in self.calls if c[0] == op]

    async def replace_article_index(self, article_id, positions, counts):
        self.calls.append(("replace_article_index", article_id))
        if self.replace_failures:
            self.replace_failures -= 1
            raise ConnectionError("transaction failed")
        self.articles[article_id] = (copy.deepcopy(positions), dict(counts))

    async def get_article_counts(self, article_id):
        self.calls.append(("get_article_counts", article_id))
        if article_id not in self.articles:
            return {}
        return dict(self.articles[article_id][1])

    async def find_word_indexes(self, words):
        self.calls.append(("find_word_indexes", sorted(words)))
        self._maybe_fail_query()
        return [
            WordIndex(article_id=aid, word=word, positions=list(positions[word]))
            for word in sorted(set(words))
            for aid, (positions, _) in sorted(self.articles.items())
            if word in positions
        ]

    async def find_top_count_for_word(self, word):
        self.calls.append(("find_top_count_for_word", word))
        self._maybe_fail_query()
        rows = [(counts[word], aid) for aid, (_, counts) in self.articles.items() if word in counts]
        if not rows:
            return None
        count, aid = sorted(rows, key=lambda r: (-r[0], r[1]))[0]
        return WordArticleCount(article_id=aid, word=word, count=count)

    async def top_words(self, limit):
        self.calls.append(("top_words", limit))
        self._maybe_fail_query()
        totals: dict[str, int] = {}
        for _, counts in self.articles.values():
            for word, count in counts.items():
                totals[word] = totals.get(word, 0) + count
        ranked = sorted(totals.items(), key=lambda t: (-t[1], t[0]))[:limit]
        return [TopWord(word=w, count=c) for w, c in ranked]


@pytest.fixture
def retry():
    return RetryPolicy(min_delay=0, max_delay=0)


@pytest.fixture
def cache_backend():
    return FakeCacheBackend()


@pytest.fixture
def cache(cache_backend, retry):
    return ResilientCache(cache_backend, retry, ttl=600)


@pytest.fixture
def index_repo():
    return FakeIndexRepository()


@pytest.fixture
def conn():
    conn = duckdb.connect(":memory:")
    init_tables(conn)
    yield conn
    conn.close()


@pytest.fixture
def log_records():
    records = []
    handler_id = logger.add(lambda m: records.append(m.record), level="DEBUG")
    yield records
    logger.remove(handler_id)