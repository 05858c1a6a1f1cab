"""Tests for word query service."""

import asyncio
import json

import pytest

from app.models.words import ArticleOccurrence, MostCommonWord, TopWord
from app.services.words import WordQueryService


@pytest.fixture
def service(index_repo, cache, retry):
    return WordQueryService(index_repo=index_repo, cache=cache, retry=retry)


def seed(index_repo, article_id, positions):
    index_repo.articles[article_id] = (positions, {w: len(p) for w, p in positions.items()})


class TestFindWords:
    def test_cached_result_returned(self, service, index_repo, cache_backend):
        cache_backend.data["find-words:hello"] = json.dumps({"hello": [{"article_id": "1", "offsets": [0, 12]}]})

        result = asyncio.run(service.find_words(["hello"]))

        assert result == {"hello": [ArticleOccurrence(article_id="1", offsets=[0, 12])]}
        assert cache_backend.calls_of("get") == [("get", "find-words:hello")]
        assert index_repo.calls_of("find_word_indexes") == []

    def test_miss_queries_store_and_caches(self, service, index_repo, cache_backend):
        seed(index_repo, "1", {"hello": [0, 12]})

        result = asyncio.run(service.find_words(["hello"]))

        assert result == {"hello": [ArticleOccurrence(article_id="1", offsets=[0, 12])]}
        (_, key, value, ttl) = cache_backend.calls_of("set")[0]
        assert key == "find-words:hello"
        assert json.loads(value) == {"hello": [{"article_id": "1", "offsets": [0, 12]}]}
        assert ttl == 600

    def test_multiple_words_one_batched_query(self, service, index_repo):
        seed(index_repo, "1", {"hello": [0, 12], "world": [6]})

        result = asyncio.run(service.find_words(["hello", "world"]))

        assert result == {
            "hello": [ArticleOccurrence(article_id="1", offsets=[0, 12])],
            "world": [ArticleOccurrence(article_id="1", offsets=[6])],
        }
        assert index_repo.calls_of("find_word_indexes") == [("find_word_indexes", ["hello", "world"])]

    def test_case_insensitive(self, service, index_repo):
        seed(index_repo, "1", {"hello": [0, 12]})
        result = asyncio.run(service.find_words(["HELLO"]))
        assert result == {"hello": [ArticleOccurrence(article_id="1", offsets=[0, 12])]}

    def test_permutations_share_cache_key(self, service, index_repo, cache_backend):
        seed(index_repo, "1", {"hello": [0], "world": [6]})

        asyncio.run(service.find_words(["Hello", "World"]))
        asyncio.run(service.find_words(["world", "hello", "HELLO"]))

        keys = {c[1] for c in cache_backend.calls_of("get")}
        assert keys == {"find-words:hello,world"}
        assert len(index_repo.calls_of("find_word_indexes")) == 1

    def test_absent_word_maps_to_empty_list(self, service, index_repo):
        seed(index_repo, "1", {"hello": [0]})
        result = asyncio.run(service.find_words(["hello", "missing"]))
        assert result["missing"] == []
        assert len(result["hello"]) == 1

    def test_all_empty_result_is_cached(self, service, cache_backend):
        assert asyncio.run(service.find_words(["nothing"])) == {"nothing": []}
        assert json.loads(cache_backend.data["find-words:nothing"]) == {"nothing": []}

    def test_one_entry_per_article(self, service, index_repo):
        seed(index_repo, "1", {"cat": [0, 4]})
        seed(index_repo, "2", {"cat": [3]})
        result = asyncio.run(service.find_words(["cat"]))
        assert result["cat"] == [
            ArticleOccurrence(article_id="1", offsets=[0, 4]),
            ArticleOccurrence(article_id="2", offsets=[3]),
        ]

    def test_cache_get_failure_falls_back_to_store(self, service, index_repo, cache_backend, log_records):
        cache_backend.failing.add("get")
        seed(index_repo, "1", {"hello": [0, 12]})

        result = asyncio.run(service.find_words(["hello"]))

        assert result == {"hello": [ArticleOccurrence(article_id="1", offsets=[0, 12])]}
        assert any(r["level"].name == "WARNING" for r in log_records)

    def test_cache_set_failure_does_not_fail_request(self, service, index_repo, cache_backend):
        cache_backend.failing.add("set")
        seed(index_repo, "1", {"hello": [0]})
        assert asyncio.run(service.find_words(["hello"]))["hello"][0].article_id == "1"

    def test_malformed_shape_treated_as_miss(self, service, index_repo, cache_backend):
        cache_backend.data["find-words:hello"] = json.dumps(["not", "a", "mapping"])
        seed(index_repo, "1", {"hello": [0]})
        result = asyncio.run(service.find_words(["hello"]))
        assert result == {"hello": [ArticleOccurrence(article_id="1", offsets=[0])]}

    def test_transient_store_failure_retried(self, service, index_repo):
        index_repo.query_failures = 2
        seed(index_repo, "1", {"hello": [0]})
        assert asyncio.run(service.find_words(["hello"]))["hello"]
        assert len(index_repo.calls_of("find_word_indexes")) == 3

    def test_store_failure_propagates(self, service, index_repo, cache_backend, log_records):
        index_repo.query_failures = 10
        with pytest.raises(ConnectionError):
            asyncio.run(service.find_words(["hello"]))
        assert len(index_repo.calls_of("find_word_indexes")) == 4
        assert cache_backend.calls_of("set") == []
        assert any(r["level"].name == "ERROR" for r in log_records)


class TestMostCommonWord:
    def test_returns_top_article_and_caches(self, service, index_repo, cache_backend):
        seed(index_repo, "1", {"hello": [0, 5, 9, 14, 20]})
        seed(index_repo, "2", {"hello": [3]})

        result = asyncio.run(service.get_most_common_word_article("Hello"))

        assert result == MostCommonWord(article_id="1", count=5)
        (_, key, value, ttl) = cache_backend.calls_of("set")[0]
        assert key == "most-common-word:hello"
        assert json.loads(value) == {"article_id": "1", "count": 5}
        assert ttl == 600

    def test_not_found_returns_none_and_not_cached(self, service, cache_backend):
        assert asyncio.run(service.get_most_common_word_article("nonexistent")) is None
        assert cache_backend.calls_of("set") == []

    def test_cached_result(self, service, index_repo, cache_backend):
        cache_backend.data["most-common-word:hello"] = json.dumps({"article_id": "1", "count": 5})
        assert asyncio.run(service.get_most_common_word_article("hello")) == MostCommonWord("1", 5)
        assert index_repo.calls_of("find_top_count_for_word") == []

    def test_ties_resolved_by_lowest_article_id(self, service, index_repo):
        seed(index_repo, "b", {"x": [0, 2]})
        seed(index_repo, "a", {"x": [1, 3]})
        assert asyncio.run(service.get_most_common_word_article("x")).article_id == "a"

    def test_store_error_propagates(self, service, index_repo, log_records):
        index_repo.query_failures = 10
        with pytest.raises(ConnectionError):
            asyncio.run(service.get_most_common_word_article("hello"))
        assert any(r["level"].name == "ERROR" for r in log_records)


class TestTopWords:
    def test_totals_across_articles(self, service, index_repo, cache_backend):
        seed(index_repo, "1", {"a": [0, 2], "b": [4]})
        seed(index_repo, "2", {"a": [0], "c": [2, 4, 6]})

        result = asyncio.run(service.get_top_words(2))

        assert result == [TopWord("a", 3), TopWord("c", 3)]
        assert "top-words:2" in cache_backend.data

    def test_cached(self, service, index_repo, cache_backend):
        cache_backend.data["top-words:1"] = json.dumps([{"word": "a", "count": 9}])
        assert asyncio.run(service.get_top_words(1)) == [TopWord("a", 9)]
        assert index_repo.calls_of("top_words") == []
