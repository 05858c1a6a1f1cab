"""Word query service - cache-aside lookups over the word index."""

from collections.abc import Callable
from typing import Any, TypeVar

from loguru import logger

from app.models.words import ArticleOccurrence, MostCommonWord, TopWord
from app.repositories.words import WordIndexRepository
from app.services.common import ResilientCache, RetryPolicy
from app.services.words.keys import (
    find_words_key,
    most_common_key,
    normalize_words,
    top_words_key,
)

T = TypeVar("T")


class WordQueryService:
    """Answers word lookups from the cache, falling back to the index."""

    def __init__(
        self,
        index_repo: WordIndexRepository,
        cache: ResilientCache,
        retry: RetryPolicy,
    ):
        self._index = index_repo
        self._cache = cache
        self._retry = retry
        logger.debug("WordQueryService initialized")

    async def find_words(self, words: list[str]) -> dict[str, list[ArticleOccurrence]]:
        """Articles and offsets for each query word.

        Every normalized word is a key of the result, words with no
        occurrences map to an empty list.
        """
        normalized = normalize_words(words)
        key = find_words_key(normalized)

        cached = _decode(key, await self._cache.get(key), _occurrences_from_dict)
        if cached is not None:
            return cached

        try:
            rows = await self._retry.call(
                f"find_word_indexes {key}",
                lambda: self._index.find_word_indexes(normalized),
            )
        except Exception as e:
            logger.error("Error in find_words: words={}, error={}", normalized, e)
            raise

        result: dict[str, list[ArticleOccurrence]] = {w: [] for w in normalized}
        for row in rows:
            if row.word in result:
                result[row.word].append(ArticleOccurrence(article_id=row.article_id, offsets=row.positions))

        await self._cache.set(key, {w: [o.to_dict() for o in occ] for w, occ in result.items()})
        logger.debug("find_words({}): {} rows", key, len(rows))
        return result

    async def get_most_common_word_article(self, word: str) -> MostCommonWord | None:
        """Article with the most occurrences of a word, None if unseen.

        Absence is not cached so a new article shows up right away.
        """
        word = word.lower()
        key = most_common_key(word)

        cached = _decode(key, await self._cache.get(key), MostCommonWord.from_dict)
        if cached is not None:
            return cached

        try:
            top = await self._retry.call(
                f"find_top_count_for_word {word}",
                lambda: self._index.find_top_count_for_word(word),
            )
        except Exception as e:
            logger.error("Error in get_most_common_word_article: word={}, error={}", word, e)
            raise

        if top is None:
            return None

        result = MostCommonWord(article_id=top.article_id, count=top.count)
        await self._cache.set(key, result.to_dict())
        return result

    async def get_top_words(self, limit: int) -> list[TopWord]:
        """Most frequent words across all articles."""
        key = top_words_key(limit)

        cached = _decode(key, await self._cache.get(key), _top_words_from_list)
        if cached is not None:
            return cached

        try:
            words = await self._retry.call(f"top_words {limit}", lambda: self._index.top_words(limit))
        except Exception as e:
            logger.error("Error in get_top_words: limit={}, error={}", limit, e)
            raise

        await self._cache.set(key, [w.to_dict() for w in words])
        return words


def _occurrences_from_dict(data: dict) -> dict[str, list[ArticleOccurrence]]:
    return {word: [ArticleOccurrence.from_dict(o) for o in items] for word, items in data.items()}


def _top_words_from_list(data: list) -> list[TopWord]:
    return [TopWord.from_dict(d) for d in data]


def _decode(key: str, cached: Any, decode: Callable[[Any], T]) -> T | None:
    """Turn a cached payload into entities, None if it has the wrong shape."""
    if cached is None:
        return None
    try:
        return decode(cached)
    except (AttributeError, KeyError, TypeError) as e:
        logger.warning("Malformed cached payload: key={}, error={}", key, e)
        return None
