"""Article indexing - rebuild an article's word index and invalidate caches."""

import asyncio

from loguru import logger

from app.repositories.words import WordIndexRepository
from app.services.common import ResilientCache, RetryPolicy
from app.services.words.keys import TOP_WORDS_PATTERN, most_common_key
from app.services.words.tokenizer import ArticleWordIndex, index_text


class WordIndexer:
    """Keeps the word index and cached query results in step with article content."""

    def __init__(
        self,
        index_repo: WordIndexRepository,
        cache: ResilientCache,
        retry: RetryPolicy,
    ):
        self._index = index_repo
        self._cache = cache
        self._retry = retry
        logger.debug("WordIndexer initialized")

    async def process_article(self, article_id: str, content: str) -> None:
        """Reindex an article from its content, then drop stale cache entries.

        Tokenizing and the replace transaction are retried together. When
        retries run out the error is raised and the previous index rows are
        left untouched. Cache invalidation never fails the call.
        """

        async def build() -> tuple[ArticleWordIndex, list[str]]:
            previous = await self._index.get_article_counts(article_id)
            index = index_text(content)
            await self._index.replace_article_index(article_id, index.positions, index.counts)
            return index, list(previous)

        try:
            index, previous = await self._retry.call(f"process_article {article_id}", build)
        except Exception as e:
            logger.error("Error in process_article: article={}, error={}", article_id, e)
            raise

        logger.info("Indexed article {}: {} distinct words", article_id, len(index))
        # Words dropped from the article may still be cached as its top count.
        touched = index.words + [w for w in previous if w not in index.positions]
        await self.invalidate(touched)

    async def invalidate(self, words: list[str]) -> None:
        """Drop most-common entries of the given words and all top-words entries."""
        results = await asyncio.gather(
            self._cache.delete_pattern(TOP_WORDS_PATTERN),
            *(self._cache.delete(most_common_key(w)) for w in words),
        )
        failed = results.count(False)
        if failed:
            logger.warning("Cache invalidation incomplete: {}/{} deletes failed", failed, len(results))
