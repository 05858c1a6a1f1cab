"""Article service - storing articles and keeping them indexed."""

from loguru import logger

from app.models.articles import Article
from app.repositories.articles import ArticleRepository
from app.services.words import WordIndexer


class ArticleService:
    """Article writes followed by synchronous reindexing."""

    def __init__(self, article_repo: ArticleRepository, indexer: WordIndexer):
        self._articles = article_repo
        self._indexer = indexer

    async def create(self, author: str, content: str) -> Article:
        """Store a new article and index it before returning."""
        article = await self._articles.create(author, content)
        await self._indexer.process_article(article.id, article.content)
        return article

    async def update(self, article_id: str, content: str) -> Article | None:
        """Replace article content and reindex it, None if unknown."""
        article = await self._articles.update_content(article_id, content)
        if article is None:
            return None
        await self._indexer.process_article(article.id, article.content)
        return article

    async def get(self, article_id: str) -> Article | None:
        return await self._articles.get(article_id)

    async def reindex_all(self) -> dict[str, int]:
        """Rebuild the index of every stored article, one at a time."""
        ids = await self._articles.list_ids()
        logger.info("Reindexing {} articles...", len(ids))

        failed = 0
        for article_id in ids:
            article = await self._articles.get(article_id)
            if article is None:
                continue
            try:
                await self._indexer.process_article(article.id, article.content)
            except Exception as e:
                logger.error("Failed to reindex article {}: {}", article_id, e)
                failed += 1
                continue

        logger.info("Reindex complete: {} ok, {} failed", len(ids) - failed, failed)
        return {"total": len(ids), "failed": failed}
