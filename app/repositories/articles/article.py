"""Article repository - article storage."""

import uuid
from datetime import datetime, timezone

from loguru import logger

from app.models.articles import Article
from app.repositories.base import BaseRepository


class ArticleRepository(BaseRepository):
    """Repository for article rows."""

    async def create(self, author: str, content: str) -> Article:
        """Insert a new article with a generated id."""
        self._check_writable("create article")

        now = datetime.now(timezone.utc).replace(tzinfo=None)
        article = Article(
            id=str(uuid.uuid4()),
            author=author,
            content=content,
            created_at=now,
            updated_at=now,
        )
        await self.aexecute(
            "INSERT INTO article (id, author, content, created_at, updated_at) VALUES (?, ?, ?, ?, ?)",
            [article.id, article.author, article.content, article.created_at, article.updated_at],
        )
        logger.debug("Article created: {}", article.id)
        return article

    async def get(self, article_id: str) -> Article | None:
        """Load an article by id."""
        row = await self.afetchone(
            "SELECT id, author, content, created_at, updated_at FROM article WHERE id = ?",
            [article_id],
        )
        if row is None:
            return None
        return Article(*row)

    async def update_content(self, article_id: str, content: str) -> Article | None:
        """Replace article content, None if the article does not exist."""
        self._check_writable("update article")

        article = await self.get(article_id)
        if article is None:
            return None

        article.content = content
        article.updated_at = datetime.now(timezone.utc).replace(tzinfo=None)
        await self.aexecute(
            "UPDATE article SET content = ?, updated_at = ? WHERE id = ?",
            [article.content, article.updated_at, article_id],
        )
        logger.debug("Article updated: {}", article_id)
        return article

    async def list_ids(self) -> list[str]:
        """Ids of all stored articles."""
        rows = await self.afetchall("SELECT id FROM article ORDER BY created_at, id")
        return [r[0] for r in rows]
