"""Article services."""

from app.services.articles.service import ArticleService

__all__ = ["ArticleService"]
