"""Article repositories."""

from app.repositories.articles.article import ArticleRepository

__all__ = ["ArticleRepository"]
