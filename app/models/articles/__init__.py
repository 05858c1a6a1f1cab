"""Article domain models."""

from app.models.articles.article import ARTICLE_DDL, Article

__all__ = [
    "ARTICLE_DDL",
    "Article",
]
