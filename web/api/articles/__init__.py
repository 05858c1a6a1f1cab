"""Articles API."""

from web.api.articles.views import create_article, get_article, update_article

__all__ = [
    "create_article",
    "update_article",
    "get_article",
]
