"""Word repositories."""

from app.repositories.words.index import WordIndexRepository

__all__ = ["WordIndexRepository"]
