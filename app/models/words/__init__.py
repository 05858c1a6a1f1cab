"""Word domain models."""

from app.models.words.entities import (
    ArticleOccurrence,
    MostCommonWord,
    TopWord,
    WordArticleCount,
    WordIndex,
)
from app.models.words.index import (
    WORD_ARTICLE_COUNT_DDL,
    WORD_INDEX_DDL,
    WORD_INDEXES,
)

__all__ = [
    "WORD_INDEX_DDL",
    "WORD_ARTICLE_COUNT_DDL",
    "WORD_INDEXES",
    "WordIndex",
    "WordArticleCount",
    "ArticleOccurrence",
    "MostCommonWord",
    "TopWord",
]
