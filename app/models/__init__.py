"""Models package - DDL and entities for all domains."""

from app.models.articles import ARTICLE_DDL, Article
from app.models.common import CACHE_DDL, BaseEntity
from app.models.words import (
    WORD_ARTICLE_COUNT_DDL,
    WORD_INDEX_DDL,
    WORD_INDEXES,
    ArticleOccurrence,
    MostCommonWord,
    TopWord,
    WordArticleCount,
    WordIndex,
)

ALL_DDL = [
    # Articles
    ARTICLE_DDL,
    # Words
    WORD_INDEX_DDL,
    WORD_ARTICLE_COUNT_DDL,
    *WORD_INDEXES,
    # Common
    CACHE_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    "CACHE_DDL",
    # Articles
    "ARTICLE_DDL",
    "Article",
    # Words
    "WORD_INDEX_DDL",
    "WORD_ARTICLE_COUNT_DDL",
    "WordIndex",
    "WordArticleCount",
    "ArticleOccurrence",
    "MostCommonWord",
    "TopWord",
    # All DDL
    "ALL_DDL",
]
