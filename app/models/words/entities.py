"""Word domain entities - index rows and query results."""

from dataclasses import dataclass, field

from app.models.common import BaseEntity


@dataclass
class WordIndex(BaseEntity):
    """Offsets of one word inside one article."""

    article_id: str
    word: str
    positions: list[int] = field(default_factory=list)


@dataclass
class WordArticleCount(BaseEntity):
    """Occurrence count of one word inside one article."""

    article_id: str
    word: str
    count: int


@dataclass
class ArticleOccurrence(BaseEntity):
    """Where a queried word occurs in an article."""

    article_id: str
    offsets: list[int]


@dataclass
class MostCommonWord(BaseEntity):
    """Article with the highest count for a word."""

    article_id: str
    count: int


@dataclass
class TopWord(BaseEntity):
    """Word with its total count across all articles."""

    word: str
    count: int
