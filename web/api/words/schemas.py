"""Words API response schemas."""

from pydantic import BaseModel


class OccurrenceItem(BaseModel):
    """Offsets of a word in one article."""

    article_id: str
    offsets: list[int]


class FindWordsResponse(BaseModel):
    """Occurrences per query word."""

    words: dict[str, list[OccurrenceItem]]


class MostCommonWordResponse(BaseModel):
    """Article with the most occurrences of a word."""

    word: str
    article_id: str
    count: int


class TopWordItem(BaseModel):
    """Word with its total count."""

    word: str
    count: int


class TopWordsResponse(BaseModel):
    """Most frequent words."""

    limit: int
    items: list[TopWordItem]
