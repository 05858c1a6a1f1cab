"""Words API views - thin layer over services."""

from app.container import container
from settings import TOP_WORDS_LIMIT
from web.api.errors import validate_limit, validate_word, validate_words

from .schemas import (
    FindWordsResponse,
    MostCommonWordResponse,
    OccurrenceItem,
    TopWordItem,
    TopWordsResponse,
)


async def find_words(words: list[str]) -> FindWordsResponse:
    """Find every article and offset of the given words."""
    validate_words(words)
    data = await container.word_query.find_words(words)

    return FindWordsResponse(
        words={
            word: [OccurrenceItem(article_id=o.article_id, offsets=o.offsets) for o in occurrences]
            for word, occurrences in data.items()
        }
    )


async def get_most_common_word(word: str) -> MostCommonWordResponse | None:
    """Get the article where a word occurs most often."""
    validate_word(word)
    data = await container.word_query.get_most_common_word_article(word)
    if data is None:
        return None

    return MostCommonWordResponse(word=word.lower(), article_id=data.article_id, count=data.count)


async def get_top_words(limit: int = TOP_WORDS_LIMIT) -> TopWordsResponse:
    """Get the most frequent words across all articles."""
    validate_limit(limit)
    data = await container.word_query.get_top_words(limit)

    items = [TopWordItem(word=w.word, count=w.count) for w in data]

    return TopWordsResponse(limit=limit, items=items)
