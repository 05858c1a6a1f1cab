"""Words API."""

from web.api.words.views import find_words, get_most_common_word, get_top_words

__all__ = [
    "find_words",
    "get_most_common_word",
    "get_top_words",
]
