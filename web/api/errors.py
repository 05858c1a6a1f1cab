"""API errors and validation helpers."""

import re

from settings import MAX_TOP_WORDS_LIMIT

_WORD_RE = re.compile(r"\w+")


class NotFoundError(Exception):
    """Resource not found."""

    def __init__(self, message: str = "Resource not found"):
        self.message = message
        super().__init__(self.message)


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


def validate_word(word: str) -> None:
    """Validate a single query word.

    Only runs of word characters are ever indexed, and the find-words cache
    key joins words with commas, so anything else is rejected.
    """
    if not isinstance(word, str) or not word.strip():
        raise ValidationError("word must be a non-empty string")
    if not _WORD_RE.fullmatch(word):
        raise ValidationError(f"Invalid word: {word!r}. Only letters, digits and underscore are allowed")


def validate_words(words: list[str]) -> None:
    """Validate a list of query words."""
    if not isinstance(words, list) or not words:
        raise ValidationError("words must be a non-empty list")
    for word in words:
        validate_word(word)


def validate_limit(limit: int) -> None:
    """Validate top-words limit."""
    if isinstance(limit, bool) or not isinstance(limit, int) or not 1 <= limit <= MAX_TOP_WORDS_LIMIT:
        raise ValidationError(f"Invalid limit: {limit}. Must be between 1 and {MAX_TOP_WORDS_LIMIT}")


def validate_article(author: str, content: str) -> None:
    """Validate article fields."""
    if not isinstance(author, str) or not author.strip():
        raise ValidationError("author must be a non-empty string")
    if not isinstance(content, str):
        raise ValidationError("content must be a string")
