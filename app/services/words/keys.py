"""Cache key formats for word queries."""

FIND_WORDS_PREFIX = "find-words:"
MOST_COMMON_PREFIX = "most-common-word:"
TOP_WORDS_PREFIX = "top-words:"
TOP_WORDS_PATTERN = f"{TOP_WORDS_PREFIX}*"


def normalize_words(words: list[str]) -> list[str]:
    """Lowercase, deduplicate and sort query words."""
    return sorted({w.lower() for w in words})


def find_words_key(words: list[str]) -> str:
    """Key shared by every permutation of the same word set."""
    return FIND_WORDS_PREFIX + ",".join(normalize_words(words))


def most_common_key(word: str) -> str:
    return f"{MOST_COMMON_PREFIX}{word.lower()}"


def top_words_key(limit: int) -> str:
    return f"{TOP_WORDS_PREFIX}{limit}"
