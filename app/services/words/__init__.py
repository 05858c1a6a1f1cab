"""Word services - tokenizing, indexing and querying."""

from app.services.words.indexing import WordIndexer
from app.services.words.query import WordQueryService
from app.services.words.tokenizer import (
    ArticleWordIndex,
    Token,
    aggregate,
    index_text,
    iter_words,
    tokenize,
)

__all__ = [
    "WordIndexer",
    "WordQueryService",
    "ArticleWordIndex",
    "Token",
    "tokenize",
    "iter_words",
    "aggregate",
    "index_text",
]
