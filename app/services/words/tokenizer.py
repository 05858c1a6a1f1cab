"""Tokenizer and occurrence aggregation for article text."""

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import NamedTuple

# Word characters are Unicode letters, digits and underscore.
_TOKEN_RE = re.compile(r"(\w+)|\W+")


class Token(NamedTuple):
    """A run of text starting at a character offset."""

    text: str
    offset: int
    is_word: bool


def tokenize(text: str) -> Iterator[Token]:
    """Split text into alternating word and separator runs.

    Word tokens are lowercased. Offsets count characters of the original
    text from 0. Empty text yields nothing.
    """
    for match in _TOKEN_RE.finditer(text):
        if match.group(1) is not None:
            yield Token(match.group(1).lower(), match.start(), True)
        else:
            yield Token(match.group(0), match.start(), False)


def iter_words(text: str) -> Iterator[Token]:
    """Word tokens only."""
    return (t for t in tokenize(text) if t.is_word)


@dataclass
class ArticleWordIndex:
    """Positional index of one article.

    `counts` is derived from `positions` so the two can never disagree.
    """

    positions: dict[str, list[int]] = field(default_factory=dict)

    @property
    def counts(self) -> dict[str, int]:
        return {word: len(offsets) for word, offsets in self.positions.items()}

    @property
    def words(self) -> list[str]:
        return list(self.positions)

    def __len__(self) -> int:
        return len(self.positions)


def aggregate(tokens: Iterable[Token]) -> ArticleWordIndex:
    """Collect word offsets in order of appearance, one pass."""
    index = ArticleWordIndex()
    for token in tokens:
        if token.is_word:
            index.positions.setdefault(token.text, []).append(token.offset)
    return index


def index_text(text: str) -> ArticleWordIndex:
    """Tokenize and aggregate article text."""
    return aggregate(tokenize(text))
