"""Word index repository - positional index and occurrence counts."""

import asyncio
from collections.abc import Iterable

from loguru import logger

from app.models.words import TopWord, WordArticleCount, WordIndex
from app.repositories.base import BaseRepository


class WordIndexRepository(BaseRepository):
    """Repository for the word_index and word_article_count tables."""

    async def replace_article_index(
        self,
        article_id: str,
        positions: dict[str, list[int]],
        counts: dict[str, int],
    ) -> None:
        """Swap all index rows of an article for a new set in one transaction.

        Readers see either the previous rows or the new ones. On failure the
        transaction is rolled back and the error is raised.
        """
        self._check_writable("replace word index")

        index_rows = [[article_id, word, offsets] for word, offsets in positions.items()]
        count_rows = [[article_id, word, count] for word, count in counts.items()]

        def replace() -> None:
            with self.transaction() as cur:
                cur.execute("DELETE FROM word_index WHERE article_id = ?", [article_id])
                cur.execute("DELETE FROM word_article_count WHERE article_id = ?", [article_id])
                if index_rows:
                    cur.executemany("INSERT INTO word_index VALUES (?, ?, ?)", index_rows)
                    cur.executemany("INSERT INTO word_article_count VALUES (?, ?, ?)", count_rows)

        await asyncio.to_thread(replace)
        logger.debug("Replaced index for article {}: {} words", article_id, len(index_rows))

    async def find_word_indexes(self, words: Iterable[str]) -> list[WordIndex]:
        """All index rows for the given words, across articles."""
        words = sorted(set(words))
        if not words:
            return []

        placeholders = ", ".join("?" for _ in words)
        rows = await self.afetchall(
            f"""
            SELECT article_id, word, positions FROM word_index
            WHERE word IN ({placeholders})
            ORDER BY word, article_id
            """,
            words,
        )
        logger.debug("find_word_indexes({}): {} rows", len(words), len(rows))
        return [WordIndex(article_id=r[0], word=r[1], positions=list(r[2])) for r in rows]

    async def find_top_count_for_word(self, word: str) -> WordArticleCount | None:
        """Row with the highest count for a word, lowest article id on ties."""
        row = await self.afetchone(
            """
            SELECT article_id, word, count FROM word_article_count
            WHERE word = ?
            ORDER BY count DESC, article_id
            LIMIT 1
            """,
            [word],
        )
        if row is None:
            return None
        return WordArticleCount(article_id=row[0], word=row[1], count=int(row[2]))

    async def top_words(self, limit: int) -> list[TopWord]:
        """Words with the highest total count across all articles."""
        rows = await self.afetchall(
            f"""
            SELECT word, SUM(count) AS total FROM word_article_count
            GROUP BY word
            ORDER BY total DESC, word
            LIMIT {int(limit)}
            """
        )
        return [TopWord(word=r[0], count=int(r[1])) for r in rows]

    async def get_article_index(self, article_id: str) -> list[WordIndex]:
        """All index rows of one article."""
        rows = await self.afetchall(
            "SELECT article_id, word, positions FROM word_index WHERE article_id = ? ORDER BY word",
            [article_id],
        )
        return [WordIndex(article_id=r[0], word=r[1], positions=list(r[2])) for r in rows]

    async def get_article_counts(self, article_id: str) -> dict[str, int]:
        """Word counts of one article."""
        rows = await self.afetchall(
            "SELECT word, count FROM word_article_count WHERE article_id = ?",
            [article_id],
        )
        return {r[0]: int(r[1]) for r in rows}
