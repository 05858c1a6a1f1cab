#!/usr/bin/env python3
"""
Rebuild the word index of stored articles.

Usage:
    python reindex.py                # Reindex every article
    python reindex.py ID [ID ...]    # Reindex specific articles
    python reindex.py --purge        # Only drop expired cache entries
"""

import asyncio
import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.container import container  # noqa: E402
from settings.logging import setup_logging  # noqa: E402

logger = setup_logging(to_file=True)


async def reindex(article_ids: list[str]) -> int:
    """Reindex the given articles, return how many failed."""
    failed = 0
    for article_id in article_ids:
        article = await container.articles.get(article_id)
        if article is None:
            logger.warning("Article {} not found, skipping", article_id)
            failed += 1
            continue
        try:
            await container.word_indexer.process_article(article.id, article.content)
        except Exception as e:
            logger.error("Failed to reindex article {}: {}", article_id, e)
            failed += 1
    return failed


async def _main(args: list[str]) -> int:
    container.init()

    if "--purge" in args:
        await container.cache_repo.purge_expired()
        return 0

    if args:
        return await reindex(args)

    result = await container.articles.reindex_all()
    return result["failed"]


def main():
    failed = asyncio.run(_main(sys.argv[1:]))
    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
