"""Rebuild search_vector for projects, clients, support tickets and blog posts.

Usage:
    uv run python -m scripts.index_search
Stops at the first error and exits 1; rows written before the error stay indexed.
Safe to re-run.
"""

import asyncio
import sys

from pinkbeam.application.use_cases.search_indexing import SearchIndexer
from pinkbeam.infrastructure.persistence.database import (
    dispose_engine,
    get_session_factory,
)
from pinkbeam.infrastructure.persistence.repositories import SearchIndexRepository
from pinkbeam.shared.telemetry.logging import get_logger, setup_logging

logger = get_logger("scripts.index_search")


async def run() -> dict[str, int]:
    """Index every entity type; always releases the connection pool."""
    try:
        indexer = SearchIndexer(SearchIndexRepository(get_session_factory()))
        return await indexer.index_all()
    finally:
        await dispose_engine()


def main() -> int:
    setup_logging()
    try:
        counts = asyncio.run(run())
    except Exception:
        logger.exception("Search indexing failed")
        return 1
    for entity, count in counts.items():
        logger.info("%s: %d indexed", entity, count)
    logger.info("Search indexing complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
