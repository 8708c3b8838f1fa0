"""Batch search indexing: rebuild search_vector for every searchable row."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pinkbeam.application.services.search_text import build_search_vector
from pinkbeam.domain.enums import SearchResultType
from pinkbeam.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    from pinkbeam.application.interfaces.repositories import ISearchIndexRepository

logger = get_logger(__name__)


class SearchIndexer:
    """Writes each row's joined display text to its search_vector column.

    Rows are committed one at a time; a failure stops the run and leaves
    earlier rows indexed. Re-running is safe.
    """

    def __init__(self, index_repo: "ISearchIndexRepository") -> None:
        self.index_repo = index_repo

    async def _index(self, entity_type: SearchResultType) -> int:
        rows = await self.index_repo.fetch_rows(entity_type)
        for row in rows:
            vector = build_search_vector(*row.texts)
            await self.index_repo.write_vector(entity_type, row.id, vector)
        return len(rows)

    async def index_projects(self) -> int:
        count = await self._index(SearchResultType.PROJECT)
        logger.info("Indexed %d projects", count)
        return count

    async def index_clients(self) -> int:
        count = await self._index(SearchResultType.CLIENT)
        logger.info("Indexed %d clients", count)
        return count

    async def index_tickets(self) -> int:
        count = await self._index(SearchResultType.TICKET)
        logger.info("Indexed %d support tickets", count)
        return count

    async def index_blog_posts(self) -> int:
        count = await self._index(SearchResultType.BLOG)
        logger.info("Indexed %d blog posts", count)
        return count

    async def index_all(self) -> dict[str, int]:
        """Index every entity type in order; returns row counts per type."""
        logger.info("Starting search index rebuild")
        counts = {
            "projects": await self.index_projects(),
            "clients": await self.index_clients(),
            "tickets": await self.index_tickets(),
            "blog_posts": await self.index_blog_posts(),
        }
        logger.info("Search index rebuild complete: %s", counts)
        return counts
