"""Full-text search use case. Delegates ranked lookups to ISearchRepository."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from pinkbeam.application.dtos.search import GlobalSearchResults, SearchResult
from pinkbeam.domain.enums import SearchResultType
from pinkbeam.shared.telemetry.tracing import add_span_attributes, traced

if TYPE_CHECKING:
    from pinkbeam.application.interfaces.repositories import ISearchRepository

DEFAULT_LIMIT = 5


class SearchService:
    """Ranked search over projects, clients, support tickets and published posts.

    Blank queries short-circuit to empty results without touching the
    repository. Repository errors propagate to the caller.
    """

    def __init__(self, search_repo: "ISearchRepository") -> None:
        self.search_repo = search_repo

    async def _search(
        self, entity_type: SearchResultType, query: str, limit: int
    ) -> list[SearchResult]:
        if not query or not query.strip():
            return []
        return await self.search_repo.search(entity_type, query, limit)

    async def search_projects(
        self, query: str, limit: int = DEFAULT_LIMIT
    ) -> list[SearchResult]:
        return await self._search(SearchResultType.PROJECT, query, limit)

    async def search_clients(
        self, query: str, limit: int = DEFAULT_LIMIT
    ) -> list[SearchResult]:
        return await self._search(SearchResultType.CLIENT, query, limit)

    async def search_tickets(
        self, query: str, limit: int = DEFAULT_LIMIT
    ) -> list[SearchResult]:
        return await self._search(SearchResultType.TICKET, query, limit)

    async def search_blog(
        self, query: str, limit: int = DEFAULT_LIMIT
    ) -> list[SearchResult]:
        return await self._search(SearchResultType.BLOG, query, limit)

    @traced("search.global_search")
    async def global_search(
        self, query: str, limit_per_type: int = DEFAULT_LIMIT
    ) -> GlobalSearchResults:
        """Run the four entity searches concurrently and group the hits."""
        if not query or not query.strip():
            return GlobalSearchResults()
        projects, clients, tickets, blog = await asyncio.gather(
            self.search_projects(query, limit_per_type),
            self.search_clients(query, limit_per_type),
            self.search_tickets(query, limit_per_type),
            self.search_blog(query, limit_per_type),
        )
        results = GlobalSearchResults(
            projects=projects, clients=clients, tickets=tickets, blog=blog
        )
        add_span_attributes(**{"search.total": get_total_results(results)})
        return results


def get_total_results(results: GlobalSearchResults) -> int:
    """Sum of hits across all groups."""
    return (
        len(results.projects)
        + len(results.clients)
        + len(results.tickets)
        + len(results.blog)
    )
