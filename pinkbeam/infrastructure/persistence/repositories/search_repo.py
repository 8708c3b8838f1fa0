"""Full-text search repository. PostgreSQL ts_rank over each table's search_vector."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from pinkbeam.application.dtos.search import SearchResult
from pinkbeam.application.services.search_text import generate_snippet
from pinkbeam.domain.enums import SearchResultType

_RANK = (
    "ts_rank(to_tsvector('english', COALESCE({alias}.search_vector, '')), "
    "plainto_tsquery('english', :q))"
)
_MATCH = (
    "to_tsvector('english', COALESCE({alias}.search_vector, '')) "
    "@@ plainto_tsquery('english', :q)"
)


@dataclass(frozen=True)
class _EntityQuery:
    """SELECT list, FROM clause and row mapper for one searchable entity."""

    columns: str
    source: str
    alias: str
    to_result: Callable[[Mapping[str, Any], str], SearchResult]
    extra_filter: str | None = None

    def sql(self) -> str:
        where = [_MATCH.format(alias=self.alias)]
        if self.extra_filter:
            where.insert(0, self.extra_filter)
        return (
            f"SELECT {self.columns}, {_RANK.format(alias=self.alias)} AS rank "
            f"FROM {self.source} "
            f"WHERE {' AND '.join(where)} "
            "ORDER BY rank DESC "
            "LIMIT :limit"
        )


def _project(row: Mapping[str, Any], query: str) -> SearchResult:
    client_name = row["client_name"]
    return SearchResult(
        id=row["id"],
        type=SearchResultType.PROJECT,
        title=row["title"],
        snippet=generate_snippet(
            f"{row['description'] or ''} {client_name or ''}".strip(), query
        ),
        url=f"/web/admin/projects/{row['id']}",
        meta={"status": row["status"], "client": client_name},
    )


def _client(row: Mapping[str, Any], query: str) -> SearchResult:
    return SearchResult(
        id=row["id"],
        type=SearchResultType.CLIENT,
        title=row["name"] or row["email"],
        snippet=generate_snippet(
            f"{row['email']} {row['company'] or ''}".strip(), query
        ),
        url=f"/web/admin/clients/{row['id']}",
        meta={"email": row["email"], "company": row["company"]},
    )


def _ticket(row: Mapping[str, Any], query: str) -> SearchResult:
    return SearchResult(
        id=row["id"],
        type=SearchResultType.TICKET,
        title=row["title"],
        snippet=generate_snippet(row["description"] or "", query),
        url=f"/web/portal/support/{row['id']}",
        meta={
            "status": row["status"],
            "priority": row["priority"],
            "client": row["client_name"],
        },
    )


def _blog(row: Mapping[str, Any], query: str) -> SearchResult:
    return SearchResult(
        id=row["id"],
        type=SearchResultType.BLOG,
        title=row["title"],
        snippet=generate_snippet(row["excerpt"] or "", query),
        url=f"/blog/{row['slug']}",
        meta={"published": row["published"]},
    )


ENTITY_QUERIES: dict[SearchResultType, _EntityQuery] = {
    SearchResultType.PROJECT: _EntityQuery(
        columns="p.id, p.title, p.description, p.status, u.name AS client_name",
        source="projects p LEFT JOIN users u ON p.client_id = u.id",
        alias="p",
        to_result=_project,
    ),
    SearchResultType.CLIENT: _EntityQuery(
        columns="u.id, u.name, u.email, u.company",
        source="users u",
        alias="u",
        to_result=_client,
        extra_filter="u.role = 'CLIENT'",
    ),
    SearchResultType.TICKET: _EntityQuery(
        columns=(
            "t.id, t.title, t.description, t.status, t.priority, "
            "u.name AS client_name"
        ),
        source="support_tickets t LEFT JOIN users u ON t.client_id = u.id",
        alias="t",
        to_result=_ticket,
    ),
    SearchResultType.BLOG: _EntityQuery(
        columns="b.id, b.title, b.slug, b.excerpt, b.published",
        source="blog_posts b",
        alias="b",
        to_result=_blog,
        extra_filter="b.published = true",
    ),
}


class SearchRepository:
    """Ranked search across projects, clients, tickets and published blog posts.

    Each call opens its own session so the four lookups of a global search
    can run concurrently on separate pooled connections.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    async def search(
        self, entity_type: SearchResultType, query: str, limit: int
    ) -> list[SearchResult]:
        entity_query = ENTITY_QUERIES[entity_type]
        async with self.session_factory() as session:
            r = await session.execute(
                text(entity_query.sql()), {"q": query, "limit": limit}
            )
            rows = r.mappings().all()
        return [entity_query.to_result(row, query) for row in rows]
