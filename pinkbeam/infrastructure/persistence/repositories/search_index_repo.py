"""Search index repository: reads display fields and writes search_vector per row."""

from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from pinkbeam.application.dtos.search import IndexableRow
from pinkbeam.domain.enums import SearchResultType

# Text fields in index order; projects include the linked client's name.
_FETCH_SQL: dict[SearchResultType, str] = {
    SearchResultType.PROJECT: (
        "SELECT p.id, p.title, p.description, u.name AS client_name "
        "FROM projects p LEFT JOIN users u ON p.client_id = u.id"
    ),
    SearchResultType.CLIENT: (
        "SELECT id, name, email, company, phone, industry "
        "FROM users WHERE role = 'CLIENT'"
    ),
    SearchResultType.TICKET: "SELECT id, title, description FROM support_tickets",
    SearchResultType.BLOG: (
        "SELECT id, title, excerpt, content, meta_title, meta_desc FROM blog_posts"
    ),
}

_TABLES: dict[SearchResultType, str] = {
    SearchResultType.PROJECT: "projects",
    SearchResultType.CLIENT: "users",
    SearchResultType.TICKET: "support_tickets",
    SearchResultType.BLOG: "blog_posts",
}


class SearchIndexRepository:
    """Full-table reads and single-row vector writes (each write is its own commit)."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    async def fetch_rows(self, entity_type: SearchResultType) -> list[IndexableRow]:
        async with self.session_factory() as session:
            r = await session.execute(text(_FETCH_SQL[entity_type]))
            rows = r.all()
        return [IndexableRow(id=row[0], texts=tuple(row[1:])) for row in rows]

    async def write_vector(
        self, entity_type: SearchResultType, row_id: str, vector: str
    ) -> None:
        stmt = text(
            f"UPDATE {_TABLES[entity_type]} SET search_vector = :v WHERE id = :id"
        )
        async with self.session_factory() as session:
            await session.execute(stmt, {"v": vector, "id": row_id})
            await session.commit()
