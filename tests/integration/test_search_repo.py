"""Search and search-index repositories against Postgres (search_vector triggers applied)."""

import uuid

import pytest
from sqlalchemy import text

from pinkbeam.application.use_cases.search import SearchService
from pinkbeam.application.use_cases.search_indexing import SearchIndexer
from pinkbeam.domain.enums import SearchResultType
from pinkbeam.infrastructure.persistence.repositories import (
    SearchIndexRepository,
    SearchRepository,
)

pytestmark = pytest.mark.requires_db


@pytest.fixture
def token() -> str:
    """A word no other row contains."""
    return f"quasar{uuid.uuid4().hex[:10]}"


@pytest.fixture
async def seeded(session_factory, client_user, token):
    project_id = f"test-{uuid.uuid4().hex[:16]}"
    ticket_id = f"test-{uuid.uuid4().hex[:16]}"
    published_id = f"test-{uuid.uuid4().hex[:16]}"
    draft_id = f"test-{uuid.uuid4().hex[:16]}"
    async with session_factory() as session:
        await session.execute(
            text(
                "INSERT INTO projects (id, title, description, status, client_id) "
                "VALUES (:id, :title, :description, 'ACTIVE', :client_id)"
            ),
            {
                "id": project_id,
                "title": f"Storefront {token}",
                "description": "Custom checkout",
                "client_id": client_user["id"],
            },
        )
        await session.execute(
            text(
                "INSERT INTO support_tickets (id, title, description, client_id) "
                "VALUES (:id, :title, 'Blank page on mobile', :client_id)"
            ),
            {"id": ticket_id, "title": f"Homepage {token}", "client_id": client_user["id"]},
        )
        await session.execute(
            text(
                "INSERT INTO blog_posts (id, title, slug, excerpt, content, published) VALUES "
                "(:pid, :title, :pslug, 'Read this', 'body', true), "
                "(:did, :title, :dslug, 'Draft', 'body', false)"
            ),
            {
                "pid": published_id,
                "did": draft_id,
                "title": f"Launching {token}",
                "pslug": f"{published_id}-post",
                "dslug": f"{draft_id}-post",
            },
        )
        await session.execute(
            text("UPDATE users SET industry = :token WHERE id = :id"),
            {"token": token, "id": client_user["id"]},
        )
        await session.commit()
    yield {"project": project_id, "ticket": ticket_id, "blog": published_id, "draft": draft_id}
    async with session_factory() as session:
        await session.execute(
            text("DELETE FROM blog_posts WHERE id IN (:pid, :did)"),
            {"pid": published_id, "did": draft_id},
        )
        await session.execute(text("DELETE FROM support_tickets WHERE id = :id"), {"id": ticket_id})
        await session.execute(text("DELETE FROM projects WHERE id = :id"), {"id": project_id})
        await session.commit()


async def test_global_search_finds_every_entity_type(
    session_factory, seeded, client_user, token
) -> None:
    results = await SearchService(SearchRepository(session_factory)).global_search(token)

    (project,) = results.projects
    assert project.id == seeded["project"]
    assert project.url == f"/web/admin/projects/{seeded['project']}"
    assert project.meta == {"status": "ACTIVE", "client": "Jane Doe"}

    (client,) = results.clients
    assert client.id == client_user["id"]
    assert client.title == "Jane Doe"

    (ticket,) = results.tickets
    assert ticket.id == seeded["ticket"]
    assert ticket.snippet == "Blank page on mobile"

    assert [b.id for b in results.blog] == [seeded["blog"]]


async def test_search_without_match_is_empty(session_factory, seeded) -> None:
    repo = SearchRepository(session_factory)
    assert await repo.search(SearchResultType.PROJECT, f"nomatch{uuid.uuid4().hex}", 5) == []


async def test_indexer_vector_matches_stored_text(session_factory, seeded, token) -> None:
    await SearchIndexer(SearchIndexRepository(session_factory)).index_tickets()
    async with session_factory() as session:
        vector = (
            await session.execute(
                text("SELECT search_vector FROM support_tickets WHERE id = :id"),
                {"id": seeded["ticket"]},
            )
        ).scalar_one()
    assert vector == f"Homepage {token} Blank page on mobile"

    (ticket,) = await SearchRepository(session_factory).search(
        SearchResultType.TICKET, token, 5
    )
    assert ticket.id == seeded["ticket"]


@pytest.fixture
async def ranked_tickets(session_factory, client_user, token):
    """Four tickets mentioning the token one to four times; ids ordered by count."""
    ids = [f"test-{uuid.uuid4().hex[:16]}" for _ in range(4)]
    async with session_factory() as session:
        for count, ticket_id in enumerate(ids, start=1):
            await session.execute(
                text(
                    "INSERT INTO support_tickets (id, title, description, client_id) "
                    "VALUES (:id, :title, :description, :client_id)"
                ),
                {
                    "id": ticket_id,
                    "title": f"Ticket {count}",
                    "description": " ".join([token] * count) + " reported by client",
                    "client_id": client_user["id"],
                },
            )
        await session.commit()
    yield ids
    async with session_factory() as session:
        await session.execute(
            text("DELETE FROM support_tickets WHERE id = ANY(:ids)"), {"ids": ids}
        )
        await session.commit()


async def test_search_caps_at_limit_in_rank_order(
    session_factory, ranked_tickets, token
) -> None:
    hits = await SearchRepository(session_factory).search(
        SearchResultType.TICKET, token, 3
    )
    assert len(hits) == 3
    assert [h.id for h in hits] == ranked_tickets[::-1][:3]


async def test_project_found_by_client_new_name(
    session_factory, seeded, client_user
) -> None:
    new_name = f"Renamed{uuid.uuid4().hex[:8]}"
    async with session_factory() as session:
        await session.execute(
            text("UPDATE users SET name = :name WHERE id = :id"),
            {"name": new_name, "id": client_user["id"]},
        )
        await session.commit()

    repo = SearchRepository(session_factory)
    (project,) = await repo.search(SearchResultType.PROJECT, new_name, 5)
    assert project.id == seeded["project"]
    assert project.meta["client"] == new_name
    stale = await repo.search(SearchResultType.PROJECT, "Jane Doe", 100)
    assert seeded["project"] not in [p.id for p in stale]
