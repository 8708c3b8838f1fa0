"""Pytest configuration and fixtures for pinkbeam.

HTTP tests run against a fresh create_app() through httpx.ASGITransport with
use cases swapped via app.dependency_overrides. Repository tests need Postgres
(DATABASE_URL, schema from `alembic upgrade head`) and skip otherwise.
"""

import uuid
from collections.abc import AsyncIterator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from pinkbeam.application.dtos.email import QuoteData, TicketData
from pinkbeam.core.config import get_settings
from pinkbeam.core.limiter import limiter
from pinkbeam.domain.exceptions import SqlNotConfiguredException
from pinkbeam.infrastructure.persistence.database import (
    dispose_engine,
    get_session_factory,
)
from pinkbeam.main import create_app


@pytest.fixture(autouse=True)
def _fresh_settings() -> None:
    """Settings are re-read per test so monkeypatched env vars apply."""
    get_settings.cache_clear()
    limiter.reset()
    yield
    get_settings.cache_clear()


@pytest.fixture
def app() -> FastAPI:
    application = create_app()
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app: FastAPI) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def quote() -> QuoteData:
    return QuoteData(
        id="quote-123",
        full_name="Jane Doe",
        email="jane@example.com",
        company="Acme Inc",
        project_type="ecommerce",
        services=["design", "development", "seo"],
        budget_range="10k-25k",
        timeline="1-3months",
        description="We need a full ecommerce storefront with custom checkout.",
        lead_score=82,
        lead_quality="hot",
    )


@pytest.fixture
def ticket() -> TicketData:
    return TicketData(
        id="test-ticket-123",
        title="Homepage not loading",
        client_name="Jane Smith",
        client_email="jane@example.com",
        status="OPEN",
        priority="HIGH",
        category="BUG",
    )


@pytest.fixture
async def session_factory() -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    """Session factory for repository integration tests.

    Skips when DATABASE_URL is not set. Run without DB via: pytest -m 'not requires_db'.
    """
    try:
        factory = get_session_factory()
    except SqlNotConfiguredException:
        pytest.skip(
            "Postgres not configured: set DATABASE_URL, then run: alembic upgrade head"
        )
    yield factory
    await dispose_engine()


@pytest.fixture
async def client_user(session_factory: async_sessionmaker[AsyncSession]) -> AsyncIterator[dict]:
    """A CLIENT user row; deleted (with its notifications) after the test."""
    user = {
        "id": f"test-{uuid.uuid4().hex[:16]}",
        "email": f"{uuid.uuid4().hex[:10]}@example.com",
        "name": "Jane Doe",
        "company": "Acme Inc",
    }
    async with session_factory() as session:
        await session.execute(
            text(
                "INSERT INTO users (id, email, name, company, role) "
                "VALUES (:id, :email, :name, :company, 'CLIENT')"
            ),
            user,
        )
        await session.commit()
    yield user
    async with session_factory() as session:
        await session.execute(text("DELETE FROM users WHERE id = :id"), {"id": user["id"]})
        await session.commit()
