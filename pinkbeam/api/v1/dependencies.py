"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for repositories and application use cases. Routes
depend only on these; tests replace them through app.dependency_overrides.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from pinkbeam.application.use_cases.notifications import NotificationService
from pinkbeam.application.use_cases.search import SearchService
from pinkbeam.core.config import get_settings
from pinkbeam.infrastructure.external.email import ResendEmailClient
from pinkbeam.infrastructure.persistence.database import get_session_factory
from pinkbeam.infrastructure.persistence.repositories import (
    NotificationRepository,
    SearchRepository,
)


def get_current_user_id(request: Request) -> str:
    """Acting user id from the upstream-set user header; 401 when absent."""
    user_id = request.headers.get(get_settings().user_id_header)
    if not user_id or not user_id.strip():
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user_id.strip()


def get_sessions() -> async_sessionmaker[AsyncSession]:
    """Process-wide session factory (raises SqlNotConfiguredException without DATABASE_URL)."""
    return get_session_factory()


def get_search_repo(
    sessions: Annotated[async_sessionmaker[AsyncSession], Depends(get_sessions)],
) -> SearchRepository:
    return SearchRepository(sessions)


def get_search_service(
    search_repo: Annotated[SearchRepository, Depends(get_search_repo)],
) -> SearchService:
    """Search use case (projects, clients, tickets, published blog posts)."""
    return SearchService(search_repo)


def get_notification_repo(
    sessions: Annotated[async_sessionmaker[AsyncSession], Depends(get_sessions)],
) -> NotificationRepository:
    return NotificationRepository(sessions)


def get_notification_service(
    notification_repo: Annotated[NotificationRepository, Depends(get_notification_repo)],
) -> NotificationService:
    return NotificationService(notification_repo)


def get_email_sender(request: Request) -> ResendEmailClient:
    """Resend client on the lifespan's shared HTTP client (short-lived client if absent)."""
    settings = get_settings()
    api_key = (
        settings.resend_api_key.get_secret_value() if settings.resend_api_key else None
    )
    return ResendEmailClient(
        api_key=api_key,
        from_address=settings.email_from,
        api_url=settings.resend_api_url,
        http_client=getattr(request.app.state, "email_http_client", None),
        timeout=settings.resend_timeout_seconds,
    )

