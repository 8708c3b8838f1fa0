"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol

from pinkbeam.domain.enums import NotificationType, SearchResultType

if TYPE_CHECKING:
    from pinkbeam.application.dtos.notification import (
        NotificationFilter,
        NotificationResult,
    )
    from pinkbeam.application.dtos.search import IndexableRow, SearchResult


class ISearchRepository(Protocol):
    """Ranked full-text lookups, one entity type per call."""

    async def search(
        self, entity_type: SearchResultType, query: str, limit: int
    ) -> list[SearchResult]:
        """Return up to limit hits of entity_type ordered by rank descending."""


class ISearchIndexRepository(Protocol):
    """Reads indexable rows and writes their search_vector column."""

    async def fetch_rows(self, entity_type: SearchResultType) -> list[IndexableRow]:
        """Return every row of entity_type with its text fields in index order."""

    async def write_vector(
        self, entity_type: SearchResultType, row_id: str, vector: str
    ) -> None:
        """Persist the vector for one row (committed on its own)."""


class INotificationRepository(Protocol):
    """Notification persistence. Every mutation is scoped by owner."""

    async def create(
        self,
        user_id: str,
        type: NotificationType,
        title: str,
        message: str,
        data: dict[str, Any],
    ) -> NotificationResult:
        """Insert an unread notification."""

    async def list_page(
        self, filters: NotificationFilter, limit: int, offset: int
    ) -> list[NotificationResult]:
        """Return a page ordered by created_at descending."""

    async def count_for_user(self, user_id: str) -> int:
        """Count all notifications owned by user."""

    async def count_unread(self, user_id: str) -> int:
        """Count unread notifications owned by user."""

    async def set_read_state(
        self,
        notification_id: str,
        user_id: str,
        is_read: bool,
        read_at: datetime | None,
    ) -> int:
        """Update one notification matching id and owner; return rows affected."""

    async def mark_all_read(self, user_id: str, read_at: datetime) -> int:
        """Mark every unread notification of user as read; return rows affected."""

    async def delete(self, notification_id: str, user_id: str) -> int:
        """Delete one notification matching id and owner; return rows affected."""
