"""Persistence repositories. Re-exports for dependency injection."""

from pinkbeam.infrastructure.persistence.repositories.notification_repo import (
    NotificationRepository,
)
from pinkbeam.infrastructure.persistence.repositories.search_index_repo import (
    SearchIndexRepository,
)
from pinkbeam.infrastructure.persistence.repositories.search_repo import (
    SearchRepository,
)

__all__ = [
    "NotificationRepository",
    "SearchIndexRepository",
    "SearchRepository",
]
