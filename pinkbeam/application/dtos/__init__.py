"""Application DTOs (no ORM dependency)."""

from pinkbeam.application.dtos.email import (
    EMPTY_EMAIL,
    EmailMessage,
    QuoteData,
    RenderedEmail,
    TicketData,
)
from pinkbeam.application.dtos.notification import (
    NotificationFilter,
    NotificationResult,
    OperationResult,
)
from pinkbeam.application.dtos.search import (
    GlobalSearchResults,
    IndexableRow,
    SearchResult,
)

__all__ = [
    "EMPTY_EMAIL",
    "EmailMessage",
    "GlobalSearchResults",
    "IndexableRow",
    "NotificationFilter",
    "NotificationResult",
    "OperationResult",
    "QuoteData",
    "RenderedEmail",
    "SearchResult",
    "TicketData",
]
