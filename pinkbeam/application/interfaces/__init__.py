"""Application interfaces (Protocols)."""

from pinkbeam.application.interfaces.repositories import (
    INotificationRepository,
    ISearchIndexRepository,
    ISearchRepository,
)
from pinkbeam.application.interfaces.services import IEmailSender

__all__ = [
    "IEmailSender",
    "INotificationRepository",
    "ISearchIndexRepository",
    "ISearchRepository",
]
