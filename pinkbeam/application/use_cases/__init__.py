"""Application use cases."""

from pinkbeam.application.use_cases.email_dispatch import EmailDispatchService
from pinkbeam.application.use_cases.notifications import NotificationService
from pinkbeam.application.use_cases.search import SearchService, get_total_results
from pinkbeam.application.use_cases.search_indexing import SearchIndexer

__all__ = [
    "EmailDispatchService",
    "NotificationService",
    "SearchIndexer",
    "SearchService",
    "get_total_results",
]
