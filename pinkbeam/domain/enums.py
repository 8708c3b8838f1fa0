"""Domain enumerations for the Pink Beam service layer.

Enums represent fixed sets of domain values (notification kinds, searchable
entity kinds, quote and ticket lifecycle states).
"""

from enum import Enum


class NotificationType(str, Enum):
    """Kind of in-app notification shown to a user."""

    PROJECT_UPDATE = "PROJECT_UPDATE"
    QUOTE_STATUS = "QUOTE_STATUS"
    TICKET_REPLY = "TICKET_REPLY"
    INVOICE_CREATED = "INVOICE_CREATED"
    FILE_SHARED = "FILE_SHARED"
    SYSTEM = "SYSTEM"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid notification type values as strings."""
        return [t.value for t in cls]


class SearchResultType(str, Enum):
    """Entity kind tag carried by every search hit."""

    PROJECT = "project"
    CLIENT = "client"
    TICKET = "ticket"
    BLOG = "blog"


class UserRole(str, Enum):
    """Role of a user row. Only CLIENT users are searchable."""

    ADMIN = "ADMIN"
    TEAM = "TEAM"
    CLIENT = "CLIENT"


class QuoteStatus(str, Enum):
    """Quote request lifecycle."""

    NEW = "NEW"
    CONTACTED = "CONTACTED"
    QUALIFIED = "QUALIFIED"
    PROPOSAL = "PROPOSAL"
    ACCEPTED = "ACCEPTED"
    DECLINED = "DECLINED"


class TicketStatus(str, Enum):
    """Support ticket lifecycle."""

    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    WAITING_CLIENT = "WAITING_CLIENT"
    RESOLVED = "RESOLVED"
    CLOSED = "CLOSED"
