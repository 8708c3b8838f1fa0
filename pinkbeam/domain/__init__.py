"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from pinkbeam.domain.enums import (
    NotificationType,
    QuoteStatus,
    SearchResultType,
    TicketStatus,
    UserRole,
)
from pinkbeam.domain.exceptions import (
    EmailDeliveryException,
    PinkBeamException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    ValidationException,
)

__all__ = [
    # Enums
    "NotificationType",
    "QuoteStatus",
    "SearchResultType",
    "TicketStatus",
    "UserRole",
    # Exceptions
    "EmailDeliveryException",
    "PinkBeamException",
    "ResourceNotFoundException",
    "SqlNotConfiguredException",
    "ValidationException",
]
