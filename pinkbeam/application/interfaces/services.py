"""Service interfaces (ports) for external collaborators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pinkbeam.application.dtos.email import EmailMessage


class IEmailSender(Protocol):
    """Transactional email provider."""

    async def send_email(self, message: EmailMessage) -> bool:
        """Send message. False when sending is disabled; raises on provider errors."""
