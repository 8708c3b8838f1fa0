"""Email dispatch use case: render a template and hand it to the email sender.

Wrappers return the sender's result; False when nothing was sent (status
changes that carry no client message, or email disabled). Provider errors
propagate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pinkbeam.application.dtos.email import (
    EmailMessage,
    QuoteData,
    RenderedEmail,
    TicketData,
)
from pinkbeam.application.services import email_templates as templates
from pinkbeam.shared.telemetry.logging import get_logger
from pinkbeam.shared.telemetry.tracing import traced

if TYPE_CHECKING:
    from pinkbeam.application.interfaces.services import IEmailSender

logger = get_logger(__name__)


def _tag(name: str, value: str) -> dict[str, str]:
    return {"name": name, "value": value}


class EmailDispatchService:
    """Quote and support-ticket emails for clients and the Pink Beam team."""

    def __init__(
        self,
        sender: "IEmailSender",
        quote_notify_email: str,
        support_notify_email: str | None = None,
    ) -> None:
        self.sender = sender
        self.quote_notify_email = quote_notify_email
        self.support_notify_email = support_notify_email or quote_notify_email

    @traced("email.dispatch")
    async def _dispatch(
        self,
        rendered: RenderedEmail,
        to: str,
        tags: list[dict[str, str]],
        reply_to: str | None = None,
    ) -> bool:
        if not rendered:
            logger.debug("Template rendered no email; skipping (%s)", tags[0]["value"])
            return False
        return await self.sender.send_email(
            EmailMessage(
                to=to,
                subject=rendered.subject,
                html=rendered.html,
                tags=tags,
                reply_to=reply_to,
            )
        )

    # --- Quotes ---

    async def send_quote_notification(self, quote: QuoteData) -> bool:
        """New quote alert to the team inbox."""
        return await self._dispatch(
            templates.admin_notification_template(quote),
            to=self.quote_notify_email,
            tags=[_tag("type", "admin-notification"), _tag("quote_id", quote.id)],
        )

    async def send_client_auto_response(self, quote: QuoteData) -> bool:
        return await self._dispatch(
            templates.client_auto_response_template(quote),
            to=quote.email,
            reply_to=self.quote_notify_email,
            tags=[_tag("type", "auto-response"), _tag("quote_id", quote.id)],
        )

    async def send_follow_up_email(self, quote: QuoteData, stage: int) -> bool:
        """Stage 1 is the day-1 follow-up, 2 the day-3 one, anything else day 7."""
        if stage == 1:
            rendered = templates.follow_up_day1_template(quote)
        elif stage == 2:
            rendered = templates.follow_up_day3_template(quote)
        else:
            rendered = templates.follow_up_day7_template(quote)
        return await self._dispatch(
            rendered,
            to=quote.email,
            reply_to=self.quote_notify_email,
            tags=[_tag("type", f"follow-up-{stage}"), _tag("quote_id", quote.id)],
        )

    async def send_status_update_email(self, quote: QuoteData, new_status: str) -> bool:
        return await self._dispatch(
            templates.status_update_template(quote, new_status),
            to=quote.email,
            reply_to=self.quote_notify_email,
            tags=[
                _tag("type", "status-update"),
                _tag("quote_id", quote.id),
                _tag("status", new_status),
            ],
        )

    # --- Support tickets ---

    async def send_ticket_created_email(self, ticket: TicketData) -> bool:
        return await self._dispatch(
            templates.ticket_created_template(ticket),
            to=ticket.client_email,
            tags=[_tag("type", "ticket-created"), _tag("ticket_id", ticket.id)],
        )

    async def send_ticket_admin_notification(self, ticket: TicketData) -> bool:
        """New ticket alert to the support inbox."""
        return await self._dispatch(
            templates.ticket_admin_notification_template(ticket),
            to=self.support_notify_email,
            tags=[
                _tag("type", "ticket-admin-notification"),
                _tag("ticket_id", ticket.id),
            ],
        )

    async def send_ticket_status_update_email(
        self, ticket: TicketData, new_status: str
    ) -> bool:
        return await self._dispatch(
            templates.ticket_status_update_template(ticket, new_status),
            to=ticket.client_email,
            tags=[
                _tag("type", "ticket-status-update"),
                _tag("ticket_id", ticket.id),
                _tag("status", new_status),
            ],
        )

    async def send_ticket_comment_email(
        self, ticket: TicketData, comment_body: str, author_name: str
    ) -> bool:
        return await self._dispatch(
            templates.ticket_comment_notification_template(
                ticket, comment_body, author_name
            ),
            to=ticket.client_email,
            tags=[_tag("type", "ticket-comment"), _tag("ticket_id", ticket.id)],
        )
