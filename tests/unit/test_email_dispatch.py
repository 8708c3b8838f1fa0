"""EmailDispatchService: recipients, tags, reply-to and skipped sends."""

import pytest

from pinkbeam.application.dtos.email import EmailMessage, RenderedEmail
from pinkbeam.application.services import email_templates as templates
from pinkbeam.application.use_cases.email_dispatch import EmailDispatchService
from pinkbeam.domain.exceptions import EmailDeliveryException

TEAM = "hello@pinkbeam.io"
SUPPORT = "support@pinkbeam.io"


class RecordingSender:
    def __init__(self, result: bool = True, error: Exception | None = None):
        self.result = result
        self.error = error
        self.sent: list[EmailMessage] = []

    async def send_email(self, message: EmailMessage) -> bool:
        if self.error:
            raise self.error
        self.sent.append(message)
        return self.result


@pytest.fixture
def sender() -> RecordingSender:
    return RecordingSender()


@pytest.fixture
def dispatch(sender) -> EmailDispatchService:
    return EmailDispatchService(sender, TEAM, SUPPORT)


def _tags(message: EmailMessage) -> dict[str, str]:
    return {tag["name"]: tag["value"] for tag in message.tags}


async def test_quote_notification_goes_to_team(dispatch, sender, quote) -> None:
    assert await dispatch.send_quote_notification(quote) is True
    (message,) = sender.sent
    assert message.to == TEAM
    assert message.reply_to is None
    assert message.subject.startswith("New Quote: Jane Doe")
    assert _tags(message) == {"type": "admin-notification", "quote_id": "quote-123"}


async def test_client_auto_response_replies_to_team(dispatch, sender, quote) -> None:
    await dispatch.send_client_auto_response(quote)
    (message,) = sender.sent
    assert message.to == "jane@example.com"
    assert message.reply_to == TEAM
    assert _tags(message)["type"] == "auto-response"


@pytest.mark.parametrize(
    ("stage", "marker"),
    [
        (1, "Quick follow-up"),
        (2, "Choosing the right web partner"),
        (3, "Still interested"),
        (9, "Still interested"),
    ],
)
async def test_follow_up_stage_selects_template(dispatch, sender, quote, stage, marker) -> None:
    await dispatch.send_follow_up_email(quote, stage)
    (message,) = sender.sent
    assert marker in message.subject
    assert _tags(message) == {"type": f"follow-up-{stage}", "quote_id": "quote-123"}
    assert message.reply_to == TEAM


async def test_status_update_sends_for_known_status(dispatch, sender, quote) -> None:
    assert await dispatch.send_status_update_email(quote, "ACCEPTED") is True
    (message,) = sender.sent
    assert message.subject == "Welcome aboard! — Pink Beam"
    assert _tags(message)["status"] == "ACCEPTED"


async def test_status_update_without_message_sends_nothing(dispatch, sender, quote) -> None:
    assert await dispatch.send_status_update_email(quote, "NEW") is False
    assert sender.sent == []


async def test_ticket_emails_go_to_client(dispatch, sender, ticket) -> None:
    await dispatch.send_ticket_created_email(ticket)
    await dispatch.send_ticket_status_update_email(ticket, "RESOLVED")
    await dispatch.send_ticket_comment_email(ticket, "Fixed now.", "Support Agent")
    assert [m.to for m in sender.sent] == ["jane@example.com"] * 3
    assert [_tags(m)["type"] for m in sender.sent] == [
        "ticket-created",
        "ticket-status-update",
        "ticket-comment",
    ]
    assert all(_tags(m)["ticket_id"] == "test-ticket-123" for m in sender.sent)


async def test_ticket_open_status_sends_nothing(dispatch, sender, ticket) -> None:
    assert await dispatch.send_ticket_status_update_email(ticket, "OPEN") is False
    assert sender.sent == []


async def test_ticket_admin_notification_goes_to_support(dispatch, sender, ticket) -> None:
    await dispatch.send_ticket_admin_notification(ticket)
    assert sender.sent[0].to == SUPPORT


async def test_subjectless_render_is_not_sent(dispatch, sender, ticket, monkeypatch) -> None:
    monkeypatch.setattr(
        templates, "ticket_admin_notification_template", lambda _: RenderedEmail("", "<p>body</p>")
    )
    assert await dispatch.send_ticket_admin_notification(ticket) is False
    assert sender.sent == []


async def test_support_address_defaults_to_team(sender, ticket) -> None:
    await EmailDispatchService(sender, TEAM).send_ticket_admin_notification(ticket)
    assert sender.sent[0].to == TEAM


async def test_disabled_sender_result_is_returned(quote) -> None:
    dispatch = EmailDispatchService(RecordingSender(result=False), TEAM)
    assert await dispatch.send_quote_notification(quote) is False


async def test_delivery_errors_propagate(quote) -> None:
    sender = RecordingSender(error=EmailDeliveryException(500, "boom"))
    with pytest.raises(EmailDeliveryException):
        await EmailDispatchService(sender, TEAM).send_client_auto_response(quote)
