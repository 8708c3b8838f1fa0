"""Email template API: list registered templates, preview or test-send one."""

from dataclasses import fields
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException

from pinkbeam.api.v1.dependencies import get_email_sender
from pinkbeam.application.dtos.email import EmailMessage, QuoteData, TicketData
from pinkbeam.application.interfaces.services import IEmailSender
from pinkbeam.application.services.email_templates import TEMPLATE_REGISTRY
from pinkbeam.core.config import get_settings
from pinkbeam.domain.exceptions import ResourceNotFoundException, ValidationException
from pinkbeam.schemas.email_preview import (
    EmailPreviewRequest,
    EmailPreviewResponse,
    EmailTemplateCatalogResponse,
    EmailTestSendResponse,
)

router = APIRouter()

_DATA_TYPES: dict[str, type] = {"quotes": QuoteData, "tickets": TicketData}


def _build(data_type: type, data: dict[str, Any]) -> Any:
    """Dataclass from test data, ignoring unknown keys."""
    known = {f.name for f in fields(data_type)}
    try:
        return data_type(**{k: v for k, v in data.items() if k in known})
    except TypeError as exc:
        raise ValidationException(f"Invalid test_data: {exc}", field="test_data") from exc


def _render(body: EmailPreviewRequest):
    if not body.category or not body.template:
        raise HTTPException(status_code=400, detail="Category and template are required")
    template_fn = TEMPLATE_REGISTRY.get(body.category, {}).get(body.template)
    if template_fn is None:
        raise ResourceNotFoundException(
            "email_template", f"{body.category}/{body.template}"
        )

    dto = _build(_DATA_TYPES[body.category], body.test_data)
    status = body.status or body.test_data.get("status")
    if body.template == "status-update":
        return template_fn(dto, status or "QUALIFIED")
    if body.template == "ticket-status-update":
        return template_fn(dto, status or "IN_PROGRESS")
    if body.template == "ticket-comment":
        return template_fn(
            dto, body.comment_body or "Test comment", body.author_name or "Support Team"
        )
    return template_fn(dto)


@router.get("", response_model=EmailTemplateCatalogResponse)
def list_templates() -> EmailTemplateCatalogResponse:
    return EmailTemplateCatalogResponse(
        templates={category: sorted(t) for category, t in TEMPLATE_REGISTRY.items()}
    )


@router.post("/preview", response_model=EmailPreviewResponse)
def preview_template(body: EmailPreviewRequest) -> EmailPreviewResponse:
    """Render subject and HTML. Unmapped statuses render as empty strings."""
    rendered = _render(body)
    return EmailPreviewResponse(subject=rendered.subject, html=rendered.html)


@router.post("/send-test", response_model=EmailTestSendResponse)
async def send_test_email(
    body: EmailPreviewRequest,
    sender: Annotated[IEmailSender, Depends(get_email_sender)],
) -> EmailTestSendResponse:
    """Send the rendered template to the team inbox with a [TEST] subject prefix."""
    rendered = _render(body)
    if not rendered:
        raise HTTPException(status_code=400, detail="Template rendered no email")
    to = get_settings().quote_notify_email
    sent = await sender.send_email(
        EmailMessage(
            to=to,
            subject=f"[TEST] {rendered.subject}",
            html=rendered.html,
            tags=[
                {"name": "type", "value": "test-email"},
                {"name": "template", "value": f"{body.category}/{body.template}"},
            ],
        )
    )
    if not sent:
        raise HTTPException(status_code=500, detail="RESEND_API_KEY not configured")
    return EmailTestSendResponse(to=to, subject=rendered.subject)
