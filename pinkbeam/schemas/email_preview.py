"""Email template preview API schemas."""

from typing import Any

from pydantic import BaseModel, Field


class EmailPreviewRequest(BaseModel):
    """Render a registered template with sample data.

    test_data carries QuoteData or TicketData fields depending on category.
    """

    category: str | None = Field(None, description="quotes | tickets")
    template: str | None = Field(None, description="Template key within the category")
    test_data: dict[str, Any] = Field(default_factory=dict)
    status: str | None = None
    comment_body: str | None = None
    author_name: str | None = None


class EmailPreviewResponse(BaseModel):
    success: bool = True
    subject: str
    html: str


class EmailTemplateCatalogResponse(BaseModel):
    """Registered template keys per category."""

    success: bool = True
    templates: dict[str, list[str]]


class EmailTestSendResponse(BaseModel):
    success: bool = True
    sent: bool = True
    to: str
    subject: str
