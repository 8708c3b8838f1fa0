"""DTOs for email templates and dispatch."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class QuoteData:
    """Quote request as captured by the public quote form."""

    id: str
    full_name: str
    email: str
    project_type: str
    services: list[str]
    budget_range: str
    timeline: str
    description: str
    company: str | None = None
    lead_score: int | None = None
    lead_quality: str | None = None


@dataclass(frozen=True)
class TicketData:
    """Support ticket fields used by ticket emails."""

    id: str
    title: str
    client_name: str
    client_email: str
    status: str | None = None
    priority: str | None = None
    category: str | None = None


@dataclass(frozen=True)
class RenderedEmail:
    """Subject and HTML body. An empty subject means nothing to send."""

    subject: str
    html: str

    @property
    def is_empty(self) -> bool:
        return not self.subject

    def __bool__(self) -> bool:
        return not self.is_empty


EMPTY_EMAIL = RenderedEmail(subject="", html="")


@dataclass(frozen=True)
class EmailMessage:
    """Outbound message handed to an email sender."""

    to: str | list[str]
    subject: str
    html: str
    tags: list[dict[str, str]] = field(default_factory=list)
    reply_to: str | None = None

    @property
    def recipients(self) -> list[str]:
        return [self.to] if isinstance(self.to, str) else list(self.to)
