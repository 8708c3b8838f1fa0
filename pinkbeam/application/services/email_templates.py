"""Transactional email templates: quote lifecycle and support tickets (Jinja).

Every template is a pure function returning RenderedEmail(subject, html).
Status templates return EMPTY_EMAIL (falsy) for statuses that send nothing.
Values are interpolated without HTML escaping.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from jinja2 import Environment, Template

from pinkbeam.application.dtos.email import (
    EMPTY_EMAIL,
    QuoteData,
    RenderedEmail,
    TicketData,
)

_LAYOUT = """
    <div style="font-family: system-ui, -apple-system, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px; color: #1a1a1a;">
      {{ body }}
      <div style="text-align: center; margin-top: 40px; padding-top: 20px; border-top: 1px solid #e5e5e5;">
        {{ footer or '' }}
        <p style="color: #999; font-size: 12px; margin-top: 12px;">
          Pink Beam &mdash; Web Design &amp; Development
        </p>
      </div>
    </div>
"""

_HEADER = """
    <div style="background: linear-gradient(135deg, #FF006E, #FF4D9E); padding: 28px; border-radius: 12px; text-align: center; margin-bottom: 24px;">
      <h1 style="color: white; margin: 0; font-size: 22px; font-weight: 600;">{{ title }}</h1>
      {% if subtitle %}<p style="color: rgba(255,255,255,0.9); margin: 8px 0 0 0; font-size: 14px;">{{ subtitle }}</p>{% endif %}
    </div>
"""

_CARD = (
    '<div style="background: #fafafa; padding: 24px; border-radius: 8px; '
    'margin-bottom: 16px;">{{ content }}</div>'
)

_BUTTON = """
    <div style="text-align: center; margin: 24px 0;">
      <a href="{{ url }}" style="display: inline-block; background: #FF006E; color: white; padding: 12px 32px; border-radius: 8px; text-decoration: none; font-weight: 600; font-size: 14px;">{{ text }}</a>
    </div>
"""

_env = Environment(autoescape=False, keep_trailing_newline=True)
_layout_tpl = _env.from_string(_LAYOUT)
_header_tpl = _env.from_string(_HEADER)
_card_tpl = _env.from_string(_CARD)
_button_tpl = _env.from_string(_BUTTON)


def layout(body: str, footer: str | None = None) -> str:
    """Branded outer wrapper with the Pink Beam footer line."""
    return _layout_tpl.render(body=body, footer=footer)


def header(title: str, subtitle: str | None = None) -> str:
    return _header_tpl.render(title=title, subtitle=subtitle)


def card(content: str) -> str:
    return _card_tpl.render(content=content)


def button(text: str, url: str) -> str:
    return _button_tpl.render(text=text, url=url)


_env.globals.update(header=header, button=button)
_env.filters["card"] = card

_P = '<p style="font-size: 15px; line-height: 1.6; color: #444;">'
_GREETING = '<p style="font-size: 16px; line-height: 1.6;">Hi {{ first_name }},</p>'
_env.globals.update(p=_P)

# key -> (subject template, body template, footer template or None)
_SOURCES: dict[str, tuple[str, str, str | None]] = {
    "admin_notification": (
        "New Quote: {{ q.full_name }}{% if q.company %} — {{ q.company }}{% endif %}",
        """{{ header('New Quote Request', 'Lead Score: ' ~ q.lead_score ~ '/100' if q.lead_score is not none else none) }}{% filter card %}
      <p style="margin: 0 0 8px;"><strong>Name:</strong> {{ q.full_name }}{% if q.lead_quality %} <span style="display: inline-block; background: {{ badge_colour }}; color: white; padding: 2px 8px; border-radius: 4px; font-size: 11px; text-transform: uppercase;">{{ q.lead_quality }}</span>{% endif %}</p>
      <p style="margin: 0 0 8px;"><strong>Email:</strong> {{ q.email }}</p>
      {% if q.company %}<p style="margin: 0 0 8px;"><strong>Company:</strong> {{ q.company }}</p>{% endif %}
      <p style="margin: 0 0 8px;"><strong>Project Type:</strong> {{ q.project_type }}</p>
      <p style="margin: 0 0 8px;"><strong>Services:</strong> {{ q.services | join(', ') }}</p>
      <p style="margin: 0 0 8px;"><strong>Budget:</strong> {{ q.budget_range }}</p>
      <p style="margin: 0 0 8px;"><strong>Timeline:</strong> {{ q.timeline }}</p>
      <hr style="border: none; border-top: 1px solid #e5e5e5; margin: 16px 0;" />
      <p style="margin: 0 0 4px;"><strong>Description:</strong></p>
      <p style="margin: 0; white-space: pre-wrap; color: #444;">{{ q.description }}</p>
    {% endfilter %}""",
        '<p style="color: #666; font-size: 12px;">Quote ID: {{ q.id }}</p>',
    ),
    "client_auto_response": (
        "We received your quote request — Pink Beam",
        """{{ header('We Got Your Request!', 'Thank you for reaching out to Pink Beam') }}"""
        + _GREETING
        + """{{ p }}
      Thanks for your interest in working with us! We've received your project details and our team is reviewing them now.
    </p>{% filter card %}
      <p style="margin: 0 0 8px; font-size: 14px;"><strong>Project:</strong> {{ q.project_type }}</p>
      <p style="margin: 0 0 8px; font-size: 14px;"><strong>Services:</strong> {{ q.services | join(', ') }}</p>
      <p style="margin: 0 0 8px; font-size: 14px;"><strong>Budget:</strong> {{ q.budget_range }}</p>
      <p style="margin: 0; font-size: 14px;"><strong>Timeline:</strong> {{ q.timeline }}</p>
    {% endfilter %}{{ p }}
      <strong>What happens next?</strong> A team member will review your project within 24 hours
      and reach out to discuss next steps. If your project is urgent, feel free to reply to this email directly.
    </p>{{ p }}
      We're excited to learn more about your project!
    </p><p style="font-size: 15px; color: #444;">— The Pink Beam Team</p>""",
        None,
    ),
    "follow_up_day1": (
        "Quick follow-up on your project — Pink Beam",
        _GREETING
        + """{{ p }}
      I wanted to follow up personally on the quote request you submitted yesterday for your
      <strong>{{ q.project_type }}</strong> project.
    </p>{{ p }}
      I've had a chance to review your requirements and I'd love to schedule a quick call
      to discuss the best approach. Would any of these times work for a 15-minute chat?
    </p><ul style="font-size: 15px; line-height: 1.8; color: #444;">
      <li>Tomorrow morning (10am–12pm)</li>
      <li>Tomorrow afternoon (2pm–4pm)</li>
      <li>Any time that works for you — just reply with your preference</li>
    </ul>{{ p }}
      Looking forward to hearing from you!
    </p><p style="font-size: 15px; color: #444;">Best,<br/>The Pink Beam Team</p>""",
        None,
    ),
    "follow_up_day3": (
        "Choosing the right web partner — Pink Beam",
        _GREETING
        + """{{ p }}
      While your project is being reviewed, I thought you might find these helpful as you evaluate your options:
    </p>{% filter card %}
      <p style="margin: 0 0 12px; font-weight: 600;">Things to consider when choosing a web partner:</p>
      <ol style="margin: 0; padding-left: 20px; font-size: 14px; line-height: 1.8; color: #444;">
        <li>Look for a portfolio that matches your industry and style</li>
        <li>Ask about their development process and communication cadence</li>
        <li>Ensure they provide post-launch support and maintenance</li>
        <li>Check if they offer SEO and performance optimization</li>
        <li>Confirm they build with modern, scalable technology</li>
      </ol>
    {% endfilter %}{{ p }}
      At Pink Beam, we check all these boxes. We'd love to show you how we approach projects like yours.
    </p>{{ p }}
      Just reply to this email if you'd like to chat — no pressure at all.
    </p><p style="font-size: 15px; color: #444;">Best,<br/>The Pink Beam Team</p>""",
        None,
    ),
    "follow_up_day7": (
        "Still interested in your project — Pink Beam",
        _GREETING
        + """{{ p }}
      I wanted to check in one last time about your <strong>{{ q.project_type }}</strong> project.
      We'd still love the opportunity to work with you{% if q.company %} and the {{ q.company }} team{% endif %}.
    </p>{{ p }}
      If the timing isn't right, no worries at all — we'll be here whenever you're ready.
      Just reply to this email anytime and we'll pick right up.
    </p><p style="font-size: 15px; color: #444;">All the best,<br/>The Pink Beam Team</p>""",
        None,
    ),
    "status_update": (
        "{{ msg.heading }} — Pink Beam",
        "{{ header(msg.heading) }}"
        + _GREETING
        + """{{ p }}{{ msg.body }}</p>{{ p }}
      If you have any questions, just reply to this email — we're always happy to help.
    </p><p style="font-size: 15px; color: #444;">— The Pink Beam Team</p>""",
        None,
    ),
    "ticket_created": (
        "Ticket received: {{ t.title }} — Pink Beam",
        "{{ header('Support Ticket Created', 'Ticket #' ~ short_id) }}"
        + _GREETING
        + """{{ p }}
      We've received your support ticket and our team will respond as soon as possible.
    </p>{% filter card %}
      <p style="margin: 0 0 8px; font-size: 14px;"><strong>Subject:</strong> {{ t.title }}</p>
      <p style="margin: 0 0 8px; font-size: 14px;"><strong>Priority:</strong> {{ t.priority or 'Medium' }}</p>
      <p style="margin: 0; font-size: 14px;"><strong>Category:</strong> {{ t.category or 'General' }}</p>
    {% endfilter %}{{ p }}
      You can track your ticket status in the <strong>Client Portal</strong>.
      If you have additional details, reply to this email and they'll be added to your ticket.
    </p><p style="font-size: 15px; color: #444;">— The Pink Beam Support Team</p>""",
        None,
    ),
    "ticket_admin_notification": (
        "New Ticket [{{ t.priority or 'Medium' }}]: {{ t.title }}",
        """{{ header('New Support Ticket', 'Priority: ' ~ (t.priority or 'Medium')) }}{% filter card %}
      <p style="margin: 0 0 8px;"><strong>Client:</strong> {{ t.client_name }} ({{ t.client_email }})</p>
      <p style="margin: 0 0 8px;"><strong>Subject:</strong> {{ t.title }}</p>
      <p style="margin: 0 0 8px;"><strong>Category:</strong> {{ t.category or 'General' }}</p>
      <p style="margin: 0;"><strong>Priority:</strong> {{ t.priority or 'Medium' }}</p>
    {% endfilter %}""",
        '<p style="color: #666; font-size: 12px;">Ticket ID: {{ t.id }}</p>',
    ),
    "ticket_status_update": (
        "{{ msg.heading }} — Ticket #{{ short_id }}",
        "{{ header(msg.heading, 'Ticket #' ~ short_id) }}"
        + _GREETING
        + """{{ p }}{{ msg.body }}</p>{% filter card %}
      <p style="margin: 0 0 8px; font-size: 14px;"><strong>Ticket:</strong> {{ t.title }}</p>
      <p style="margin: 0; font-size: 14px;"><strong>Status:</strong> {{ status_label }}</p>
    {% endfilter %}{{ p }}
      If you have questions, reply to this email or check the Client Portal.
    </p><p style="font-size: 15px; color: #444;">— The Pink Beam Support Team</p>""",
        None,
    ),
    "ticket_comment_notification": (
        "Reply on: {{ t.title }} — Pink Beam",
        "{{ header('New Reply on Your Ticket', 'Ticket #' ~ short_id) }}"
        + _GREETING
        + """{{ p }}
      {{ author_name }} has replied to your support ticket:
    </p>{% filter card %}
      <p style="margin: 0 0 8px; font-size: 14px;"><strong>{{ t.title }}</strong></p>
      <p style="margin: 0; font-size: 14px; white-space: pre-wrap; color: #444;">{{ comment_body }}</p>
    {% endfilter %}{{ p }}
      Reply to this email or visit the Client Portal to continue the conversation.
    </p><p style="font-size: 15px; color: #444;">— The Pink Beam Support Team</p>""",
        None,
    ),
}

_COMPILED: dict[str, tuple[Template, Template, Template | None]] = {
    key: (
        _env.from_string(subject),
        _env.from_string(body),
        _env.from_string(footer) if footer else None,
    )
    for key, (subject, body, footer) in _SOURCES.items()
}

QUOTE_STATUS_MESSAGES: dict[str, dict[str, str]] = {
    "CONTACTED": {
        "heading": "We're reviewing your project",
        "body": "Our team has reviewed your request and we'll be reaching out shortly to discuss your project in more detail.",
    },
    "QUALIFIED": {
        "heading": "Great news — your project is a fit!",
        "body": "After reviewing your requirements, we believe Pink Beam is a great match for your project. We'll be preparing a detailed proposal for you.",
    },
    "PROPOSAL": {
        "heading": "Your proposal is ready",
        "body": "We've put together a proposal for your project. A team member will be sharing the details with you shortly.",
    },
    "ACCEPTED": {
        "heading": "Welcome aboard!",
        "body": "We're thrilled to get started on your project! A team member will be in touch with onboarding details and next steps.",
    },
    "DECLINED": {
        "heading": "Thank you for considering us",
        "body": "We understand this might not be the right fit at this time. If anything changes in the future, we'd love to hear from you.",
    },
}

TICKET_STATUS_MESSAGES: dict[str, dict[str, str]] = {
    "IN_PROGRESS": {
        "heading": "We're working on it",
        "body": "Your support ticket is now being actively worked on. We'll update you as soon as we have more information.",
    },
    "WAITING_CLIENT": {
        "heading": "We need your input",
        "body": "Our team has a question about your ticket. Please check the ticket in the Client Portal and reply at your earliest convenience.",
    },
    "RESOLVED": {
        "heading": "Issue resolved",
        "body": "We believe your issue has been resolved. If you're still experiencing problems, please let us know and we'll reopen the ticket.",
    },
    "CLOSED": {
        "heading": "Ticket closed",
        "body": "Your support ticket has been closed. If you need further assistance, you can open a new ticket at any time.",
    },
}

LEAD_QUALITY_COLOURS = {"hot": "#ef4444", "warm": "#f59e0b"}
DEFAULT_LEAD_QUALITY_COLOUR = "#6b7280"


def _render(key: str, **ctx: Any) -> RenderedEmail:
    subject_tpl, body_tpl, footer_tpl = _COMPILED[key]
    footer = footer_tpl.render(**ctx) if footer_tpl else None
    return RenderedEmail(
        subject=subject_tpl.render(**ctx),
        html=layout(body_tpl.render(**ctx), footer),
    )


def _quote_first_name(quote: QuoteData) -> str:
    return quote.full_name.split(" ")[0]


def _ticket_first_name(ticket: TicketData) -> str:
    return ticket.client_name.split(" ")[0] or "there"


# --- Quote templates ---


def admin_notification_template(quote: QuoteData) -> RenderedEmail:
    """New quote received (to the team), with lead score and quality badge."""
    colour = LEAD_QUALITY_COLOURS.get(quote.lead_quality or "", DEFAULT_LEAD_QUALITY_COLOUR)
    return _render("admin_notification", q=quote, badge_colour=colour)


def client_auto_response_template(quote: QuoteData) -> RenderedEmail:
    """Confirmation sent to the person who submitted the quote."""
    return _render(
        "client_auto_response", q=quote, first_name=_quote_first_name(quote)
    )


def follow_up_day1_template(quote: QuoteData) -> RenderedEmail:
    return _render("follow_up_day1", q=quote, first_name=_quote_first_name(quote))


def follow_up_day3_template(quote: QuoteData) -> RenderedEmail:
    return _render("follow_up_day3", q=quote, first_name=_quote_first_name(quote))


def follow_up_day7_template(quote: QuoteData) -> RenderedEmail:
    return _render("follow_up_day7", q=quote, first_name=_quote_first_name(quote))


def status_update_template(quote: QuoteData, new_status: str) -> RenderedEmail:
    """Quote status change. EMPTY_EMAIL for statuses with no client message."""
    msg = QUOTE_STATUS_MESSAGES.get(new_status)
    if msg is None:
        return EMPTY_EMAIL
    return _render(
        "status_update", q=quote, msg=msg, first_name=_quote_first_name(quote)
    )


# --- Ticket templates ---


def ticket_created_template(ticket: TicketData) -> RenderedEmail:
    return _render(
        "ticket_created",
        t=ticket,
        short_id=ticket.id[:8],
        first_name=_ticket_first_name(ticket),
    )


def ticket_admin_notification_template(ticket: TicketData) -> RenderedEmail:
    return _render("ticket_admin_notification", t=ticket)


def ticket_status_update_template(ticket: TicketData, new_status: str) -> RenderedEmail:
    """Ticket status change. EMPTY_EMAIL for OPEN and unknown statuses."""
    msg = TICKET_STATUS_MESSAGES.get(new_status)
    if msg is None:
        return EMPTY_EMAIL
    return _render(
        "ticket_status_update",
        t=ticket,
        msg=msg,
        short_id=ticket.id[:8],
        first_name=_ticket_first_name(ticket),
        # Only the first underscore is replaced (WAITING_CLIENT -> "WAITING CLIENT").
        status_label=new_status.replace("_", " ", 1),
    )


def ticket_comment_notification_template(
    ticket: TicketData, comment_body: str, author_name: str
) -> RenderedEmail:
    return _render(
        "ticket_comment_notification",
        t=ticket,
        short_id=ticket.id[:8],
        first_name=_ticket_first_name(ticket),
        comment_body=comment_body,
        author_name=author_name,
    )


# --- Registry for previews ---

TemplateFn = Callable[..., RenderedEmail]

TEMPLATE_REGISTRY: dict[str, dict[str, TemplateFn]] = {
    "quotes": {
        "admin-notification": admin_notification_template,
        "client-auto-response": client_auto_response_template,
        "status-update": status_update_template,
        "follow-up-day-1": follow_up_day1_template,
        "follow-up-day-3": follow_up_day3_template,
        "follow-up-day-7": follow_up_day7_template,
    },
    "tickets": {
        "ticket-created": ticket_created_template,
        "ticket-admin-notification": ticket_admin_notification_template,
        "ticket-status-update": ticket_status_update_template,
        "ticket-comment": ticket_comment_notification_template,
    },
}
