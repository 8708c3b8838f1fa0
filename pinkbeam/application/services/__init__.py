"""Application services: pure helpers for search text and email rendering."""

from pinkbeam.application.services.email_templates import (
    TEMPLATE_REGISTRY,
    admin_notification_template,
    client_auto_response_template,
    follow_up_day1_template,
    follow_up_day3_template,
    follow_up_day7_template,
    status_update_template,
    ticket_admin_notification_template,
    ticket_comment_notification_template,
    ticket_created_template,
    ticket_status_update_template,
)
from pinkbeam.application.services.search_text import (
    build_search_vector,
    generate_snippet,
)

__all__ = [
    "TEMPLATE_REGISTRY",
    "admin_notification_template",
    "build_search_vector",
    "client_auto_response_template",
    "follow_up_day1_template",
    "follow_up_day3_template",
    "follow_up_day7_template",
    "generate_snippet",
    "status_update_template",
    "ticket_admin_notification_template",
    "ticket_comment_notification_template",
    "ticket_created_template",
    "ticket_status_update_template",
]
