"""ORM models. Importing this package registers every table on Base.metadata."""

from pinkbeam.infrastructure.persistence.models.blog_post import BlogPost
from pinkbeam.infrastructure.persistence.models.notification import Notification
from pinkbeam.infrastructure.persistence.models.project import Project
from pinkbeam.infrastructure.persistence.models.support_ticket import SupportTicket
from pinkbeam.infrastructure.persistence.models.user import User

__all__ = [
    "BlogPost",
    "Notification",
    "Project",
    "SupportTicket",
    "User",
]
