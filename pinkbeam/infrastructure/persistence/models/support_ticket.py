"""SupportTicket ORM model."""

from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from pinkbeam.domain.enums import TicketStatus
from pinkbeam.infrastructure.persistence.database import Base
from pinkbeam.infrastructure.persistence.models.mixins import (
    CuidMixin,
    SearchableMixin,
    TimestampMixin,
)


class SupportTicket(CuidMixin, TimestampMixin, SearchableMixin, Base):
    """Client support ticket. Table: support_tickets."""

    __tablename__ = "support_tickets"

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default=TicketStatus.OPEN.value,
        server_default=TicketStatus.OPEN.value,
    )
    priority: Mapped[str] = mapped_column(
        String(16), nullable=False, default="MEDIUM", server_default="MEDIUM"
    )
    category: Mapped[str | None] = mapped_column(String(64), nullable=True)
    client_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )

    __table_args__ = (Index("ix_support_tickets_client_status", "client_id", "status"),)
