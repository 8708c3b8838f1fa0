"""Project ORM model. Indexed with the client's name for search."""

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pinkbeam.infrastructure.persistence.database import Base
from pinkbeam.infrastructure.persistence.models.mixins import (
    CuidMixin,
    SearchableMixin,
    TimestampMixin,
)
from pinkbeam.infrastructure.persistence.models.user import User


class Project(CuidMixin, TimestampMixin, SearchableMixin, Base):
    """Client project. Table: projects."""

    __tablename__ = "projects"

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(32), nullable=False, default="PLANNING", server_default="PLANNING"
    )
    client_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )

    client: Mapped[User | None] = relationship(User, lazy="raise")
