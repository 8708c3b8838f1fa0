"""User ORM model. Users with role CLIENT are searchable as clients."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from pinkbeam.domain.enums import UserRole
from pinkbeam.infrastructure.persistence.database import Base
from pinkbeam.infrastructure.persistence.models.mixins import (
    CuidMixin,
    SearchableMixin,
    TimestampMixin,
)


class User(CuidMixin, TimestampMixin, SearchableMixin, Base):
    """Portal or staff user. Table: users."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    role: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=UserRole.CLIENT.value,
        server_default=UserRole.CLIENT.value,
        index=True,
    )
    company: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(64), nullable=True)
    industry: Mapped[str | None] = mapped_column(String(128), nullable=True)
