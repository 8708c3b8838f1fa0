"""SQLAlchemy mixins shared by the Pink Beam models.

Provides: CuidMixin, TimestampMixin, SearchableMixin.
"""

from datetime import datetime

from cuid2 import cuid_wrapper
from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

generate_cuid = cuid_wrapper()


class CuidMixin:
    """Mixin for models using CUID2 as primary key."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String, primary_key=True, default=generate_cuid)


class TimestampMixin:
    """Mixin for created_at and updated_at (server defaults, timezone-aware)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class SearchableMixin:
    """Mixin for the denormalised full-text corpus column.

    Plain text (space-joined display fields); queries wrap it in
    to_tsvector('english', COALESCE(search_vector, '')).
    """

    @declared_attr
    def search_vector(cls) -> Mapped[str | None]:
        return mapped_column(Text, nullable=True)
