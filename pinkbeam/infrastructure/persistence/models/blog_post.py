"""BlogPost ORM model. Only published posts are searchable."""

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from pinkbeam.infrastructure.persistence.database import Base
from pinkbeam.infrastructure.persistence.models.mixins import (
    CuidMixin,
    SearchableMixin,
    TimestampMixin,
)


class BlogPost(CuidMixin, TimestampMixin, SearchableMixin, Base):
    """Marketing blog post. Table: blog_posts."""

    __tablename__ = "blog_posts"

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    excerpt: Mapped[str | None] = mapped_column(Text, nullable=True)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    meta_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    meta_desc: Mapped[str | None] = mapped_column(String(500), nullable=True)
    published: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default="false", index=True
    )
