"""Notification repository. Mutations are single statements scoped by id AND owner."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import delete, desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from pinkbeam.application.dtos.notification import (
    NotificationFilter,
    NotificationResult,
)
from pinkbeam.domain.enums import NotificationType
from pinkbeam.infrastructure.persistence.models.notification import Notification


def _notification_to_result(n: Notification) -> NotificationResult:
    """Map ORM Notification to application NotificationResult."""
    return NotificationResult(
        id=n.id,
        user_id=n.user_id,
        type=n.type,
        title=n.title,
        message=n.message,
        data=dict(n.data or {}),
        is_read=n.is_read,
        read_at=n.read_at,
        created_at=n.created_at,
    )


class NotificationRepository:
    """Notification persistence; one session per call so reads can be gathered."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    async def create(
        self,
        user_id: str,
        type: NotificationType,
        title: str,
        message: str,
        data: dict[str, Any],
    ) -> NotificationResult:
        async with self.session_factory() as session:
            row = Notification(
                user_id=user_id,
                type=type,
                title=title,
                message=message,
                data=data,
                is_read=False,
            )
            session.add(row)
            await session.commit()
            await session.refresh(row)
            return _notification_to_result(row)

    async def list_page(
        self, filters: NotificationFilter, limit: int, offset: int
    ) -> list[NotificationResult]:
        stmt = select(Notification).where(Notification.user_id == filters.user_id)
        if filters.unread_only:
            stmt = stmt.where(Notification.is_read.is_(False))
        if filters.type is not None:
            stmt = stmt.where(Notification.type == filters.type)
        stmt = (
            stmt.order_by(desc(Notification.created_at), desc(Notification.id))
            .limit(limit)
            .offset(offset)
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [_notification_to_result(n) for n in result.scalars().all()]

    async def count_for_user(self, user_id: str) -> int:
        stmt = select(func.count()).select_from(Notification).where(
            Notification.user_id == user_id
        )
        async with self.session_factory() as session:
            return (await session.execute(stmt)).scalar_one()

    async def count_unread(self, user_id: str) -> int:
        stmt = (
            select(func.count())
            .select_from(Notification)
            .where(Notification.user_id == user_id, Notification.is_read.is_(False))
        )
        async with self.session_factory() as session:
            return (await session.execute(stmt)).scalar_one()

    async def set_read_state(
        self,
        notification_id: str,
        user_id: str,
        is_read: bool,
        read_at: datetime | None,
    ) -> int:
        stmt = (
            update(Notification)
            .where(Notification.id == notification_id, Notification.user_id == user_id)
            .values(is_read=is_read, read_at=read_at)
        )
        return await self._execute_write(stmt)

    async def mark_all_read(self, user_id: str, read_at: datetime) -> int:
        stmt = (
            update(Notification)
            .where(Notification.user_id == user_id, Notification.is_read.is_(False))
            .values(is_read=True, read_at=read_at)
        )
        return await self._execute_write(stmt)

    async def delete(self, notification_id: str, user_id: str) -> int:
        stmt = delete(Notification).where(
            Notification.id == notification_id, Notification.user_id == user_id
        )
        return await self._execute_write(stmt)

    async def _execute_write(self, stmt: Any) -> int:
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            await session.commit()
            return result.rowcount or 0
