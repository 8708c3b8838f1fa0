"""Notification use case: create, list, read-state changes, delete.

Every operation reports failure through OperationResult instead of raising;
the underlying exception is logged with its traceback.
"""

from __future__ import annotations

import asyncio

from typing import TYPE_CHECKING, Any

from pinkbeam.application.dtos.notification import NotificationFilter, OperationResult
from pinkbeam.domain.enums import NotificationType
from pinkbeam.shared.telemetry.logging import get_logger
from pinkbeam.shared.utils.datetime import utc_now

if TYPE_CHECKING:
    from pinkbeam.application.interfaces.repositories import INotificationRepository

logger = get_logger(__name__)

NOT_FOUND_ERROR = "Notification not found or access denied"
DEFAULT_PAGE_SIZE = 20


class NotificationService:
    """In-app notifications scoped to their owning user."""

    def __init__(self, notification_repo: "INotificationRepository") -> None:
        self.notification_repo = notification_repo

    async def create_notification(
        self,
        user_id: str,
        type: NotificationType | str,
        title: str,
        message: str,
        data: dict[str, Any] | None = None,
    ) -> OperationResult:
        try:
            notification = await self.notification_repo.create(
                user_id=user_id,
                type=NotificationType(type),
                title=title,
                message=message,
                data=data or {},
            )
            return OperationResult.ok(notification)
        except Exception:
            logger.exception("Error creating notification for user %s", user_id)
            return OperationResult.fail("Failed to create notification")

    async def get_notifications(
        self,
        user_id: str,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
        unread_only: bool = False,
        type: NotificationType | None = None,
    ) -> OperationResult:
        """Page of notifications, newest first, with total and unread counts.

        total and unread always cover all of the user's notifications,
        regardless of the unread_only and type filters.
        """
        try:
            filters = NotificationFilter(
                user_id=user_id, unread_only=unread_only, type=type
            )
            page, total, unread = await asyncio.gather(
                self.notification_repo.list_page(filters, limit, offset),
                self.notification_repo.count_for_user(user_id),
                self.notification_repo.count_unread(user_id),
            )
            return OperationResult.ok(
                page,
                meta={
                    "total": total,
                    "unread": unread,
                    "limit": limit,
                    "offset": offset,
                    "has_more": offset + len(page) < total,
                },
            )
        except Exception:
            logger.exception("Error fetching notifications for user %s", user_id)
            return OperationResult.fail("Failed to fetch notifications")

    async def mark_as_read(self, notification_id: str, user_id: str) -> OperationResult:
        try:
            updated = await self.notification_repo.set_read_state(
                notification_id, user_id, is_read=True, read_at=utc_now()
            )
            if updated == 0:
                return OperationResult.fail(NOT_FOUND_ERROR)
            return OperationResult.ok()
        except Exception:
            logger.exception("Error marking notification %s as read", notification_id)
            return OperationResult.fail("Failed to mark notification as read")

    async def mark_as_unread(
        self, notification_id: str, user_id: str
    ) -> OperationResult:
        try:
            updated = await self.notification_repo.set_read_state(
                notification_id, user_id, is_read=False, read_at=None
            )
            if updated == 0:
                return OperationResult.fail(NOT_FOUND_ERROR)
            return OperationResult.ok()
        except Exception:
            logger.exception(
                "Error marking notification %s as unread", notification_id
            )
            return OperationResult.fail("Failed to mark notification as unread")

    async def mark_all_as_read(self, user_id: str) -> OperationResult:
        """Succeeds even when the user has nothing unread."""
        try:
            updated = await self.notification_repo.mark_all_read(user_id, utc_now())
            return OperationResult.ok(count=updated)
        except Exception:
            logger.exception("Error marking all notifications read for user %s", user_id)
            return OperationResult.fail("Failed to mark all notifications as read")

    async def get_unread_count(self, user_id: str) -> OperationResult:
        try:
            count = await self.notification_repo.count_unread(user_id)
            return OperationResult.ok(count=count)
        except Exception:
            logger.exception("Error counting unread notifications for user %s", user_id)
            return OperationResult.fail("Failed to get unread count")

    async def delete_notification(
        self, notification_id: str, user_id: str
    ) -> OperationResult:
        try:
            deleted = await self.notification_repo.delete(notification_id, user_id)
            if deleted == 0:
                return OperationResult.fail(NOT_FOUND_ERROR)
            return OperationResult.ok()
        except Exception:
            logger.exception("Error deleting notification %s", notification_id)
            return OperationResult.fail("Failed to delete notification")
