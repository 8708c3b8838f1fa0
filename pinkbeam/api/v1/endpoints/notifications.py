"""Notifications API: the acting user's in-app notifications."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from pinkbeam.api.v1.dependencies import get_current_user_id, get_notification_service
from pinkbeam.application.dtos.notification import OperationResult
from pinkbeam.application.use_cases.notifications import (
    DEFAULT_PAGE_SIZE,
    NOT_FOUND_ERROR,
    NotificationService,
)
from pinkbeam.domain.enums import NotificationType
from pinkbeam.schemas.notification import (
    NotificationBulkActionRequest,
    NotificationListResponse,
    NotificationPageMeta,
    NotificationResponse,
    OperationResponse,
    UnreadCountResponse,
)

router = APIRouter()

MARK_ALL_READ_ACTION = "markAllRead"

UserId = Annotated[str, Depends(get_current_user_id)]
Notifications = Annotated[NotificationService, Depends(get_notification_service)]


def _ensure_success(result: OperationResult) -> None:
    """Raise the HTTP error for a failed operation (404 for not found / not owned)."""
    if result.success:
        return
    status = 404 if result.error == NOT_FOUND_ERROR else 500
    raise HTTPException(status_code=status, detail=result.error)


@router.get("", response_model=NotificationListResponse)
async def list_notifications(
    user_id: UserId,
    notifications: Notifications,
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=100),
    offset: int = Query(0, ge=0),
    unread: bool = Query(False, description="Only unread notifications"),
    type: str | None = Query(None, description="NotificationType; unknown values are ignored"),
):
    type_filter = NotificationType(type) if type in NotificationType.values() else None
    result = await notifications.get_notifications(
        user_id, limit=limit, offset=offset, unread_only=unread, type=type_filter
    )
    _ensure_success(result)
    return NotificationListResponse(
        data=[NotificationResponse.model_validate(n) for n in result.data],
        meta=NotificationPageMeta(**result.meta),
    )


@router.patch("", response_model=OperationResponse)
async def bulk_update_notifications(
    body: NotificationBulkActionRequest,
    user_id: UserId,
    notifications: Notifications,
):
    """Bulk action on the user's notifications; only markAllRead is supported."""
    if body.action != MARK_ALL_READ_ACTION:
        raise HTTPException(status_code=400, detail="Invalid action")
    result = await notifications.mark_all_as_read(user_id)
    _ensure_success(result)
    return OperationResponse(success=True)


@router.get("/unread-count", response_model=UnreadCountResponse)
async def unread_count(user_id: UserId, notifications: Notifications):
    result = await notifications.get_unread_count(user_id)
    _ensure_success(result)
    return UnreadCountResponse(count=result.count)


@router.patch("/{notification_id}/read", response_model=OperationResponse)
async def mark_read(notification_id: str, user_id: UserId, notifications: Notifications):
    _ensure_success(await notifications.mark_as_read(notification_id, user_id))
    return OperationResponse(success=True)


@router.patch("/{notification_id}/unread", response_model=OperationResponse)
async def mark_unread(
    notification_id: str, user_id: UserId, notifications: Notifications
):
    _ensure_success(await notifications.mark_as_unread(notification_id, user_id))
    return OperationResponse(success=True)


@router.delete("/{notification_id}", response_model=OperationResponse)
async def delete_notification(
    notification_id: str, user_id: UserId, notifications: Notifications
):
    _ensure_success(await notifications.delete_notification(notification_id, user_id))
    return OperationResponse(success=True)
