"""Notification API schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from pinkbeam.domain.enums import NotificationType


class NotificationResponse(BaseModel):
    """Notification as returned to its owner."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    type: NotificationType
    title: str
    message: str
    data: dict[str, Any] = Field(default_factory=dict)
    is_read: bool
    read_at: datetime | None = None
    created_at: datetime | None = None


class NotificationPageMeta(BaseModel):
    total: int
    unread: int
    limit: int
    offset: int
    has_more: bool


class NotificationListResponse(BaseModel):
    success: bool = True
    data: list[NotificationResponse]
    meta: NotificationPageMeta


class NotificationBulkActionRequest(BaseModel):
    """Body for PATCH /notifications. Only "markAllRead" is supported."""

    action: str | None = None


class UnreadCountResponse(BaseModel):
    success: bool = True
    count: int


class OperationResponse(BaseModel):
    success: bool
    error: str | None = None
