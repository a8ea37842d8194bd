"""Notification schemas."""

from datetime import datetime
from typing import Any

from mentora.schemas.base import BaseSchema, SuccessResponse


class NotificationRead(BaseSchema):
    id: str
    type: str
    title: str
    message: str
    data: dict[str, Any]
    timestamp: datetime
    read: bool


class NotificationListResponse(SuccessResponse):
    notifications: list[NotificationRead]


class MarkReadRequest(BaseSchema):
    user_id: str


class MarkReadResponse(SuccessResponse):
    # None when the notification does not exist (marking is a no-op)
    notification: NotificationRead | None
