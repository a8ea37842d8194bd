"""Notification routes."""

from fastapi import APIRouter

from mentora.api.deps import Stores
from mentora.schemas.notifications import (
    MarkReadRequest,
    MarkReadResponse,
    NotificationListResponse,
    NotificationRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("/{user_id}", response_model=NotificationListResponse)
async def list_notifications(user_id: str, stores: Stores) -> NotificationListResponse:
    """List a user's notifications, newest first."""
    return NotificationListResponse(
        notifications=[NotificationRead.model_validate(n) for n in stores.notifications.list(user_id)],
    )


@router.post("/{notification_id}/read", response_model=MarkReadResponse)
async def mark_notification_read(
    notification_id: str,
    request: MarkReadRequest,
    stores: Stores,
) -> MarkReadResponse:
    """Mark a notification as read. Unknown ids succeed with ``notification: null``."""
    notification = stores.notifications.mark_read(request.user_id, notification_id)
    return MarkReadResponse(
        notification=NotificationRead.model_validate(notification) if notification else None,
    )
