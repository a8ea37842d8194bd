"""Group and invitation schemas."""

from datetime import datetime

from pydantic import Field

from mentora.schemas.base import BaseSchema, SuccessResponse
from mentora.schemas.notifications import NotificationRead


class GroupCreate(BaseSchema):
    name: str = Field(..., min_length=1, max_length=255)
    owner_id: str = Field(..., min_length=1)


class GroupRead(BaseSchema):
    id: str
    name: str
    owner_id: str
    members: list[str]
    created_at: datetime


class GroupResponse(SuccessResponse):
    group: GroupRead


class GroupInviteRequest(BaseSchema):
    group_id: str
    invited_user_id: str
    inviter_user_id: str | None = None


class GroupInviteResponse(SuccessResponse):
    notification: NotificationRead


class AcceptInviteRequest(BaseSchema):
    notification_id: str
    user_id: str
