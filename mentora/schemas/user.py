"""User schemas."""

from datetime import datetime
from typing import Any

from mentora.schemas.base import BaseSchema, SuccessResponse


class UserRead(BaseSchema):
    """Full user record, including the embedded settings snapshot."""

    id: str
    email: str
    name: str
    picture: str | None = None
    created_at: datetime
    last_login: datetime
    settings: dict[str, Any]


class UserSummary(BaseSchema):
    """Public subset returned by user search."""

    id: str
    name: str
    email: str
    picture: str | None = None


class UserSearchResponse(SuccessResponse):
    users: list[UserSummary]
