"""Pydantic schemas for API request/response validation."""

from mentora.schemas.user import UserRead, UserSearchResponse, UserSummary
from mentora.schemas.auth import GoogleAuthRequest, GoogleUserInfo, LoginResponse
from mentora.schemas.chat import (
    ChatRequest,
    ChatResponse,
    ConversationHistoryResponse,
    PersonaListResponse,
    PersonaRead,
)
from mentora.schemas.story import StoryRequest, StoryResponse
from mentora.schemas.notifications import (
    MarkReadRequest,
    MarkReadResponse,
    NotificationListResponse,
    NotificationRead,
)
from mentora.schemas.groups import (
    AcceptInviteRequest,
    GroupCreate,
    GroupInviteRequest,
    GroupInviteResponse,
    GroupRead,
    GroupResponse,
)
from mentora.schemas.settings import SettingsResponse
from mentora.schemas.uploads import UploadedFileRead, UploadResponse

__all__ = [
    # User
    "UserRead",
    "UserSearchResponse",
    "UserSummary",
    # Auth
    "GoogleAuthRequest",
    "GoogleUserInfo",
    "LoginResponse",
    # Chat
    "ChatRequest",
    "ChatResponse",
    "ConversationHistoryResponse",
    "PersonaListResponse",
    "PersonaRead",
    # Story
    "StoryRequest",
    "StoryResponse",
    # Notifications
    "MarkReadRequest",
    "MarkReadResponse",
    "NotificationListResponse",
    "NotificationRead",
    # Groups
    "AcceptInviteRequest",
    "GroupCreate",
    "GroupInviteRequest",
    "GroupInviteResponse",
    "GroupRead",
    "GroupResponse",
    # Settings
    "SettingsResponse",
    # Uploads
    "UploadedFileRead",
    "UploadResponse",
]
