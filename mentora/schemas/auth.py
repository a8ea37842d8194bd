"""Authentication schemas."""

from pydantic import EmailStr, Field

from mentora.schemas.base import BaseSchema, SuccessResponse
from mentora.schemas.user import UserRead


class GoogleUserInfo(BaseSchema):
    """Profile the frontend received from Google Sign-In."""

    email: EmailStr
    name: str = Field(..., min_length=1, max_length=255)
    picture: str | None = None


class GoogleAuthRequest(BaseSchema):
    """Request schema for Google login."""

    google_token: str | None = Field(None, description="Google id_token from frontend")
    user_info: GoogleUserInfo


class LoginResponse(SuccessResponse):
    """Upserted user plus an opaque session token."""

    user: UserRead
    token: str
    expires_in: int = Field(..., description="Token expiry in seconds")
