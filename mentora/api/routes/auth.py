"""
Authentication Routes

Endpoints:
- POST /api/auth/google (alias /api/auth) - Upsert user, issue session token
- POST /api/auth/logout - Clear session cookie
- GET /api/auth/me - Get current user profile

Auth Flow:
1. Frontend performs Google Sign-In and receives an id_token + profile
2. Frontend POSTs {googleToken, userInfo} here
3. If GOOGLE_CLIENT_ID is configured, the id_token is verified with
   Google's public keys and its claims override the posted profile;
   otherwise the profile is trusted as-is (development mode)
4. Backend upserts the user keyed by email and returns a JWT
   (in cookie and response body)
"""

import logging

from fastapi import APIRouter, HTTPException, Response, status
from google.auth.transport import requests as google_requests
from google.oauth2 import id_token as google_id_token

from mentora.api.deps import CurrentUser, Stores, create_access_token
from mentora.config import get_settings
from mentora.schemas.auth import GoogleAuthRequest, GoogleUserInfo, LoginResponse
from mentora.schemas.user import UserRead
from mentora.stores.models import User, utcnow

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])
settings = get_settings()


def _verified_profile(request: GoogleAuthRequest) -> GoogleUserInfo:
    """
    Return the profile to trust for this login.

    Raises 401 if verification is configured and the token is missing or
    fails Google's checks (signature, expiry, audience, issuer).
    """
    if not settings.google_client_id:
        return request.user_info

    if not request.google_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Google token is required",
        )

    try:
        idinfo = google_id_token.verify_oauth2_token(
            request.google_token,
            google_requests.Request(),
            settings.google_client_id,
        )
        if idinfo.get("iss") not in ["accounts.google.com", "https://accounts.google.com"]:
            raise ValueError("Invalid issuer")
        # Only trust verified emails for the account key
        if not idinfo.get("email") or not idinfo.get("email_verified", False):
            raise ValueError("Email not verified")
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid Google id_token: {e}",
        )

    return GoogleUserInfo(
        email=idinfo["email"],
        name=idinfo.get("name") or request.user_info.name,
        picture=idinfo.get("picture") or request.user_info.picture,
    )


@router.post("/google", response_model=LoginResponse)
@router.post("", response_model=LoginResponse)
async def google_login(
    request: GoogleAuthRequest,
    response: Response,
    stores: Stores,
) -> LoginResponse:
    """
    Create or update the user and start a session.

    The user's id is their email. Re-logging in refreshes name, picture
    and last-login time but keeps the creation time and settings.
    """
    profile = _verified_profile(request)
    user_id = str(profile.email)

    existing = stores.users.get(user_id)
    user = stores.users.upsert(
        User(
            id=user_id,
            email=user_id,
            name=profile.name,
            picture=profile.picture,
            last_login=utcnow(),
            settings=existing.settings if existing else stores.settings.get(user_id),
        )
    )

    logger.info("User %s logged in (%s)", user_id, "returning" if existing else "new")

    access_token = create_access_token(user.id)
    expires_in = settings.jwt_expire_minutes * 60

    response.set_cookie(
        key="access_token",
        value=access_token,
        httponly=True,
        secure=settings.cookie_cross_domain or settings.environment != "development",
        samesite="none" if settings.cookie_cross_domain else "lax",
        max_age=expires_in,
    )

    return LoginResponse(
        user=UserRead.model_validate(user),
        token=access_token,
        expires_in=expires_in,
    )


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(response: Response) -> None:
    """
    Clear the session cookie.

    A token stored elsewhere by the client stays valid until expiry.
    """
    response.delete_cookie(
        key="access_token",
        httponly=True,
        secure=settings.cookie_cross_domain or settings.environment != "development",
        samesite="none" if settings.cookie_cross_domain else "lax",
    )


@router.get("/me", response_model=UserRead)
async def get_me(current_user: CurrentUser) -> UserRead:
    """Get the profile behind the current session token."""
    return UserRead.model_validate(current_user)
