"""
FastAPI Dependencies.

Key patterns:
1. get_stores: the single entry point to user/conversation/file/etc. state.
   Tests (or a persistent deployment) swap it via app.dependency_overrides.
2. get_completion_gateway: shared provider client, also overridable.
3. get_current_user: resolves a session JWT to a stored user.

Security model:
- Session tokens are JWTs in an HttpOnly cookie or Authorization header.
- Identity is only as strong as the login call; Google id_token
  verification happens there when a client id is configured.
"""

from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Annotated

from fastapi import Cookie, Depends, Header, HTTPException, status
from jose import JWTError, jwt

from mentora.config import get_settings
from mentora.services.chat_service import ChatService
from mentora.services.completion import CompletionGateway
from mentora.services.story_service import StoryService
from mentora.stores import StoreBundle, create_memory_stores
from mentora.stores.models import User

settings = get_settings()


# =============================================================================
# STATE & SERVICES
# =============================================================================


@lru_cache
def get_stores() -> StoreBundle:
    """Process-wide in-memory stores."""
    return create_memory_stores(retention=settings.conversation_retention)


@lru_cache
def get_completion_gateway() -> CompletionGateway:
    return CompletionGateway(settings)


def get_chat_service(
    gateway: Annotated[CompletionGateway, Depends(get_completion_gateway)],
) -> ChatService:
    return ChatService(settings, gateway)


def get_story_service(
    gateway: Annotated[CompletionGateway, Depends(get_completion_gateway)],
) -> StoryService:
    return StoryService(settings, gateway)


Stores = Annotated[StoreBundle, Depends(get_stores)]
Chat = Annotated[ChatService, Depends(get_chat_service)]
Storyteller = Annotated[StoryService, Depends(get_story_service)]


# =============================================================================
# JWT UTILITIES
# =============================================================================


def create_access_token(user_id: str) -> str:
    """
    Create a JWT session token for a user.

    Token payload contains:
    - sub: user id (the user's email)
    - exp: expiration timestamp
    """
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.jwt_expire_minutes)
    payload = {
        "sub": user_id,
        "exp": expire,
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> str | None:
    """
    Decode and validate a JWT session token.

    Returns user_id if valid, None if invalid/expired.
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError:
        return None
    user_id = payload.get("sub")
    if not isinstance(user_id, str):
        return None
    return user_id


# =============================================================================
# AUTHENTICATION DEPENDENCIES
# =============================================================================


async def get_token_from_request(
    authorization: Annotated[str | None, Header()] = None,
    access_token: Annotated[str | None, Cookie()] = None,
) -> str:
    """
    Extract the session token from request.

    Supports two methods (in order of preference):
    1. HttpOnly cookie named 'access_token'
    2. Authorization header: 'Bearer <token>'
    """
    if access_token:
        return access_token

    if authorization:
        parts = authorization.split()
        if len(parts) == 2 and parts[0].lower() == "bearer":
            return parts[1]

    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    token: Annotated[str, Depends(get_token_from_request)],
    stores: Stores,
) -> User:
    """
    Validate the session token and return the stored user.

    Raises 401 if the token is missing, invalid, or expired, or if the
    user is no longer in the store (e.g. after a restart).
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    user_id = decode_access_token(token)
    if user_id is None:
        raise credentials_exception

    user = stores.users.get(user_id)
    if user is None:
        raise credentials_exception

    return user


CurrentUser = Annotated[User, Depends(get_current_user)]
