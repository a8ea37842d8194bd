"""Per-user settings routes."""

from typing import Any

from fastapi import APIRouter, Body

from mentora.api.deps import Stores
from mentora.schemas.settings import SettingsResponse

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/{user_id}", response_model=SettingsResponse)
async def get_user_settings(user_id: str, stores: Stores) -> SettingsResponse:
    """Get a user's settings, or the defaults if none were saved."""
    return SettingsResponse(settings=stores.settings.get(user_id))


@router.post("/{user_id}", response_model=SettingsResponse)
async def update_user_settings(
    user_id: str,
    stores: Stores,
    patch: dict[str, Any] = Body(...),
) -> SettingsResponse:
    """
    Shallow-merge the posted fields over the user's current settings.

    The user's embedded settings snapshot is refreshed too.
    """
    merged = stores.settings.merge(user_id, patch)

    user = stores.users.get(user_id)
    if user is not None:
        user.settings = dict(merged)

    return SettingsResponse(settings=merged)
