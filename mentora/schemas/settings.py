"""User settings schemas."""

from typing import Any

from mentora.schemas.base import SuccessResponse


class SettingsResponse(SuccessResponse):
    # Free-form: defaults plus whatever keys the client has stored
    settings: dict[str, Any]
