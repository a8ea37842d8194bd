"""API routes package."""

from mentora.api.routes import (
    auth,
    chat,
    groups,
    notifications,
    settings,
    story,
    uploads,
    users,
)

__all__ = [
    "auth",
    "chat",
    "groups",
    "notifications",
    "settings",
    "story",
    "uploads",
    "users",
]
