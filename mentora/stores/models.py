"""
In-memory record types.

These play the role ORM models would in a database-backed deployment:
stores hand them out and API schemas read them with ``model_validate``
(``from_attributes=True``).
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Literal
from uuid import uuid4


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


DEFAULT_SETTINGS: dict[str, Any] = {
    "theme": "light",
    "fontSize": "medium",
    "customColor": "#3B82F6",
    "notifications": True,
    "language": "en",
    "autoRead": False,
    "voiceSpeed": "normal",
}


@dataclass
class User:
    """A user keyed by email address."""

    id: str
    email: str
    name: str
    picture: str | None = None
    created_at: datetime = field(default_factory=utcnow)
    last_login: datetime = field(default_factory=utcnow)
    settings: dict[str, Any] = field(default_factory=lambda: dict(DEFAULT_SETTINGS))


@dataclass
class ConversationTurn:
    role: Literal["user", "assistant"]
    content: str
    timestamp: datetime = field(default_factory=utcnow)
    lecturer: str | None = None


@dataclass
class Notification:
    type: str
    title: str
    message: str
    data: dict[str, Any] = field(default_factory=dict)
    id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=utcnow)
    read: bool = False


@dataclass
class Group:
    """A study group. ``members`` holds unique user ids in join order."""

    name: str
    owner_id: str
    members: list[str] = field(default_factory=list)
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=utcnow)
