"""Dict-backed store implementations. Contents are lost on restart."""

import logging
from typing import Any

from mentora.stores.base import (
    ConversationStore,
    FileTextStore,
    GroupStore,
    NotificationStore,
    SettingsStore,
    StoreBundle,
    UserStore,
)
from mentora.stores.models import (
    DEFAULT_SETTINGS,
    ConversationTurn,
    Group,
    Notification,
    User,
    utcnow,
)

logger = logging.getLogger(__name__)


class InMemoryUserStore(UserStore):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    def get(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    def upsert(self, user: User) -> User:
        existing = self._users.get(user.id)
        if existing is not None:
            user.created_at = existing.created_at
        self._users[user.id] = user
        return user

    def search(self, query: str, limit: int = 10) -> list[User]:
        needle = query.lower()
        matches = [
            user
            for user in self._users.values()
            if needle in user.name.lower() or needle in user.email.lower()
        ]
        return matches[:limit]


class InMemoryConversationStore(ConversationStore):
    def __init__(self, retention: int = 20) -> None:
        if retention < 2:
            raise ValueError("retention must keep at least one user/assistant pair")
        self.retention = retention
        self._chats: dict[str, dict[str, list[ConversationTurn]]] = {}

    def append(self, user_id: str, chat_id: str, *turns: ConversationTurn) -> None:
        history = self._chats.setdefault(user_id, {}).setdefault(chat_id, [])
        history.extend(turns)
        if len(history) > self.retention:
            del history[: len(history) - self.retention]

    def list(self, user_id: str, chat_id: str) -> list[ConversationTurn]:
        return list(self._chats.get(user_id, {}).get(chat_id, []))


class InMemoryFileTextStore(FileTextStore):
    # Buffers grow without bound; see DESIGN.md.

    def __init__(self) -> None:
        self._buffers: dict[str, str] = {}

    def append(self, user_id: str, filename: str, text: str) -> None:
        block = f"\n\n=== FILE: {filename} ===\n{text}"
        self._buffers[user_id] = self._buffers.get(user_id, "") + block

    def get(self, user_id: str) -> str:
        return self._buffers.get(user_id, "")


class InMemorySettingsStore(SettingsStore):
    def __init__(self) -> None:
        self._settings: dict[str, dict[str, Any]] = {}

    def get(self, user_id: str) -> dict[str, Any]:
        return dict(self._settings.get(user_id, DEFAULT_SETTINGS))

    def merge(self, user_id: str, patch: dict[str, Any]) -> dict[str, Any]:
        merged = {
            **self._settings.get(user_id, DEFAULT_SETTINGS),
            **patch,
            "updatedAt": utcnow().isoformat(),
        }
        self._settings[user_id] = merged
        return dict(merged)


class InMemoryNotificationStore(NotificationStore):
    def __init__(self) -> None:
        self._notifications: dict[str, list[Notification]] = {}

    def add(self, user_id: str, notification: Notification) -> Notification:
        self._notifications.setdefault(user_id, []).append(notification)
        return notification

    def list(self, user_id: str) -> list[Notification]:
        return sorted(
            self._notifications.get(user_id, []),
            key=lambda n: n.timestamp,
            reverse=True,
        )

    def get(self, user_id: str, notification_id: str) -> Notification | None:
        for notification in self._notifications.get(user_id, []):
            if notification.id == notification_id:
                return notification
        return None

    def mark_read(self, user_id: str, notification_id: str) -> Notification | None:
        notification = self.get(user_id, notification_id)
        if notification is not None:
            notification.read = True
        return notification


class InMemoryGroupStore(GroupStore):
    def __init__(self) -> None:
        self._groups: dict[str, Group] = {}

    def create(self, name: str, owner_id: str) -> Group:
        group = Group(name=name, owner_id=owner_id, members=[owner_id])
        self._groups[group.id] = group
        logger.info("Created group %s (%s)", group.id, name)
        return group

    def get(self, group_id: str) -> Group | None:
        return self._groups.get(group_id)

    def add_member(self, group_id: str, user_id: str) -> Group | None:
        group = self._groups.get(group_id)
        if group is None:
            return None
        if user_id not in group.members:
            group.members.append(user_id)
        return group


def create_memory_stores(retention: int = 20) -> StoreBundle:
    """Build a fresh bundle of empty in-memory stores."""
    return StoreBundle(
        users=InMemoryUserStore(),
        conversations=InMemoryConversationStore(retention=retention),
        files=InMemoryFileTextStore(),
        settings=InMemorySettingsStore(),
        notifications=InMemoryNotificationStore(),
        groups=InMemoryGroupStore(),
    )
