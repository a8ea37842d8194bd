"""
Store interfaces.

Route handlers only ever talk to these abstract types, obtained through
the ``get_stores`` dependency. The in-memory implementations in
``mentora.stores.memory`` back the running service; a persistent
implementation only needs to subclass these and be returned from
``get_stores``.

Consistency model: none. Implementations are not required to isolate
concurrent writers to the same key (last write wins).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from mentora.stores.models import ConversationTurn, Group, Notification, User


class UserStore(ABC):
    @abstractmethod
    def get(self, user_id: str) -> User | None: ...

    @abstractmethod
    def upsert(self, user: User) -> User:
        """Insert or replace ``user``, keeping the original ``created_at``."""

    @abstractmethod
    def search(self, query: str, limit: int = 10) -> list[User]:
        """Case-insensitive substring match over name and email."""


class ConversationStore(ABC):
    @abstractmethod
    def append(self, user_id: str, chat_id: str, *turns: ConversationTurn) -> None:
        """Append turns in order, then evict the oldest beyond the retention cap."""

    @abstractmethod
    def list(self, user_id: str, chat_id: str) -> list[ConversationTurn]:
        """Return the retained turns oldest first, or [] for an unknown chat."""


class FileTextStore(ABC):
    @abstractmethod
    def append(self, user_id: str, filename: str, text: str) -> None: ...

    @abstractmethod
    def get(self, user_id: str) -> str:
        """Return the user's accumulated buffer, or an empty string."""


class SettingsStore(ABC):
    @abstractmethod
    def get(self, user_id: str) -> dict[str, Any]:
        """Return stored settings, or a copy of the defaults."""

    @abstractmethod
    def merge(self, user_id: str, patch: dict[str, Any]) -> dict[str, Any]:
        """Shallow-merge ``patch`` over the current record and return the result."""


class NotificationStore(ABC):
    @abstractmethod
    def add(self, user_id: str, notification: Notification) -> Notification: ...

    @abstractmethod
    def list(self, user_id: str) -> list[Notification]:
        """Return the user's notifications, newest first."""

    @abstractmethod
    def get(self, user_id: str, notification_id: str) -> Notification | None: ...

    @abstractmethod
    def mark_read(self, user_id: str, notification_id: str) -> Notification | None:
        """Flip the read flag. Returns None (and does nothing) if absent."""


class GroupStore(ABC):
    @abstractmethod
    def create(self, name: str, owner_id: str) -> Group: ...

    @abstractmethod
    def get(self, group_id: str) -> Group | None: ...

    @abstractmethod
    def add_member(self, group_id: str, user_id: str) -> Group | None:
        """Add ``user_id`` to the group if not already a member."""


@dataclass
class StoreBundle:
    """One of each store, handed to route handlers as a single dependency."""

    users: UserStore
    conversations: ConversationStore
    files: FileTextStore
    settings: SettingsStore
    notifications: NotificationStore
    groups: GroupStore
