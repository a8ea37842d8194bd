"""Storage layer: abstract stores plus the in-memory implementation."""

from mentora.stores.base import StoreBundle
from mentora.stores.memory import create_memory_stores

__all__ = ["StoreBundle", "create_memory_stores"]
