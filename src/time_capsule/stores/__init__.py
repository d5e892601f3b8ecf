"""Storage backends for contract state."""

from time_capsule.stores.base import Store
from time_capsule.stores.memory import InMemoryStore

__all__ = ["InMemoryStore", "Store"]
