"""Store ABC — namespaced key-value storage for contract state."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Store(ABC):
    """Abstract base for all storage backends.

    A contract splits its state across a few namespaces (messages, the
    per-sender index, the clock).  Values are plain ``dict[str, Any]``
    records keyed by ``(namespace, key)``; backends must keep keys in
    insertion order so that listings are stable.
    """

    @abstractmethod
    async def get(self, namespace: str, key: str) -> dict[str, Any] | None:
        """Return the stored record, or ``None`` if not found."""
        ...

    @abstractmethod
    async def set(self, namespace: str, key: str, value: dict[str, Any]) -> None:
        """Create or overwrite a record."""
        ...

    @abstractmethod
    async def delete(self, namespace: str, key: str) -> None:
        """Delete a record.  No-op if the key does not exist."""
        ...

    @abstractmethod
    async def list_keys(self, namespace: str) -> list[str]:
        """Return all keys within a namespace, oldest first."""
        ...

    @abstractmethod
    async def exists(self, namespace: str, key: str) -> bool:
        """Return ``True`` if the key exists in the namespace."""
        ...

    @abstractmethod
    async def count(self, namespace: str) -> int:
        """Return the number of records in a namespace."""
        ...

    @abstractmethod
    async def clear_namespace(self, namespace: str) -> None:
        """Delete all records within a namespace."""
        ...
