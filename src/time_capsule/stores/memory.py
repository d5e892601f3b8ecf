"""InMemoryStore — dict-backed storage; the default for every contract."""

from __future__ import annotations

import copy
from collections import defaultdict
from typing import Any

from time_capsule.stores.base import Store


class InMemoryStore(Store):
    """In-memory store using nested dicts.  Data is lost on process exit.

    Records are deep-copied on the way in and out so callers can never
    reach into stored state.
    """

    def __init__(self) -> None:
        self._data: dict[str, dict[str, dict[str, Any]]] = defaultdict(dict)

    async def get(self, namespace: str, key: str) -> dict[str, Any] | None:
        value = self._data[namespace].get(key)
        return copy.deepcopy(value) if value is not None else None

    async def set(self, namespace: str, key: str, value: dict[str, Any]) -> None:
        self._data[namespace][key] = copy.deepcopy(value)

    async def delete(self, namespace: str, key: str) -> None:
        self._data[namespace].pop(key, None)

    async def list_keys(self, namespace: str) -> list[str]:
        return list(self._data[namespace].keys())

    async def exists(self, namespace: str, key: str) -> bool:
        return key in self._data[namespace]

    async def count(self, namespace: str) -> int:
        return len(self._data[namespace])

    async def clear_namespace(self, namespace: str) -> None:
        self._data.pop(namespace, None)
