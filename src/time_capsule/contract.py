"""TimeCapsuleContract — the public face of the simulation."""

from __future__ import annotations

import asyncio
import logging
import os
from typing import TYPE_CHECKING, Any

from time_capsule.clock import LogicalClock
from time_capsule.exceptions import ContractConfigError
from time_capsule.message_store import MessageStore
from time_capsule.paradox import PARADOX_WINDOW
from time_capsule.stores.memory import InMemoryStore

if TYPE_CHECKING:
    from time_capsule.result import ContractResult
    from time_capsule.stores.base import Store

logger = logging.getLogger(__name__)

OWNER_ENV_VAR = "TIME_CAPSULE_OWNER"


class TimeCapsuleContract:
    """Holds the message store and the logical clock of one contract.

    Every public call runs under a single lock, so calls take effect
    strictly one after another in the order they were made.  Failed calls
    come back as :class:`ContractResult` values; nothing is raised for
    them.

    Parameters:
        owner:          Identity allowed to advance time.  Falls back to the
                        ``TIME_CAPSULE_OWNER`` environment variable.
        store:          State backend.  Defaults to :class:`InMemoryStore`.
        name:           Namespace prefix, so several contracts can share a
                        store.
        paradox_window: Maximum distance into the past a message may target.
    """

    def __init__(
        self,
        owner: str | None = None,
        *,
        store: Store | None = None,
        name: str = "time_capsule",
        paradox_window: int = PARADOX_WINDOW,
    ) -> None:
        resolved_owner = owner if owner is not None else os.getenv(OWNER_ENV_VAR, "")
        if not resolved_owner:
            raise ContractConfigError(
                "owner", f"an owner identity is required (pass it or set {OWNER_ENV_VAR})"
            )
        if paradox_window < 0:
            raise ContractConfigError("paradox_window", "must not be negative")

        self._name = name
        self._store: Store = store or InMemoryStore()
        self._clock = LogicalClock(
            owner=resolved_owner,
            store=self._store,
            namespace=f"{name}:clock",
        )
        self._messages = MessageStore(
            self._store,
            namespace=name,
            paradox_window=paradox_window,
        )
        self._lock = asyncio.Lock()
        logger.debug("Created contract %r owned by %r", name, resolved_owner)

    # ── operations ───────────────────────────────────────────

    async def send_message(self, sender: str, content: str, target_time: int) -> ContractResult:
        """Deposit *content* for reading at *target_time*.  Returns the new id."""
        async with self._lock:
            now = await self._clock.now()
            return await self._messages.send(sender, content, target_time, now=now)

    async def get_message(self, message_id: int) -> ContractResult:
        """Return a :class:`MessageView` with availability as of now."""
        async with self._lock:
            now = await self._clock.now()
            return await self._messages.get(message_id, now=now)

    async def get_user_messages(self, sender: str) -> list[int]:
        async with self._lock:
            return await self._messages.list_by_user(sender)

    async def advance_time(self, caller: str, delta: int) -> ContractResult:
        """Move the clock by *delta*.  Only the owner may do this."""
        async with self._lock:
            return await self._clock.advance(caller, delta)

    # ── introspection ────────────────────────────────────────

    async def get_current_time(self) -> int:
        async with self._lock:
            return await self._clock.now()

    async def message_count(self) -> int:
        async with self._lock:
            return await self._messages.count()

    async def export(self) -> dict[str, Any]:
        """Return a JSON-serializable snapshot of the whole contract."""
        async with self._lock:
            snapshot = await self._messages.snapshot()
            return {
                "name": self._name,
                "owner": self.owner,
                "current_time": await self._clock.now(),
                "paradox_window": self.paradox_window,
                "message_count": len(snapshot["messages"]),
                **snapshot,
            }

    @property
    def owner(self) -> str:
        return self._clock.owner

    @property
    def name(self) -> str:
        return self._name

    @property
    def paradox_window(self) -> int:
        return self._messages.paradox_window

    @property
    def store(self) -> Store:
        return self._store
