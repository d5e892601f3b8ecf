"""MessageStore — append-only message records plus the per-sender index."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from time_capsule.exceptions import StoreError
from time_capsule.message import Message, MessageView
from time_capsule.paradox import PARADOX_WINDOW, is_paradox
from time_capsule.result import ContractResult, ErrorKind

if TYPE_CHECKING:
    from time_capsule.stores.base import Store

logger = logging.getLogger(__name__)

_NEXT_ID_KEY = "next_message_id"


class MessageStore:
    """Owns every message record.

    Ids are allocated from a counter starting at zero and are never reused.
    All validation happens before the first write, so a rejected send
    leaves the store exactly as it was.

    Parameters:
        store:          Backend holding the records.
        namespace:      Prefix for the three namespaces this class uses.
        paradox_window: How far into the past a message may be addressed.
    """

    def __init__(
        self,
        store: Store,
        *,
        namespace: str = "time_capsule",
        paradox_window: int = PARADOX_WINDOW,
    ) -> None:
        self._store = store
        self._prefix = namespace
        self.paradox_window = paradox_window

    @property
    def messages_ns(self) -> str:
        return f"{self._prefix}:messages"

    @property
    def index_ns(self) -> str:
        return f"{self._prefix}:user_messages"

    @property
    def counters_ns(self) -> str:
        return f"{self._prefix}:counters"

    # ── writes ───────────────────────────────────────────────

    async def send(
        self,
        sender: str,
        content: str,
        target_time: int,
        *,
        now: int,
    ) -> ContractResult:
        if not content:
            logger.info("Rejected empty message from %r", sender)
            return ContractResult.fail(ErrorKind.INVALID_INPUT)
        if is_paradox(now, target_time, self.paradox_window):
            logger.info(
                "Rejected paradoxical message from %r (now=%d, target=%d)",
                sender,
                now,
                target_time,
            )
            return ContractResult.fail(ErrorKind.PARADOX_DETECTED)

        message_id = await self._next_id()
        key = str(message_id)
        if await self._store.exists(self.messages_ns, key):
            raise StoreError("send", f"message id {message_id} is already taken")

        message = Message(
            sender=sender,
            content=content,
            send_time=now,
            target_time=target_time,
        )
        await self._store.set(self.messages_ns, key, message.to_dict())
        await self._store.set(self.counters_ns, _NEXT_ID_KEY, {"value": message_id + 1})

        ids = await self.list_by_user(sender)
        ids.append(message_id)
        await self._store.set(self.index_ns, sender, {"message_ids": ids})

        logger.debug("Stored message %d from %r for time %d", message_id, sender, target_time)
        return ContractResult.ok(message_id)

    # ── reads ────────────────────────────────────────────────

    async def get(self, message_id: int, *, now: int) -> ContractResult:
        data = await self._store.get(self.messages_ns, str(message_id))
        if data is None:
            return ContractResult.fail(ErrorKind.NOT_FOUND)
        return ContractResult.ok(MessageView.at(message_id, Message.from_dict(data), now))

    async def list_by_user(self, sender: str) -> list[int]:
        """Ids sent by *sender* in send order; empty for unknown senders."""
        state = await self._store.get(self.index_ns, sender)
        return list(state["message_ids"]) if state else []

    async def count(self) -> int:
        return await self._store.count(self.messages_ns)

    async def snapshot(self) -> dict[str, Any]:
        """Return every record and the full sender index."""
        messages: dict[str, Any] = {}
        for key in await self._store.list_keys(self.messages_ns):
            messages[key] = await self._store.get(self.messages_ns, key)

        index: dict[str, list[int]] = {}
        for sender in await self._store.list_keys(self.index_ns):
            index[sender] = await self.list_by_user(sender)

        return {"messages": messages, "user_messages": index}

    async def _next_id(self) -> int:
        state = await self._store.get(self.counters_ns, _NEXT_ID_KEY)
        return int(state["value"]) if state else 0
