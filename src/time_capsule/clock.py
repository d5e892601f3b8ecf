"""LogicalClock — the contract's owner-gated notion of "now"."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from time_capsule.result import ContractResult, ErrorKind

if TYPE_CHECKING:
    from time_capsule.stores.base import Store

logger = logging.getLogger(__name__)

_KEY = "current_time"


class LogicalClock:
    """Integer clock persisted in a store, starting at zero.

    Only the owner fixed at construction may move it.  ``advance`` accepts
    any integer delta, including zero and negative values.

    Parameters:
        owner:     Identity allowed to advance the clock.
        store:     Backend holding the clock value.
        namespace: Store namespace for the clock record.
    """

    def __init__(self, *, owner: str, store: Store, namespace: str = "clock") -> None:
        self._owner = owner
        self._store = store
        self._namespace = namespace

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def namespace(self) -> str:
        return self._namespace

    async def now(self) -> int:
        state = await self._store.get(self._namespace, _KEY)
        return int(state["value"]) if state else 0

    async def advance(self, caller: str, delta: int) -> ContractResult:
        if caller != self._owner:
            logger.info("Rejected clock advance by non-owner %r", caller)
            return ContractResult.fail(ErrorKind.NOT_AUTHORIZED)

        new_time = await self.now() + delta
        await self._store.set(self._namespace, _KEY, {"value": new_time})

        # TODO: decide whether negative deltas should be rejected outright
        if delta < 0:
            logger.warning("Logical clock moved backwards by %d to %d", -delta, new_time)
        else:
            logger.debug("Logical clock advanced by %d to %d", delta, new_time)
        return ContractResult.ok(new_time)
