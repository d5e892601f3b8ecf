# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Executor for replaying call scripts against a contract.

Orchestrates the full flow:
1. Build the contract from configuration
2. Replay each call in order
3. Translate results to the output schema
4. Attach a final snapshot of the contract
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from pydantic import ValidationError

from time_capsule.contract import TimeCapsuleContract
from time_capsule.exceptions import ContractConfigError
from time_capsule.message import MessageView
from time_capsule.result import ContractResult
from time_capsule.stores import Store

from .schema import (
    AdvanceTimeArgs,
    CallResultSchema,
    CallSchema,
    GetMessageArgs,
    GetUserMessagesArgs,
    NoArgs,
    OperationArgs,
    ScriptInput,
    ScriptOutput,
    SendMessageArgs,
)

logger = logging.getLogger(__name__)


class ScriptError(Exception):
    """Raised when a script contains a call that cannot be made."""

    pass


class Executor:
    """Replays a script of contract calls.

    Operation names map to a contract method and a strict argument model
    through a class-level registry.  Arguments that fail validation are
    reported on that call; the rest of the script still runs.

    Pass a store to the constructor to inspect state after a run.  An
    injected store carries state over between runs that use the same
    contract name, so ids and the clock continue where the last run left
    them.

    Example:
        executor = Executor()
        output = await executor.execute(script)
    """

    _operations: ClassVar[dict[str, tuple[str, type[OperationArgs]]]] = {
        "send_message": ("send_message", SendMessageArgs),
        "get_message": ("get_message", GetMessageArgs),
        "get_user_messages": ("get_user_messages", GetUserMessagesArgs),
        "advance_time": ("advance_time", AdvanceTimeArgs),
        "get_current_time": ("get_current_time", NoArgs),
    }

    def __init__(self, store: Store | None = None) -> None:
        self._injected_store = store

    @classmethod
    def operations(cls) -> list[str]:
        """Return the operation names a script may use."""
        return list(cls._operations)

    async def execute(self, script: ScriptInput) -> ScriptOutput:
        """Run *script* and report on it.

        Never raises: any failure becomes a ``ScriptOutput`` with
        ``success=False`` and the error details filled in.
        """
        try:
            return await self._execute_internal(script)
        except ContractConfigError as e:
            return ScriptOutput(success=False, error=str(e), error_type="ContractConfigError")
        except Exception as e:
            logger.exception("Unexpected failure while running script")
            return ScriptOutput(success=False, error=str(e), error_type=type(e).__name__)

    async def _execute_internal(self, script: ScriptInput) -> ScriptOutput:
        contract = TimeCapsuleContract(
            script.contract.owner,
            store=self._injected_store,
            name=script.contract.name,
            paradox_window=script.contract.paradox_window,
        )

        results: list[CallResultSchema] = []
        try:
            for call in script.calls:
                results.append(await self._run_call(contract, call))
        except ScriptError as e:
            # Calls made so far have changed state; report them with it
            return ScriptOutput(
                success=False,
                results=results,
                snapshot=await contract.export(),
                error=str(e),
                error_type="ScriptError",
            )

        return ScriptOutput(
            success=all(r.success for r in results),
            results=results,
            snapshot=await contract.export(),
        )

    async def _run_call(self, contract: TimeCapsuleContract, call: CallSchema) -> CallResultSchema:
        entry = self._operations.get(call.op)
        if entry is None:
            available = ", ".join(sorted(self._operations))
            raise ScriptError(f"Unknown operation: '{call.op}'. Available operations: {available}")

        method_name, args_model = entry
        try:
            args = args_model.model_validate(call.args)
        except ValidationError as e:
            return CallResultSchema(
                op=call.op,
                success=False,
                error=self._describe(e),
                error_kind="INVALID_ARGUMENTS",
            )

        outcome = await getattr(contract, method_name)(**args.model_dump())

        if isinstance(outcome, ContractResult):
            return CallResultSchema(
                op=call.op,
                success=outcome.success,
                result=self._to_json(outcome.value),
                error=outcome.reason,
                error_kind=outcome.error.name if outcome.error is not None else "",
            )
        return CallResultSchema(op=call.op, success=True, result=self._to_json(outcome))

    @staticmethod
    def _describe(error: ValidationError) -> str:
        return "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'args'}: {err['msg']}"
            for err in error.errors()
        )

    @staticmethod
    def _to_json(value: Any) -> Any:
        if isinstance(value, MessageView):
            return value.to_dict()
        return value
