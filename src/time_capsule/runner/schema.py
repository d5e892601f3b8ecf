# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Data transfer objects for runner input/output.

These Pydantic models define the JSON script format accepted on stdin
and the report written to stdout.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from time_capsule.paradox import PARADOX_WINDOW


class ContractConfigSchema(BaseModel):
    """Configuration of the contract the script runs against.

    Attributes:
        owner: Identity allowed to advance time
        name: Namespace prefix for the contract's state
        paradox_window: Maximum distance into the past a message may target
    """

    owner: str
    name: str = "time_capsule"
    paradox_window: int = Field(default=PARADOX_WINDOW, ge=0)


class CallSchema(BaseModel):
    """A single contract call.

    Attributes:
        op: Operation name (e.g., "send_message", "advance_time")
        args: Keyword arguments for the operation
    """

    op: str
    args: dict[str, Any] = Field(default_factory=dict)


class OperationArgs(BaseModel):
    """Base for per-operation argument models.

    Strict: a JSON float or string never stands in for an integer, and
    unknown arguments are rejected.
    """

    model_config = ConfigDict(strict=True, extra="forbid")


class SendMessageArgs(OperationArgs):
    sender: str
    content: str
    target_time: int


class GetMessageArgs(OperationArgs):
    message_id: int


class GetUserMessagesArgs(OperationArgs):
    sender: str


class AdvanceTimeArgs(OperationArgs):
    caller: str
    delta: int


class NoArgs(OperationArgs):
    pass


class ScriptInput(BaseModel):
    """Complete script read from stdin.

    Attributes:
        contract: Contract configuration
        calls: Calls to replay, in order
    """

    contract: ContractConfigSchema
    calls: list[CallSchema] = Field(default_factory=list)


class CallResultSchema(BaseModel):
    """Outcome of one replayed call.

    Attributes:
        op: Operation that was called
        success: Whether the call went through
        result: Returned value (on success)
        error: Error message (on failure)
        error_kind: ErrorKind member name (on failure)
    """

    op: str
    success: bool
    result: Any = None
    error: str = ""
    error_kind: str = ""


class ScriptOutput(BaseModel):
    """Complete report written to stdout.

    The runner always writes valid JSON matching this schema, even when
    the script itself could not be run.

    Attributes:
        success: Whether every call succeeded
        results: Per-call outcomes, in call order
        snapshot: Contract state after the last call
        error: Error message (on script failure)
        error_type: Error class name (on script failure)
    """

    success: bool
    results: list[CallResultSchema] = Field(default_factory=list)
    snapshot: dict[str, Any] | None = None
    error: str = ""
    error_type: str = ""
