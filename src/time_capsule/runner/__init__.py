# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Runner submodule for replaying contract call scripts.

Usage:
    python -m time_capsule.runner < script.json > output.json

Exports:
    Executor: Replays a script against a fresh contract
    ScriptInput: Input schema read from stdin
    ScriptOutput: Output schema written to stdout
"""

from .executor import Executor, ScriptError
from .schema import (
    AdvanceTimeArgs,
    CallResultSchema,
    CallSchema,
    ContractConfigSchema,
    GetMessageArgs,
    GetUserMessagesArgs,
    NoArgs,
    OperationArgs,
    ScriptInput,
    ScriptOutput,
    SendMessageArgs,
)

__all__ = [
    "AdvanceTimeArgs",
    "CallResultSchema",
    "CallSchema",
    "ContractConfigSchema",
    "Executor",
    "GetMessageArgs",
    "GetUserMessagesArgs",
    "NoArgs",
    "OperationArgs",
    "ScriptError",
    "ScriptInput",
    "ScriptOutput",
    "SendMessageArgs",
]
