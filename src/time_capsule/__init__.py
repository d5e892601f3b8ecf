"""time_capsule — messages addressed to a future point in logical time.

A contract stores messages that only become readable once its logical
clock reaches their target time.  Only the owner moves the clock, and a
message may not be addressed too far into the past.
"""

from time_capsule.contract import TimeCapsuleContract
from time_capsule.exceptions import (
    ContractCallError,
    ContractConfigError,
    StoreError,
    TimeCapsuleError,
)
from time_capsule.message import Message, MessageView
from time_capsule.paradox import PARADOX_WINDOW, is_paradox
from time_capsule.result import ContractResult, ErrorKind

__all__ = [
    "PARADOX_WINDOW",
    "ContractCallError",
    "ContractConfigError",
    "ContractResult",
    "ErrorKind",
    "Message",
    "MessageView",
    "StoreError",
    "TimeCapsuleContract",
    "TimeCapsuleError",
    "is_paradox",
]
