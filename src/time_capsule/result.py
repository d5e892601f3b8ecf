"""ContractResult — the outcome of a single contract call."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from time_capsule.exceptions import ContractCallError


class ErrorKind(StrEnum):
    """Every way a contract call can fail.  The value is the wire message."""

    INVALID_INPUT = "Invalid input"
    PARADOX_DETECTED = "Paradox detected"
    NOT_FOUND = "Message not found"
    NOT_AUTHORIZED = "Not authorized"


@dataclass(frozen=True)
class ContractResult:
    """Immutable result returned by every state-touching contract call.

    Exactly one of ``value`` / ``error`` is meaningful, selected by
    ``success``.  Build instances through :meth:`ok` and :meth:`fail`.

    Attributes:
        success: ``True`` if the call went through.
        value:   Payload on success (message id, view, new clock value).
        error:   The :class:`ErrorKind` on failure, ``None`` otherwise.
    """

    success: bool
    value: Any = None
    error: ErrorKind | None = None

    # ── Factory helpers ──────────────────────────────────────

    @staticmethod
    def ok(value: Any = None) -> ContractResult:
        return ContractResult(success=True, value=value)

    @staticmethod
    def fail(error: ErrorKind) -> ContractResult:
        return ContractResult(success=False, error=error)

    @property
    def reason(self) -> str:
        """Human-readable error message, empty on success."""
        return self.error.value if self.error is not None else ""

    def unwrap(self) -> Any:
        """Return ``value`` or raise :class:`ContractCallError`."""
        if not self.success:
            raise ContractCallError(self)
        return self.value
