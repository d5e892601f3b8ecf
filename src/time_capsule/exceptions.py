"""Custom exceptions for the time_capsule package."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from time_capsule.result import ContractResult


class TimeCapsuleError(Exception):
    """Base exception for all contract-related errors."""


class ContractCallError(TimeCapsuleError):
    """Raised by ``ContractResult.unwrap`` when the call failed."""

    def __init__(self, result: ContractResult) -> None:
        self.result = result
        super().__init__(f"Contract call failed: {result.reason}")


class ContractConfigError(TimeCapsuleError):
    """Raised when a contract is constructed with invalid settings."""

    def __init__(self, setting: str, message: str) -> None:
        self.setting = setting
        super().__init__(f"Invalid contract setting '{setting}': {message}")


class StoreError(TimeCapsuleError):
    """Raised when a store operation fails."""

    def __init__(self, operation: str, detail: str = "") -> None:
        self.operation = operation
        msg = f"Store error during '{operation}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
