"""Errors reported by the Flags SDK."""

from __future__ import annotations

from enum import Enum

__all__ = (
    "FlagsError",
    "FlagsErrorCode",
)


class FlagsErrorCode(str, Enum):
    """Error codes the Flags SDK attaches to details and context failures."""

    FLAG_NOT_FOUND = "FLAG_NOT_FOUND"
    TYPE_MISMATCH = "TYPE_MISMATCH"
    PARSE_ERROR = "PARSE_ERROR"
    PROVIDER_NOT_READY = "PROVIDER_NOT_READY"
    INVALID_CONTEXT = "INVALID_CONTEXT"
    NETWORK_ERROR = "NETWORK_ERROR"
    GENERAL_ERROR = "GENERAL_ERROR"


class FlagsError(Exception):
    """Base error of the Flags SDK."""

    def __init__(self, code: FlagsErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
