"""Mapping Flags SDK details onto OpenFeature resolution details."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from openfeature.exception import ErrorCode
from openfeature.flag_evaluation import FlagResolutionDetails, Reason

from flags_openfeature.flags.exceptions import FlagsErrorCode
from flags_openfeature.flags.models import FlagDetails

__all__ = (
    "map_error_code",
    "map_reason",
    "to_resolution_details",
)

T = TypeVar("T")

_ERROR_CODE_MAP: dict[FlagsErrorCode, ErrorCode] = {
    FlagsErrorCode.FLAG_NOT_FOUND: ErrorCode.FLAG_NOT_FOUND,
    FlagsErrorCode.TYPE_MISMATCH: ErrorCode.TYPE_MISMATCH,
    FlagsErrorCode.PARSE_ERROR: ErrorCode.PARSE_ERROR,
    FlagsErrorCode.PROVIDER_NOT_READY: ErrorCode.PROVIDER_NOT_READY,
    FlagsErrorCode.INVALID_CONTEXT: ErrorCode.INVALID_CONTEXT,
    FlagsErrorCode.NETWORK_ERROR: ErrorCode.GENERAL,
    FlagsErrorCode.GENERAL_ERROR: ErrorCode.GENERAL,
}


def map_error_code(code: FlagsErrorCode | None) -> ErrorCode | None:
    """Map a Flags SDK error code to the OpenFeature error code."""
    if code is None:
        return None
    return _ERROR_CODE_MAP.get(code, ErrorCode.GENERAL)


def map_reason(reason: str | None) -> Reason | str | None:
    """Map a Flags SDK reason string to an OpenFeature reason.

    Matching ignores case, so ``"default"`` and ``"DEFAULT"`` both map to
    :attr:`Reason.DEFAULT`. Reasons OpenFeature does not define are returned
    unchanged.
    """
    if reason is None:
        return None
    try:
        return Reason(reason.upper())
    except ValueError:
        return reason


def to_resolution_details(
    details: FlagDetails[Any],
    value: T,
    flag_metadata: Mapping[str, Any],
) -> FlagResolutionDetails[T]:
    """Build resolution details from ``details`` with an already converted ``value``."""
    return FlagResolutionDetails(
        value=value,
        error_code=map_error_code(details.error),
        error_message=details.error_message,
        reason=map_reason(details.reason),
        variant=details.variant,
        flag_metadata=dict(flag_metadata),
    )
