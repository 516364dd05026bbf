"""Conversions between OpenFeature values and Flags SDK values.

OpenFeature represents flag values and context attributes as plain Python
data (``bool``, ``str``, ``int``, ``float``, ``datetime``, sequences,
mappings and ``None``). The Flags SDK uses :class:`AnyValue`. The two models
line up one to one except for ``datetime``, which the Flags SDK cannot hold;
:class:`~flags_openfeature.types.TimestampPolicy` decides what happens to it.

Conversions build new values and never mutate their input.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from datetime import UTC, datetime
from typing import Any

from flags_openfeature.exceptions import ValueNotConvertibleError
from flags_openfeature.flags.values import AnyValue, AnyValueKind, fits_int64
from flags_openfeature.types import TimestampPolicy

__all__ = (
    "format_timestamp",
    "from_native",
    "to_flags_value",
    "to_openfeature_value",
    "to_text",
)

_BINARY_TYPES = (bytes, bytearray, memoryview)


def format_timestamp(value: datetime) -> str:
    """Render ``value`` as UTC ISO-8601 text with second precision.

    Naive datetimes are taken to be UTC already.

    >>> format_timestamp(datetime(2021, 1, 1, tzinfo=UTC))
    '2021-01-01T00:00:00Z'
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    value = value.astimezone(UTC)
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}Z"
    )


def to_flags_value(value: Any, *, timestamp_policy: TimestampPolicy = TimestampPolicy.STRICT) -> AnyValue:
    """Convert an OpenFeature value into an :class:`AnyValue`.

    Args:
        value: Flag value or context attribute.
        timestamp_policy: Applied to values without a Flags SDK variant:
            ``datetime``, integers outside the signed 64-bit range and
            unsupported types.

    Raises:
        ValueNotConvertibleError: Such a value was found under
            :attr:`TimestampPolicy.STRICT`.
    """
    if value is None:
        return AnyValue.null()
    if isinstance(value, bool):
        return AnyValue.boolean(value)
    if isinstance(value, int):
        if fits_int64(value):
            return AnyValue.integer(value)
        return _unconvertible(value, timestamp_policy, f"integer {value} is outside the signed 64-bit range")
    if isinstance(value, float):
        return AnyValue.double(value)
    if isinstance(value, str):
        return AnyValue.string(value)
    if isinstance(value, datetime):
        return _unconvertible(value, timestamp_policy, "timestamps have no flags value representation")
    if isinstance(value, Mapping):
        converted: dict[str, AnyValue] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                if timestamp_policy is TimestampPolicy.STRICT:
                    raise ValueNotConvertibleError(key, f"map key {key!r} is not a string")
                key = str(key)
            converted[key] = to_flags_value(item, timestamp_policy=timestamp_policy)
        return AnyValue.dictionary(converted)
    if isinstance(value, Sequence) and not isinstance(value, _BINARY_TYPES):
        return AnyValue.array(to_flags_value(item, timestamp_policy=timestamp_policy) for item in value)
    return _unconvertible(value, timestamp_policy, None)


def to_openfeature_value(value: AnyValue) -> Any:
    """Convert an :class:`AnyValue` into the plain data OpenFeature expects."""
    if value.kind is AnyValueKind.ARRAY:
        return [to_openfeature_value(item) for item in value.payload]
    if value.kind is AnyValueKind.DICTIONARY:
        return {key: to_openfeature_value(item) for key, item in value.payload.items()}
    return value.payload


def from_native(value: Any) -> AnyValue:
    """Build an :class:`AnyValue` from loosely typed Python data.

    Unlike :func:`to_flags_value` this never raises: anything without a
    matching variant (including ``datetime`` and oversized integers) is
    stored as its ``str()`` text.
    """
    if isinstance(value, AnyValue):
        return value
    if value is None:
        return AnyValue.null()
    if isinstance(value, bool):
        return AnyValue.boolean(value)
    if isinstance(value, int):
        return AnyValue.integer(value) if fits_int64(value) else AnyValue.string(str(value))
    if isinstance(value, float):
        return AnyValue.double(value)
    if isinstance(value, str):
        return AnyValue.string(value)
    if isinstance(value, Mapping):
        return AnyValue.dictionary({str(key): from_native(item) for key, item in value.items()})
    if isinstance(value, Sequence) and not isinstance(value, _BINARY_TYPES):
        return AnyValue.array(from_native(item) for item in value)
    return AnyValue.string(str(value))


def to_text(value: Any) -> str:
    """Render an OpenFeature value (or an :class:`AnyValue`) as text.

    Booleans become ``"true"``/``"false"``, ``None`` the empty string,
    timestamps go through :func:`format_timestamp` and maps and lists are
    serialized as compact JSON.
    """
    if isinstance(value, AnyValue):
        value = to_openfeature_value(value)
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, Mapping) or (isinstance(value, Sequence) and not isinstance(value, _BINARY_TYPES)):
        return json.dumps(_json_safe(value), separators=(",", ":"), ensure_ascii=False)
    return str(value)


def _json_safe(value: Any) -> Any:
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, AnyValue):
        return _json_safe(to_openfeature_value(value))
    if isinstance(value, Mapping):
        return {_json_key(key): _json_safe(item) for key, item in value.items()}
    if isinstance(value, Sequence) and not isinstance(value, _BINARY_TYPES):
        return [_json_safe(item) for item in value]
    return str(value)


def _json_key(key: Any) -> str | int | float | bool | None:
    # json.dumps only accepts these key types
    if key is None or isinstance(key, (bool, int, float, str)):
        return key
    if isinstance(key, datetime):
        return format_timestamp(key)
    return str(key)


def _unconvertible(value: Any, policy: TimestampPolicy, reason: str | None) -> AnyValue:
    if policy is TimestampPolicy.STRICT:
        raise ValueNotConvertibleError(value, reason)
    return AnyValue.string(to_text(value))
