"""Value model of the Flags SDK.

:class:`AnyValue` is a closed tagged union. The ``kind`` tag decides which
Python type the ``payload`` holds:

=============  ====================================
kind           payload
=============  ====================================
``BOOL``       ``bool``
``STRING``     ``str``
``INT``        ``int`` (signed 64-bit)
``DOUBLE``     ``float``
``ARRAY``      ``tuple[AnyValue, ...]``
``DICTIONARY`` read-only ``Mapping[str, AnyValue]``
``NULL``       ``None``
=============  ====================================

There is no timestamp variant.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any

__all__ = (
    "INT64_MAX",
    "INT64_MIN",
    "AnyValue",
    "AnyValueKind",
    "fits_int64",
)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def fits_int64(value: int) -> bool:
    """Return True if ``value`` is representable as a signed 64-bit integer."""
    return INT64_MIN <= value <= INT64_MAX


class AnyValueKind(str, Enum):
    """Variant tag of :class:`AnyValue`."""

    BOOL = "bool"
    STRING = "string"
    INT = "int"
    DOUBLE = "double"
    ARRAY = "array"
    DICTIONARY = "dictionary"
    NULL = "null"


@dataclass(frozen=True)
class AnyValue:
    """A Flags SDK value.

    Build instances through the named constructors rather than the
    dataclass initializer::

        AnyValue.dictionary({"theme": AnyValue.string("dark"), "count": AnyValue.integer(5)})
    """

    kind: AnyValueKind
    payload: Any = None

    # map payloads are not hashable
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        kind = self.kind
        payload = self.payload
        if kind is AnyValueKind.BOOL:
            valid = isinstance(payload, bool)
        elif kind is AnyValueKind.STRING:
            valid = isinstance(payload, str)
        elif kind is AnyValueKind.INT:
            valid = isinstance(payload, int) and not isinstance(payload, bool)
            if valid and not fits_int64(payload):
                raise ValueError(f"integer {payload} is outside the signed 64-bit range")
        elif kind is AnyValueKind.DOUBLE:
            valid = isinstance(payload, float)
        elif kind is AnyValueKind.ARRAY:
            valid = isinstance(payload, tuple) and all(isinstance(item, AnyValue) for item in payload)
        elif kind is AnyValueKind.DICTIONARY:
            valid = isinstance(payload, Mapping) and all(
                isinstance(key, str) and isinstance(item, AnyValue) for key, item in payload.items()
            )
            if valid:
                object.__setattr__(self, "payload", MappingProxyType(dict(payload)))
        else:
            valid = payload is None
        if not valid:
            raise TypeError(f"payload {payload!r} is not valid for {kind.value} values")

    @classmethod
    def boolean(cls, value: bool) -> AnyValue:
        return cls(AnyValueKind.BOOL, value)

    @classmethod
    def string(cls, value: str) -> AnyValue:
        return cls(AnyValueKind.STRING, value)

    @classmethod
    def integer(cls, value: int) -> AnyValue:
        return cls(AnyValueKind.INT, value)

    @classmethod
    def double(cls, value: float) -> AnyValue:
        return cls(AnyValueKind.DOUBLE, float(value))

    @classmethod
    def array(cls, values: Iterable[AnyValue]) -> AnyValue:
        return cls(AnyValueKind.ARRAY, tuple(values))

    @classmethod
    def dictionary(cls, values: Mapping[str, AnyValue]) -> AnyValue:
        return cls(AnyValueKind.DICTIONARY, values)

    @classmethod
    def null(cls) -> AnyValue:
        return cls(AnyValueKind.NULL)

    @property
    def is_null(self) -> bool:
        return self.kind is AnyValueKind.NULL

    def __repr__(self) -> str:
        if self.kind is AnyValueKind.NULL:
            return "AnyValue.null()"
        if self.kind is AnyValueKind.DICTIONARY:
            return f"AnyValue.dictionary({dict(self.payload)!r})"
        return f"AnyValue.{_CONSTRUCTOR_NAMES[self.kind]}({self.payload!r})"


_CONSTRUCTOR_NAMES = {
    AnyValueKind.BOOL: "boolean",
    AnyValueKind.STRING: "string",
    AnyValueKind.INT: "integer",
    AnyValueKind.DOUBLE: "double",
    AnyValueKind.ARRAY: "array",
    AnyValueKind.DICTIONARY: "dictionary",
}
