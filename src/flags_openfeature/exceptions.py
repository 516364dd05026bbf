"""Exceptions raised by the provider and its converters.

Errors reported by the wrapped client while applying a context are
:class:`~flags_openfeature.flags.exceptions.FlagsError` instances and are
re-raised unchanged; they are not wrapped in any type defined here.
"""

from __future__ import annotations

from typing import Any

from openfeature.exception import ErrorCode, InvalidContextError, OpenFeatureError

__all__ = (
    "InvalidContextError",
    "ProviderConfigurationError",
    "ValueNotConvertibleError",
)


class ValueNotConvertibleError(OpenFeatureError):
    """A value has no representation in the Flags SDK value model.

    Raised by the strict conversion policy for ``datetime`` values, integers
    outside the signed 64-bit range and unsupported Python types.
    """

    def __init__(self, value: Any, reason: str | None = None) -> None:
        self.value = value
        message = reason or f"value of type {type(value).__name__} cannot be converted to a flags value"
        super().__init__(ErrorCode.TYPE_MISMATCH, message)


class ProviderConfigurationError(ValueError):
    """Raised when a :class:`~flags_openfeature.config.ProviderConfig` is invalid."""

    def __init__(self, field_name: str, message: str) -> None:
        self.field_name = field_name
        super().__init__(f"{field_name}: {message}")
