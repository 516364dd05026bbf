"""Data carried across the Flags SDK boundary."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from flags_openfeature.flags.exceptions import FlagsErrorCode
from flags_openfeature.flags.values import AnyValue

__all__ = (
    "FlagDetails",
    "FlagsEvaluationContext",
)

T = TypeVar("T")


@dataclass(frozen=True)
class FlagDetails(Generic[T]):
    """Result of a single typed lookup on the Flags SDK.

    Attributes:
        key: The flag key that was looked up.
        value: The resolved value, or the caller's default.
        variant: Label of the variation that was served, if any.
        reason: Free-form reason string reported by the SDK.
        error: Error code when the lookup failed.
        error_message: Human readable error description.
    """

    key: str
    value: T
    variant: str | None = None
    reason: str | None = None
    error: FlagsErrorCode | None = None
    error_message: str | None = None


@dataclass(frozen=True)
class FlagsEvaluationContext:
    """Targeting data the Flags SDK evaluates against.

    Attribute values are :class:`AnyValue` when the context was built with
    the type-preserving policy and ``str`` when it was built with the
    coercing policy.
    """

    targeting_key: str = ""
    attributes: Mapping[str, AnyValue | str] = field(default_factory=dict)

    def get(self, key: str, default: AnyValue | str | None = None) -> AnyValue | str | None:
        return self.attributes.get(key, default)
