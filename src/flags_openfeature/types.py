"""Enums shared across flags-openfeature."""

from __future__ import annotations

from enum import Enum

__all__ = (
    "ContextPolicy",
    "ProviderState",
    "TimestampPolicy",
)


class ContextPolicy(str, Enum):
    """How OpenFeature context attributes cross into the Flags SDK context.

    Attributes:
        TYPE_PRESERVING: Attributes keep their shape (integers stay integers,
            nested maps stay nested).
        COERCING: Every attribute is rendered as a string. Use this when the
            wrapped client only supports string attributes.
    """

    TYPE_PRESERVING = "type_preserving"
    COERCING = "coercing"


class TimestampPolicy(str, Enum):
    """What to do with values the Flags SDK cannot represent.

    The Flags SDK value model has no timestamp variant, so ``datetime``
    values (and integers outside the signed 64-bit range) need a policy.

    Attributes:
        STRICT: Raise :class:`~flags_openfeature.exceptions.ValueNotConvertibleError`.
        LENIENT: Degrade to a fixed ISO-8601 string.
    """

    STRICT = "strict"
    LENIENT = "lenient"


class ProviderState(str, Enum):
    """Lifecycle state of a :class:`~flags_openfeature.provider.FlagsProvider`."""

    UNREGISTERED = "unregistered"
    INITIALIZING = "initializing"
    READY = "ready"
