"""Configuration for FlagsProvider."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from flags_openfeature.exceptions import ProviderConfigurationError
from flags_openfeature.metadata import PROVIDER_NAME
from flags_openfeature.types import ContextPolicy, TimestampPolicy

__all__ = ("ProviderConfig",)


@dataclass
class ProviderConfig:
    """Construction-time choices of a :class:`~flags_openfeature.provider.FlagsProvider`.

    Attributes:
        name: Name reported through the provider metadata.
        context_policy: How context attributes reach the Flags SDK.
        context_timestamp_policy: Policy for timestamps in contexts pushed by
            ``initialize`` and ``on_context_set``. Lenient by default so
            lifecycle calls do not fail on a ``datetime`` attribute.
        object_timestamp_policy: Policy for timestamps in object defaults.
            Strict by default; the error surfaces from the resolve call.
        include_flag_metadata: Attach flag metadata to resolutions. When
            False, resolutions carry an empty metadata map.
    """

    name: str = PROVIDER_NAME
    context_policy: ContextPolicy = ContextPolicy.TYPE_PRESERVING
    context_timestamp_policy: TimestampPolicy = TimestampPolicy.LENIENT
    object_timestamp_policy: TimestampPolicy = TimestampPolicy.STRICT
    include_flag_metadata: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ProviderConfigurationError("name", "must be a non-empty string")
        self.context_policy = _coerce_enum("context_policy", ContextPolicy, self.context_policy)
        self.context_timestamp_policy = _coerce_enum(
            "context_timestamp_policy", TimestampPolicy, self.context_timestamp_policy
        )
        self.object_timestamp_policy = _coerce_enum(
            "object_timestamp_policy", TimestampPolicy, self.object_timestamp_policy
        )


def _coerce_enum(field_name: str, enum_type: Any, value: Any) -> Any:
    try:
        return enum_type(value)
    except ValueError:
        choices = ", ".join(repr(member.value) for member in enum_type)
        raise ProviderConfigurationError(field_name, f"expected one of {choices}, got {value!r}") from None
