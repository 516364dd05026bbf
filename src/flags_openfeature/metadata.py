"""Flag metadata attached to every resolution."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from openfeature.evaluation_context import EvaluationContext

from flags_openfeature.converters import format_timestamp, to_text

__all__ = (
    "METADATA_EVALUATION_TIME",
    "METADATA_FLAG_KEY",
    "METADATA_PROVIDER",
    "METADATA_TARGETING_KEY",
    "PROVIDER_NAME",
    "MetadataValue",
    "build_flag_metadata",
)

PROVIDER_NAME = "flags-openfeature"

METADATA_FLAG_KEY = "flagKey"
METADATA_PROVIDER = "provider"
METADATA_EVALUATION_TIME = "evaluationTime"
METADATA_TARGETING_KEY = "targetingKey"

_FIXED_KEYS = frozenset({METADATA_FLAG_KEY, METADATA_PROVIDER, METADATA_EVALUATION_TIME, METADATA_TARGETING_KEY})

MetadataValue = bool | int | float | str


def _utcnow() -> datetime:
    return datetime.now(UTC)


def build_flag_metadata(
    flag_key: str,
    context: EvaluationContext | None = None,
    *,
    clock: Callable[[], datetime] = _utcnow,
) -> dict[str, MetadataValue]:
    """Build the metadata map for one evaluation.

    The map always holds ``flagKey``, ``provider`` and ``evaluationTime``
    (read from ``clock`` on every call). With a context it also holds
    ``targetingKey`` and the context attributes: scalars as they are,
    timestamps and structures as text, ``None`` values left out. An
    attribute named like one of the fixed keys (``targetingKey`` included)
    is skipped.
    """
    metadata: dict[str, MetadataValue] = {
        METADATA_FLAG_KEY: flag_key,
        METADATA_PROVIDER: PROVIDER_NAME,
        METADATA_EVALUATION_TIME: format_timestamp(clock()),
    }
    if context is None:
        return metadata

    metadata[METADATA_TARGETING_KEY] = context.targeting_key or ""
    for key, value in context.attributes.items():
        if key in _FIXED_KEYS:
            continue
        converted = _to_metadata_value(value)
        if converted is not None:
            metadata[key] = converted
    return metadata


def _to_metadata_value(value: Any) -> MetadataValue | None:
    if value is None:
        return None
    if isinstance(value, (bool, int, float, str)):
        return value
    return to_text(value)
