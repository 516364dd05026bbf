"""Adapting OpenFeature evaluation contexts to Flags SDK contexts."""

from __future__ import annotations

from openfeature.evaluation_context import EvaluationContext
from openfeature.exception import InvalidContextError

from flags_openfeature.converters import to_flags_value, to_text
from flags_openfeature.flags.models import FlagsEvaluationContext
from flags_openfeature.flags.values import AnyValue
from flags_openfeature.types import ContextPolicy, TimestampPolicy

__all__ = (
    "ContextConverter",
    "adapt_evaluation_context",
    "is_empty_context",
)


def is_empty_context(context: EvaluationContext | None) -> bool:
    """Return True for ``None`` or a context with no targeting key and no attributes."""
    return context is None or (not context.targeting_key and not context.attributes)


class ContextConverter:
    """Builds :class:`FlagsEvaluationContext` objects with a fixed policy.

    Args:
        policy: :attr:`ContextPolicy.TYPE_PRESERVING` keeps attribute shapes,
            :attr:`ContextPolicy.COERCING` renders every attribute as text.
        timestamp_policy: Used by the type-preserving policy for values the
            Flags SDK cannot hold. Ignored when coercing, which cannot fail.
    """

    def __init__(
        self,
        policy: ContextPolicy = ContextPolicy.TYPE_PRESERVING,
        timestamp_policy: TimestampPolicy = TimestampPolicy.LENIENT,
    ) -> None:
        self.policy = ContextPolicy(policy)
        self.timestamp_policy = TimestampPolicy(timestamp_policy)

    def __repr__(self) -> str:
        return f"ContextConverter(policy={self.policy.value!r}, timestamp_policy={self.timestamp_policy.value!r})"

    def convert(self, context: EvaluationContext | None) -> FlagsEvaluationContext:
        """Convert ``context``.

        The targeting key is passed through unchanged; a missing key reads
        as the empty string.

        Raises:
            InvalidContextError: ``context`` is None.
            ValueNotConvertibleError: An attribute cannot be represented and
                the timestamp policy is strict.
        """
        if context is None:
            raise InvalidContextError("an evaluation context is required")

        attributes: dict[str, AnyValue | str]
        if self.policy is ContextPolicy.COERCING:
            attributes = {key: to_text(value) for key, value in context.attributes.items()}
        else:
            attributes = {
                key: to_flags_value(value, timestamp_policy=self.timestamp_policy)
                for key, value in context.attributes.items()
            }
        return FlagsEvaluationContext(targeting_key=context.targeting_key or "", attributes=attributes)


def adapt_evaluation_context(
    context: EvaluationContext | None,
    policy: ContextPolicy = ContextPolicy.TYPE_PRESERVING,
    timestamp_policy: TimestampPolicy = TimestampPolicy.LENIENT,
) -> FlagsEvaluationContext:
    """Convert an OpenFeature context with a one-off :class:`ContextConverter`."""
    return ContextConverter(policy, timestamp_policy).convert(context)
