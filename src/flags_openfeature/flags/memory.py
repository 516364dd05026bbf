"""InMemoryFlagsClient implementation."""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from flags_openfeature.flags.client import CompletionCallback
from flags_openfeature.flags.exceptions import FlagsErrorCode
from flags_openfeature.flags.models import FlagDetails, FlagsEvaluationContext
from flags_openfeature.flags.values import AnyValue, AnyValueKind

__all__ = ("InMemoryFlagsClient",)

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_REASON = "DEFAULT"
STATIC_REASON = "STATIC"
ERROR_REASON = "ERROR"


@dataclass(frozen=True)
class _StoredFlag:
    value: AnyValue
    variant: str | None
    reason: str | None


class InMemoryFlagsClient:
    """Flags client that serves fixed values from memory.

    Suitable for development and tests. Values are served as stored: there
    is no targeting, the bound evaluation context is only recorded.

    Example::

        client = InMemoryFlagsClient({"dark-mode": AnyValue.boolean(True)})
        client.get_boolean_details("dark-mode", False).value  # True
    """

    def __init__(self, flags: Mapping[str, AnyValue] | None = None) -> None:
        self._lock = threading.Lock()
        self._flags: dict[str, _StoredFlag] = {}
        self._context: FlagsEvaluationContext | None = None
        self._context_updates = 0
        for key, value in (flags or {}).items():
            self.set_flag(key, value)

    def set_flag(
        self,
        key: str,
        value: AnyValue,
        *,
        variant: str | None = None,
        reason: str | None = STATIC_REASON,
    ) -> None:
        """Store or replace a flag."""
        with self._lock:
            self._flags[key] = _StoredFlag(value=value, variant=variant, reason=reason)

    def remove_flag(self, key: str) -> bool:
        """Remove a flag. Returns False if it did not exist."""
        with self._lock:
            return self._flags.pop(key, None) is not None

    @property
    def evaluation_context(self) -> FlagsEvaluationContext | None:
        """The last context applied through :meth:`set_evaluation_context`."""
        with self._lock:
            return self._context

    @property
    def context_updates(self) -> int:
        with self._lock:
            return self._context_updates

    def set_evaluation_context(self, context: FlagsEvaluationContext, completion: CompletionCallback) -> None:
        with self._lock:
            self._context = context
            self._context_updates += 1
        logger.debug("Evaluation context set (targeting_key=%r)", context.targeting_key)
        completion(None)

    def get_boolean_details(self, key: str, default_value: bool) -> FlagDetails[bool]:
        return self._lookup(key, default_value, AnyValueKind.BOOL)

    def get_string_details(self, key: str, default_value: str) -> FlagDetails[str]:
        return self._lookup(key, default_value, AnyValueKind.STRING)

    def get_integer_details(self, key: str, default_value: int) -> FlagDetails[int]:
        return self._lookup(key, default_value, AnyValueKind.INT)

    def get_double_details(self, key: str, default_value: float) -> FlagDetails[float]:
        return self._lookup(key, default_value, AnyValueKind.DOUBLE)

    def get_object_details(self, key: str, default_value: AnyValue) -> FlagDetails[AnyValue]:
        with self._lock:
            stored = self._flags.get(key)
        if stored is None:
            return FlagDetails(key=key, value=default_value, reason=DEFAULT_REASON)
        return FlagDetails(key=key, value=stored.value, variant=stored.variant, reason=stored.reason)

    def _lookup(self, key: str, default_value: T, kind: AnyValueKind) -> FlagDetails[Any]:
        with self._lock:
            stored = self._flags.get(key)
        if stored is None:
            return FlagDetails(key=key, value=default_value, reason=DEFAULT_REASON)
        if stored.value.kind is not kind:
            return FlagDetails(
                key=key,
                value=default_value,
                reason=ERROR_REASON,
                error=FlagsErrorCode.TYPE_MISMATCH,
                error_message=f"Flag '{key}' is {stored.value.kind.value}, expected {kind.value}",
            )
        return FlagDetails(key=key, value=stored.value.payload, variant=stored.variant, reason=stored.reason)
