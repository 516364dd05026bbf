"""FlagsClientProtocol, the surface the provider needs from the Flags SDK."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, TypeAlias, runtime_checkable

from flags_openfeature.flags.exceptions import FlagsError
from flags_openfeature.flags.models import FlagDetails, FlagsEvaluationContext
from flags_openfeature.flags.values import AnyValue

__all__ = (
    "CompletionCallback",
    "FlagsClientProtocol",
)

CompletionCallback: TypeAlias = Callable[[FlagsError | None], None]
"""Called exactly once with ``None`` on success or the error on failure."""


@runtime_checkable
class FlagsClientProtocol(Protocol):
    """Typed detail accessors plus context binding.

    Detail accessors are synchronous and never raise: a missing flag comes
    back as the default value with a default reason. The evaluation context
    is bound through :meth:`set_evaluation_context`, never per lookup.
    """

    def get_boolean_details(self, key: str, default_value: bool) -> FlagDetails[bool]: ...

    def get_string_details(self, key: str, default_value: str) -> FlagDetails[str]: ...

    def get_integer_details(self, key: str, default_value: int) -> FlagDetails[int]: ...

    def get_double_details(self, key: str, default_value: float) -> FlagDetails[float]: ...

    def get_object_details(self, key: str, default_value: AnyValue) -> FlagDetails[AnyValue]: ...

    def set_evaluation_context(self, context: FlagsEvaluationContext, completion: CompletionCallback) -> None: ...
