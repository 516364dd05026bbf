"""Contract of the Flags SDK wrapped by the provider.

The provider talks to the SDK only through :class:`FlagsClientProtocol`;
:class:`InMemoryFlagsClient` implements it without any network access.
"""

from flags_openfeature.flags.client import CompletionCallback, FlagsClientProtocol
from flags_openfeature.flags.exceptions import FlagsError, FlagsErrorCode
from flags_openfeature.flags.memory import InMemoryFlagsClient
from flags_openfeature.flags.models import FlagDetails, FlagsEvaluationContext
from flags_openfeature.flags.values import INT64_MAX, INT64_MIN, AnyValue, AnyValueKind, fits_int64

__all__ = (
    "INT64_MAX",
    "INT64_MIN",
    "AnyValue",
    "AnyValueKind",
    "CompletionCallback",
    "FlagDetails",
    "FlagsClientProtocol",
    "FlagsError",
    "FlagsErrorCode",
    "FlagsEvaluationContext",
    "InMemoryFlagsClient",
    "fits_int64",
)
