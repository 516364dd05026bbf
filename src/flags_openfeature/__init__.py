"""OpenFeature provider for the Flags SDK.

Exposes a Flags SDK client to OpenFeature as a provider, converting values,
evaluation contexts and results between the two models.
"""

from flags_openfeature.config import ProviderConfig
from flags_openfeature.context import ContextConverter, adapt_evaluation_context, is_empty_context
from flags_openfeature.converters import format_timestamp, from_native, to_flags_value, to_openfeature_value, to_text
from flags_openfeature.exceptions import InvalidContextError, ProviderConfigurationError, ValueNotConvertibleError
from flags_openfeature.flags import (
    AnyValue,
    AnyValueKind,
    FlagDetails,
    FlagsClientProtocol,
    FlagsError,
    FlagsErrorCode,
    FlagsEvaluationContext,
    InMemoryFlagsClient,
)
from flags_openfeature.metadata import PROVIDER_NAME, build_flag_metadata
from flags_openfeature.provider import FlagsProvider
from flags_openfeature.results import map_error_code, map_reason, to_resolution_details
from flags_openfeature.types import ContextPolicy, ProviderState, TimestampPolicy

__all__ = (
    "PROVIDER_NAME",
    "AnyValue",
    "AnyValueKind",
    "ContextConverter",
    "ContextPolicy",
    "FlagDetails",
    "FlagsClientProtocol",
    "FlagsError",
    "FlagsErrorCode",
    "FlagsEvaluationContext",
    "FlagsProvider",
    "InMemoryFlagsClient",
    "InvalidContextError",
    "ProviderConfig",
    "ProviderConfigurationError",
    "ProviderState",
    "TimestampPolicy",
    "ValueNotConvertibleError",
    "adapt_evaluation_context",
    "build_flag_metadata",
    "format_timestamp",
    "from_native",
    "is_empty_context",
    "map_error_code",
    "map_reason",
    "to_flags_value",
    "to_openfeature_value",
    "to_resolution_details",
    "to_text",
)

__version__ = "0.1.0"
