"""OpenFeature provider backed by the Flags SDK.

:class:`FlagsProvider` implements the OpenFeature provider contract on top of
any :class:`~flags_openfeature.flags.FlagsClientProtocol` implementation.

Example::

    from openfeature import api

    from flags_openfeature import FlagsProvider, InMemoryFlagsClient

    api.set_provider(FlagsProvider(client=InMemoryFlagsClient()))
    enabled = api.get_client().get_boolean_value("new-checkout", False)

The Flags SDK binds the evaluation context once, through
``set_evaluation_context``, instead of per lookup. The context passed to a
``resolve_*`` call therefore does not influence which value is served; it is
only reflected in the flag metadata of the result. Bind the context with
:meth:`FlagsProvider.initialize` or :meth:`FlagsProvider.on_context_set`.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import AsyncIterator, Iterator, Sequence
from concurrent.futures import Future, InvalidStateError
from contextlib import contextmanager
from typing import Any

from openfeature.evaluation_context import EvaluationContext
from openfeature.event import ProviderEvent
from openfeature.flag_evaluation import FlagResolutionDetails
from openfeature.hook import Hook
from openfeature.provider import AbstractProvider, Metadata, ProviderStatus

from flags_openfeature.config import ProviderConfig
from flags_openfeature.context import ContextConverter, is_empty_context
from flags_openfeature.converters import to_flags_value, to_openfeature_value
from flags_openfeature.exceptions import ValueNotConvertibleError
from flags_openfeature.flags.client import FlagsClientProtocol
from flags_openfeature.flags.exceptions import FlagsError
from flags_openfeature.flags.values import fits_int64
from flags_openfeature.metadata import MetadataValue, build_flag_metadata
from flags_openfeature.results import to_resolution_details
from flags_openfeature.types import ProviderState

__all__ = ("FlagsProvider",)

logger = logging.getLogger(__name__)

_STATUS_BY_STATE = {
    ProviderState.UNREGISTERED: ProviderStatus.NOT_READY,
    ProviderState.INITIALIZING: ProviderStatus.NOT_READY,
    ProviderState.READY: ProviderStatus.READY,
}


class FlagsProvider(AbstractProvider):
    """OpenFeature provider that forwards lookups to a Flags SDK client.

    Args:
        client: The wrapped Flags SDK client.
        config: Conversion policies and metadata options. Defaults to
            :class:`ProviderConfig` with its defaults.
        hooks: OpenFeature hooks returned by :meth:`get_provider_hooks`.
    """

    def __init__(
        self,
        client: FlagsClientProtocol,
        config: ProviderConfig | None = None,
        hooks: Sequence[Hook] | None = None,
    ) -> None:
        super().__init__()
        self._client = client
        self._config = config or ProviderConfig()
        self._hooks = list(hooks or [])
        self._metadata = Metadata(name=self._config.name)
        self._context_converter = ContextConverter(
            self._config.context_policy,
            self._config.context_timestamp_policy,
        )
        self._state = ProviderState.UNREGISTERED
        self._state_lock = threading.Lock()

    @property
    def client(self) -> FlagsClientProtocol:
        return self._client

    @property
    def config(self) -> ProviderConfig:
        return self._config

    @property
    def state(self) -> ProviderState:
        with self._state_lock:
            return self._state

    @property
    def status(self) -> ProviderStatus:
        """The lifecycle state expressed as an OpenFeature status."""
        return _STATUS_BY_STATE[self.state]

    def get_metadata(self) -> Metadata:
        return self._metadata

    def get_provider_hooks(self) -> list[Hook]:
        return list(self._hooks)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------
    def initialize(self, evaluation_context: EvaluationContext | None = None) -> None:
        """Bind the initial context and mark the provider ready.

        A ``None`` or empty context (what the OpenFeature API passes when no
        global context is set) binds nothing. Otherwise the call blocks until
        the client reports completion, so do not call it from a thread whose
        event loop the client needs to complete; use
        :meth:`initialize_async` there.

        Raises:
            FlagsError: The client failed to apply the context.
            ValueNotConvertibleError: An attribute cannot be represented
                under a strict context timestamp policy.
        """
        with self._initializing():
            if not is_empty_context(evaluation_context):
                self._apply_context(evaluation_context).result()

    async def initialize_async(self, evaluation_context: EvaluationContext | None = None) -> None:
        """Awaitable variant of :meth:`initialize`."""
        with self._initializing():
            if not is_empty_context(evaluation_context):
                await asyncio.wrap_future(self._apply_context(evaluation_context))

    def on_context_set(self, old_context: EvaluationContext | None, new_context: EvaluationContext) -> None:
        """Push ``new_context`` to the client and wait for completion.

        ``old_context`` is accepted for symmetry with other providers and is
        not consulted. Identical contexts are pushed again.

        Raises:
            InvalidContextError: ``new_context`` is None.
            FlagsError: The client failed to apply the context.
        """
        self._apply_context(new_context).result()

    async def on_context_set_async(self, old_context: EvaluationContext | None, new_context: EvaluationContext) -> None:
        """Awaitable variant of :meth:`on_context_set`."""
        await asyncio.wrap_future(self._apply_context(new_context))

    def shutdown(self) -> None:
        self._transition(ProviderState.UNREGISTERED)

    def observe(self) -> AsyncIterator[ProviderEvent]:
        """Stream of provider events.

        The Flags SDK does not publish events yet, so the stream ends
        without emitting anything.
        """
        return _no_events()

    @contextmanager
    def _initializing(self) -> Iterator[None]:
        self._transition(ProviderState.INITIALIZING)
        try:
            yield
        except BaseException:
            self._transition(ProviderState.UNREGISTERED)
            raise
        self._transition(ProviderState.READY)

    def _transition(self, state: ProviderState) -> None:
        with self._state_lock:
            previous, self._state = self._state, state
        if previous is not state:
            logger.debug("Provider %s: %s -> %s", self._config.name, previous.value, state.value)

    def _apply_context(self, context: EvaluationContext | None) -> Future[None]:
        flags_context = self._context_converter.convert(context)
        future: Future[None] = Future()

        def completion(error: FlagsError | None) -> None:
            try:
                if error is None:
                    future.set_result(None)
                else:
                    future.set_exception(error)
            except InvalidStateError:
                logger.warning("Flags client completed set_evaluation_context more than once, ignoring %r", error)

        logger.debug(
            "Applying evaluation context (targeting_key=%r, attributes=%d)",
            flags_context.targeting_key,
            len(flags_context.attributes),
        )
        self._client.set_evaluation_context(flags_context, completion)
        return future

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------
    def resolve_boolean_details(
        self,
        flag_key: str,
        default_value: bool,
        evaluation_context: EvaluationContext | None = None,
    ) -> FlagResolutionDetails[bool]:
        details = self._client.get_boolean_details(flag_key, default_value)
        return to_resolution_details(details, details.value, self._flag_metadata(flag_key, evaluation_context))

    def resolve_string_details(
        self,
        flag_key: str,
        default_value: str,
        evaluation_context: EvaluationContext | None = None,
    ) -> FlagResolutionDetails[str]:
        details = self._client.get_string_details(flag_key, default_value)
        return to_resolution_details(details, details.value, self._flag_metadata(flag_key, evaluation_context))

    def resolve_integer_details(
        self,
        flag_key: str,
        default_value: int,
        evaluation_context: EvaluationContext | None = None,
    ) -> FlagResolutionDetails[int]:
        """Resolve an integer flag.

        Raises:
            ValueNotConvertibleError: The default or the served value does
                not fit in a signed 64-bit integer.
        """
        _require_int64(default_value)
        details = self._client.get_integer_details(flag_key, default_value)
        _require_int64(details.value)
        return to_resolution_details(details, int(details.value), self._flag_metadata(flag_key, evaluation_context))

    def resolve_float_details(
        self,
        flag_key: str,
        default_value: float,
        evaluation_context: EvaluationContext | None = None,
    ) -> FlagResolutionDetails[float]:
        details = self._client.get_double_details(flag_key, float(default_value))
        return to_resolution_details(details, float(details.value), self._flag_metadata(flag_key, evaluation_context))

    def resolve_object_details(
        self,
        flag_key: str,
        default_value: Any,
        evaluation_context: EvaluationContext | None = None,
    ) -> FlagResolutionDetails[Any]:
        """Resolve a structured flag.

        Raises:
            ValueNotConvertibleError: ``default_value`` holds a value the
                Flags SDK cannot represent under a strict object timestamp
                policy.
        """
        default = to_flags_value(default_value, timestamp_policy=self._config.object_timestamp_policy)
        details = self._client.get_object_details(flag_key, default)
        return to_resolution_details(
            details,
            to_openfeature_value(details.value),
            self._flag_metadata(flag_key, evaluation_context),
        )

    async def resolve_boolean_details_async(
        self,
        flag_key: str,
        default_value: bool,
        evaluation_context: EvaluationContext | None = None,
    ) -> FlagResolutionDetails[bool]:
        return self.resolve_boolean_details(flag_key, default_value, evaluation_context)

    async def resolve_string_details_async(
        self,
        flag_key: str,
        default_value: str,
        evaluation_context: EvaluationContext | None = None,
    ) -> FlagResolutionDetails[str]:
        return self.resolve_string_details(flag_key, default_value, evaluation_context)

    async def resolve_integer_details_async(
        self,
        flag_key: str,
        default_value: int,
        evaluation_context: EvaluationContext | None = None,
    ) -> FlagResolutionDetails[int]:
        return self.resolve_integer_details(flag_key, default_value, evaluation_context)

    async def resolve_float_details_async(
        self,
        flag_key: str,
        default_value: float,
        evaluation_context: EvaluationContext | None = None,
    ) -> FlagResolutionDetails[float]:
        return self.resolve_float_details(flag_key, default_value, evaluation_context)

    async def resolve_object_details_async(
        self,
        flag_key: str,
        default_value: Any,
        evaluation_context: EvaluationContext | None = None,
    ) -> FlagResolutionDetails[Any]:
        return self.resolve_object_details(flag_key, default_value, evaluation_context)

    def _flag_metadata(self, flag_key: str, context: EvaluationContext | None) -> dict[str, MetadataValue]:
        if not self._config.include_flag_metadata:
            return {}
        return build_flag_metadata(flag_key, context)


def _require_int64(value: int) -> None:
    if not fits_int64(value):
        raise ValueNotConvertibleError(value, f"integer {value} is outside the signed 64-bit range")


async def _no_events() -> AsyncIterator[ProviderEvent]:
    for event in ():
        yield event
