"""Structured logging for OpenFeature flag evaluations.

:class:`LoggingHook` is an OpenFeature hook that logs every evaluation. It
logs through structlog when it is installed and through the standard library
otherwise, passing the evaluation fields as keyword arguments (structlog) or
as ``extra`` (stdlib).

Example::

    from openfeature import api

    from flags_openfeature.contrib.logging import LoggingHook

    api.add_hooks([LoggingHook(evaluation_level="INFO")])

Flag values are not logged unless ``log_values=True``, since they may carry
sensitive data.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from openfeature.flag_evaluation import FlagEvaluationDetails
from openfeature.hook import Hook, HookContext

try:
    import structlog

    STRUCTLOG_AVAILABLE = True
except ImportError:
    structlog = None  # type: ignore[assignment]
    STRUCTLOG_AVAILABLE = False

__all__ = (
    "STRUCTLOG_AVAILABLE",
    "LoggerProtocol",
    "LoggingHook",
)

_LOGGER_NAME = "flags_openfeature"


@runtime_checkable
class LoggerProtocol(Protocol):
    """Minimal logger interface accepted by :class:`LoggingHook`."""

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...


def _get_default_logger() -> Any:
    if STRUCTLOG_AVAILABLE and structlog is not None:
        return structlog.get_logger(_LOGGER_NAME)
    return logging.getLogger(_LOGGER_NAME)


def _plain(value: Any) -> Any:
    """Enum members as their value, everything else unchanged."""
    return getattr(value, "value", value)


class LoggingHook(Hook):
    """OpenFeature hook that logs flag evaluations.

    Args:
        logger: Logger to use. Defaults to a structlog logger when structlog
            is installed, else ``logging.getLogger("flags_openfeature")``.
        evaluation_level: Level for successful evaluations.
        error_level: Level for evaluations that resolved with an error code
            and for exceptions raised during evaluation.
        log_values: Include the resolved value in log records.
        include_context: Include the targeting key and attribute names of
            the evaluation context.
    """

    def __init__(
        self,
        logger: LoggerProtocol | None = None,
        evaluation_level: str = "DEBUG",
        error_level: str = "ERROR",
        log_values: bool = False,
        include_context: bool = True,
    ) -> None:
        self._logger = logger if logger is not None else _get_default_logger()
        self._evaluation_level = evaluation_level.upper()
        self._error_level = error_level.upper()
        self._log_values = log_values
        self._include_context = include_context
        self._use_structlog = STRUCTLOG_AVAILABLE and not isinstance(self._logger, logging.Logger)

    @property
    def logger(self) -> LoggerProtocol:
        return self._logger

    def after(
        self,
        hook_context: HookContext,
        details: FlagEvaluationDetails[Any],
        hints: Mapping[str, Any],
    ) -> None:
        data = self._build_log_data(hook_context, details)
        if details.error_code is not None:
            self._log_with_data(self._error_level, f"Feature flag evaluation error: {hook_context.flag_key}", data)
        else:
            self._log_with_data(self._evaluation_level, f"Feature flag evaluated: {hook_context.flag_key}", data)

    def error(self, hook_context: HookContext, exception: Exception, hints: Mapping[str, Any]) -> None:
        data = self._build_log_data(hook_context)
        data["error_type"] = type(exception).__name__
        data["error_message"] = str(exception)

        message = f"Feature flag evaluation exception: {hook_context.flag_key}"
        log_method = self._get_log_method(self._error_level)
        if self._use_structlog:
            log_method(message, exc_info=exception, **data)
        else:
            log_method(message, exc_info=exception, extra=data)

    def bind(self, **kwargs: Any) -> LoggingHook:
        """Return a hook whose logger carries ``kwargs`` on every record.

        Binding needs structlog; with a stdlib logger the fields are dropped
        and an equivalent hook is returned.
        """
        logger = self._logger
        if self._use_structlog and structlog is not None:
            logger = self._logger.bind(**kwargs)
        hook = LoggingHook(
            logger=logger,
            evaluation_level=self._evaluation_level,
            error_level=self._error_level,
            log_values=self._log_values,
            include_context=self._include_context,
        )
        hook._use_structlog = self._use_structlog
        return hook

    def _get_log_method(self, level: str) -> Any:
        return {
            "DEBUG": self._logger.debug,
            "INFO": self._logger.info,
            "WARNING": self._logger.warning,
            "ERROR": self._logger.error,
        }.get(level, self._logger.debug)

    def _build_log_data(
        self,
        hook_context: HookContext,
        details: FlagEvaluationDetails[Any] | None = None,
    ) -> dict[str, Any]:
        data: dict[str, Any] = {
            "flag_key": hook_context.flag_key,
            "flag_type": _plain(hook_context.flag_type),
        }
        if hook_context.provider_metadata is not None:
            data["provider"] = hook_context.provider_metadata.name

        if details is not None:
            data["reason"] = _plain(details.reason)
            if details.variant is not None:
                data["variant"] = details.variant
            if details.error_code is not None:
                data["error_code"] = _plain(details.error_code)
                data["error_message"] = details.error_message
            if details.flag_metadata:
                data["flag_metadata"] = dict(details.flag_metadata)
            if self._log_values:
                data["value"] = details.value

        context = hook_context.evaluation_context
        if self._include_context and context is not None:
            if context.targeting_key:
                data["targeting_key"] = context.targeting_key
            if context.attributes:
                data["context_attributes"] = sorted(context.attributes)

        return data

    def _log_with_data(self, level: str, message: str, data: dict[str, Any]) -> None:
        log_method = self._get_log_method(level)
        if self._use_structlog:
            log_method(message, **data)
        else:
            log_method(message, extra=data)
