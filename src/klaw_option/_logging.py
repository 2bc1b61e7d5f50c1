"""Structured logging for klaw-option.

The library emits a single event, and only while unwrap tracing is enabled
(`init(trace_unwraps=True)` or `KLAW_OPTION_TRACE_UNWRAPS=1`):

    absent_unwrap   warning, logger "klaw_option"
        operation   the failing call: 'unwrap', 'expect' or 'raise_if_none'
        error_type  class name of the exception about to be raised
        detail      str() of that exception

configure_logging() installs a structlog ProcessorFormatter on the root
logger so structlog events and stdlib records share one renderer. Log hooks
see every event dict, which is how tests and applications pick up
`absent_unwrap` without parsing rendered output.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import Any

import structlog

__all__ = [
    'ABSENT_UNWRAP_EVENT',
    'LOGGER_NAME',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
    'trace_absent_unwrap',
]

LOGGER_NAME = 'klaw_option'
ABSENT_UNWRAP_EVENT = 'absent_unwrap'

type LogHook = Callable[[dict[str, Any]], None]

_log_hooks: list[LogHook] = []


def add_log_hook(hook: LogHook) -> None:
    """Register `hook` to receive a copy of every event dict."""
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Unregister `hook`; unknown hooks are ignored."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    _log_hooks.clear()


def _run_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in tuple(_log_hooks):
        try:
            hook(dict(event_dict))
        except Exception:  # noqa: BLE001, S112
            continue  # a broken hook must not stop the event
    return event_dict


def _pre_chain() -> list[Any]:
    """Processors applied to structlog events and foreign stdlib records alike."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _run_hooks,
    ]


def _renderer(json_output: bool) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Route structlog and stdlib logging through one stderr handler.

    Calling it again replaces the root handler, so a later call with a
    different `json_output` changes how every following event is rendered.

    Args:
        level: Root logging level ("DEBUG", "INFO", "WARNING", ...).
        json_output: Render JSON lines if True, console output otherwise.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_pre_chain(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(json_output),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None, **context: Any) -> Any:
    """Return a structlog logger, bound to `context` if any is given.

    Args:
        name: Logger name; defaults to "klaw_option".
        **context: Key/value pairs added to every event of the returned logger.
    """
    logger = structlog.get_logger(name or LOGGER_NAME)
    if context:
        return logger.bind(**context)
    return logger


def trace_absent_unwrap(operation: str, exc: BaseException) -> None:
    """Emit the `absent_unwrap` event for an unwrap attempted on Nothing.

    The logger is resolved on every call so the event follows the most
    recent configure_logging().
    """
    get_logger(LOGGER_NAME, operation=operation).warning(
        ABSENT_UNWRAP_EVENT,
        error_type=type(exc).__name__,
        detail=str(exc),
    )
