"""Library configuration: OptionConfig, init() and get_config()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_option._logging import configure_logging

__all__ = [
    'OptionConfig',
    'get_config',
    'init',
    'reset',
]

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'0', 'false', 'no', 'off', ''})


@dataclass(frozen=True)
class OptionConfig:
    """Configuration for klaw-option.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_output: Render logs as JSON (True) or as colored console output (False).
        trace_unwraps: Emit an `absent_unwrap` warning event before each failed unwrap.
    """

    log_level: str | None = None
    json_output: bool = True
    trace_unwraps: bool = False


# Set by init(), or resolved lazily from the environment by get_config()
_config: OptionConfig | None = None


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    logging.warning("Unknown %s value '%s', defaulting to %s", name, raw, default)
    return default


def _env_log_level() -> str | None:
    raw = os.environ.get('KLAW_OPTION_LOG_LEVEL', '').strip()
    return raw.upper() or None


def init(
    log_level: str | None = None,
    *,
    json_output: bool | None = None,
    trace_unwraps: bool | None = None,
) -> OptionConfig:
    """Initialize klaw-option with the given configuration.

    Unset arguments are read from the environment:
    KLAW_OPTION_LOG_LEVEL, KLAW_OPTION_JSON_LOGS and KLAW_OPTION_TRACE_UNWRAPS.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = no logging setup.
        json_output: Emit JSON logs instead of console output.
        trace_unwraps: Log each unwrap attempted on Nothing.

    Returns:
        The OptionConfig that was set.

    Example:
        ```python
        from klaw_option import init

        init(log_level='DEBUG', json_output=False, trace_unwraps=True)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _env_log_level()
    resolved_json = json_output if json_output is not None else _env_flag('KLAW_OPTION_JSON_LOGS', True)
    resolved_trace = (
        trace_unwraps if trace_unwraps is not None else _env_flag('KLAW_OPTION_TRACE_UNWRAPS', False)
    )

    _config = OptionConfig(
        log_level=resolved_level,
        json_output=resolved_json,
        trace_unwraps=resolved_trace,
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> OptionConfig:
    """Get the current configuration.

    When init() has not been called, the configuration is resolved from the
    environment without touching logging setup.
    """
    global _config  # noqa: PLW0603

    if _config is None:
        _config = OptionConfig(
            log_level=_env_log_level(),
            json_output=_env_flag('KLAW_OPTION_JSON_LOGS', True),
            trace_unwraps=_env_flag('KLAW_OPTION_TRACE_UNWRAPS', False),
        )
    return _config


def reset() -> None:
    """Forget the current configuration so the next get_config() re-reads the environment."""
    global _config  # noqa: PLW0603

    _config = None
