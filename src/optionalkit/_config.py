"""Library configuration: LogFormat enum, OptionalConfig, and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum

from optionalkit._logging import configure_logging

__all__ = [
    'LogFormat',
    'OptionalConfig',
    'get_config',
    'init',
]

LOG_LEVEL_ENV = 'OPTIONALKIT_LOG_LEVEL'
LOG_FORMAT_ENV = 'OPTIONALKIT_LOG_FORMAT'


class LogFormat(Enum):
    """Rendering of optionalkit log output."""

    JSON = 'json'
    CONSOLE = 'console'


@dataclass(frozen=True)
class OptionalConfig:
    """Configuration for optionalkit.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        log_format: JSON or console rendering.
    """

    log_level: str | None = None
    log_format: LogFormat = LogFormat.JSON


_config: OptionalConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from OPTIONALKIT_LOG_LEVEL, None when unset or blank."""
    env_level = os.environ.get(LOG_LEVEL_ENV, '').strip()
    return env_level.upper() or None


def _detect_log_format() -> LogFormat:
    """Read the log format from OPTIONALKIT_LOG_FORMAT, defaulting to JSON."""
    env_format = os.environ.get(LOG_FORMAT_ENV, '').lower()
    if env_format == 'console':
        return LogFormat.CONSOLE
    if env_format and env_format != 'json':
        logging.warning("Unknown %s value '%s', defaulting to json", LOG_FORMAT_ENV, env_format)
    return LogFormat.JSON


def init(
    log_level: str | None = None,
    log_format: LogFormat | str | None = None,
) -> OptionalConfig:
    """Initialize optionalkit with the given configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Falls back to
            OPTIONALKIT_LOG_LEVEL; None leaves logging untouched.
        log_format: LogFormat enum or string ("json", "console"). Falls back
            to OPTIONALKIT_LOG_FORMAT.

    Returns:
        The OptionalConfig that was set.

    Raises:
        ValueError: If log_format is not a known format.

    Example:
        ```python
        import optionalkit

        optionalkit.init(log_level='DEBUG', log_format='console')
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()

    if log_format is None:
        resolved_format = _detect_log_format()
    elif isinstance(log_format, str):
        resolved_format = LogFormat(log_format.lower())
    else:
        resolved_format = log_format

    _config = OptionalConfig(log_level=resolved_level, log_format=resolved_format)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_format is LogFormat.JSON)

    return _config


def get_config() -> OptionalConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'optionalkit not initialized. Call optionalkit.init() first.'
        raise RuntimeError(msg)
    return _config
