"""Structured logging for optionalkit.

Library code logs DEBUG events through structlog loggers that wrap stdlib
loggers, so nothing is emitted until the application enables the level.
configure_logging() renders those events, and any other stdlib record, through
one structlog ProcessorFormatter on the root logger.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

__all__ = ['configure_logging', 'get_logger']

_PRE_CHAIN: list[Any] = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt='iso'),
]


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Send optionalkit events to stderr at the given level.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON lines. If False, use console output.
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger backed by the stdlib logger `name`.

    Args:
        name: Logger name. Defaults to "optionalkit".

    Returns:
        A structlog BoundLogger; events below the stdlib level are dropped.
    """
    return structlog.wrap_logger(
        logging.getLogger(name or 'optionalkit'),
        processors=[
            structlog.stdlib.filter_by_level,
            *_PRE_CHAIN,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )
