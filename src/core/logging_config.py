"""Structured logging configuration.

This module initializes structlog with a stable JSON line format
so decode diagnostics carry machine-readable context fields.
Log lines go to stderr to keep command output parseable.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from core.config import parse_log_level
from core.constants import DEFAULT_LOG_LEVEL


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    if not structlog.is_configured():
        configure_logging(DEFAULT_LOG_LEVEL)
    return structlog.get_logger(name)


def configure_logging(level_name: str) -> None:
    """Configure structlog processors and the minimum level.

    Args:
        level_name: One of debug, info, warning, error.

    Raises:
        SigEventsConfigError: If the level name is unsupported.
    """
    level = logging.getLevelName(parse_log_level(level_name).upper())
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )


def _stderr_logger_factory(*args: Any) -> structlog.PrintLogger:
    """Build a print logger bound to the current stderr stream."""
    return structlog.PrintLogger(file=sys.stderr)
