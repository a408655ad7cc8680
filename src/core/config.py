"""Runtime configuration model for sigevents.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass

from core.constants import (
    DEFAULT_FEED_ENCODING,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_FEED_BYTES,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import SigEventsConfigError


@dataclass(frozen=True)
class SigEventsConfig:
    """Validated runtime configuration.

    Attributes:
        feed_encoding: Text encoding used when reading feed files.
        max_feed_bytes: Largest feed file size accepted by the reader.
        log_level: Minimum structured log level.
    """

    feed_encoding: str
    max_feed_bytes: int
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "SigEventsConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            SigEventsConfigError: If environment values are invalid.
        """
        encoding_value = os.getenv("SIGEVENTS_FEED_ENCODING", DEFAULT_FEED_ENCODING)
        max_bytes_value = os.getenv("SIGEVENTS_MAX_FEED_BYTES", str(DEFAULT_MAX_FEED_BYTES))
        log_level_value = os.getenv("SIGEVENTS_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        return cls(
            feed_encoding=parse_feed_encoding(encoding_value),
            max_feed_bytes=_parse_max_feed_bytes(max_bytes_value),
            log_level=parse_log_level(log_level_value),
        )


def parse_feed_encoding(raw_value: str) -> str:
    """Validate a feed encoding name.

    Args:
        raw_value: Raw codec name from environment or CLI.

    Returns:
        Normalized codec name.

    Raises:
        SigEventsConfigError: If the codec is unknown.
    """
    try:
        return codecs.lookup(raw_value.strip()).name
    except LookupError as error:
        raise SigEventsConfigError(
            "Invalid SIGEVENTS_FEED_ENCODING value: "
            f"unknown codec '{raw_value}'. "
            "Set SIGEVENTS_FEED_ENCODING to a codec such as utf-8."
        ) from error


def parse_log_level(raw_value: str) -> str:
    """Validate a log level name.

    Raises:
        SigEventsConfigError: If the level is unsupported.
    """
    normalized_level = raw_value.strip().lower()
    if normalized_level not in SUPPORTED_LOG_LEVELS:
        raise SigEventsConfigError(
            f"Invalid SIGEVENTS_LOG_LEVEL value '{raw_value}'. "
            f"Use one of: {', '.join(SUPPORTED_LOG_LEVELS)}."
        )
    return normalized_level


def _parse_max_feed_bytes(raw_value: str) -> int:
    """Parse the maximum feed size environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed positive byte limit.

    Raises:
        SigEventsConfigError: If value is not a positive integer.
    """
    try:
        max_bytes = int(raw_value)
    except ValueError as error:
        raise SigEventsConfigError(
            "Invalid SIGEVENTS_MAX_FEED_BYTES value: "
            f"expected integer, got '{raw_value}'. "
            "Set SIGEVENTS_MAX_FEED_BYTES to a numeric value."
        ) from error
    if max_bytes <= 0:
        raise SigEventsConfigError(
            f"Invalid SIGEVENTS_MAX_FEED_BYTES value: expected a positive limit, got {max_bytes}."
        )
    return max_bytes
