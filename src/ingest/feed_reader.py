"""Feed document readers.

This module loads significant-events feed documents from local files.
JSON is read natively; YAML fixtures are read through PyYAML.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import cast

from core.config import SigEventsConfig
from core.constants import SUPPORTED_FEED_EXTENSIONS
from core.errors import SigEventsDependencyError, SigEventsFeedError


def read_feed_payload(feed_path: str, config: SigEventsConfig) -> object:
    """Load a feed document from disk.

    Args:
        feed_path: Path to a ``.json``, ``.yaml`` or ``.yml`` file.
        config: Runtime configuration for encoding and size limits.

    Returns:
        Parsed document, not yet validated.

    Raises:
        SigEventsFeedError: If the file is missing, too large, or unparsable.
        SigEventsDependencyError: If a YAML feed is given without PyYAML.
    """
    feed_file = Path(feed_path).expanduser().resolve()
    _check_feed_file(feed_file, config)
    text = _read_feed_text(feed_file, config)
    if feed_file.suffix.lower() == ".json":
        return parse_feed_json(text, str(feed_file))
    return _parse_feed_yaml(text, feed_file)


def parse_feed_json(text: str, source: str = "<feed>") -> object:
    """Parse JSON feed text.

    Args:
        text: Raw JSON document.
        source: Label used in error messages.

    Returns:
        Parsed document.

    Raises:
        SigEventsFeedError: If JSON syntax is invalid.
    """
    try:
        return cast(object, json.loads(text))
    except json.JSONDecodeError as error:
        raise SigEventsFeedError(
            f"Failed to parse JSON feed at {source}:{error.lineno}: "
            f"{error.msg}. Fix the JSON syntax and retry."
        ) from error


def _check_feed_file(feed_file: Path, config: SigEventsConfig) -> None:
    if not feed_file.is_file():
        raise SigEventsFeedError(
            f"Failed to read feed at {feed_file}: file does not exist. "
            "Provide an existing feed document."
        )
    if feed_file.suffix.lower() not in SUPPORTED_FEED_EXTENSIONS:
        raise SigEventsFeedError(
            f"Unsupported feed file {feed_file}. "
            f"Supported extensions: {SUPPORTED_FEED_EXTENSIONS}."
        )
    size = feed_file.stat().st_size
    if size > config.max_feed_bytes:
        raise SigEventsFeedError(
            f"Feed at {feed_file} is {size} bytes, above the {config.max_feed_bytes} byte limit. "
            "Raise SIGEVENTS_MAX_FEED_BYTES to read it."
        )


def _read_feed_text(feed_file: Path, config: SigEventsConfig) -> str:
    try:
        return feed_file.read_text(encoding=config.feed_encoding)
    except (OSError, UnicodeDecodeError) as error:
        raise SigEventsFeedError(
            f"Failed to read feed at {feed_file}: {error}. "
            "Check file permissions and SIGEVENTS_FEED_ENCODING."
        ) from error


def _parse_feed_yaml(text: str, feed_file: Path) -> object:
    try:
        import yaml  # type: ignore[import-untyped]
    except ImportError as error:  # pragma: no cover - dependency failure
        raise SigEventsDependencyError(
            "YAML feed support requires PyYAML. Install with 'pip install pyyaml'."
        ) from error
    try:
        payload = cast(object, yaml.safe_load(text))
    except yaml.YAMLError as error:
        raise SigEventsFeedError(
            f"Failed to parse YAML feed at {feed_file}: {error}. Fix YAML syntax and retry."
        ) from error
    if payload is None:
        raise SigEventsFeedError(f"Feed at {feed_file} is empty. Provide summary and timeline.")
    return payload
