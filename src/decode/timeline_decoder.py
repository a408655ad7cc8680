"""Decode significant-events feeds into typed timelines.

Decoding is pure and synchronous. A successful result always holds one
typed event per input event; anything less raises TimelineDecodeError.
"""

from __future__ import annotations

from classify.event_classifier import classify_timeline
from core.config import SigEventsConfig
from core.logging_config import get_logger
from core.timeline_types import LargeChange, NewTemplatesChange, SignificantEvents
from ingest.feed_reader import parse_feed_json, read_feed_payload
from ingest.raw_records import parse_raw_feed

_LOGGER = get_logger(__name__)


def decode_significant_events(payload: object) -> SignificantEvents:
    """Decode a parsed feed document.

    Args:
        payload: JSON-shaped feed document.

    Returns:
        Complete typed timeline.

    Raises:
        TimelineEnvelopeError: If the envelope is malformed.
        TimelineClassificationError: If any event or nested change fails.
    """
    raw_feed = parse_raw_feed(payload)
    events = classify_timeline(raw_feed.events)
    result = SignificantEvents(
        next_rv_start_id=raw_feed.next_rv_start_id,
        sha=raw_feed.sha,
        summary=raw_feed.summary,
        events=events,
    )
    _log_decode_completion(result)
    return result


def decode_feed_text(text: str) -> SignificantEvents:
    """Decode a feed from JSON text such as an HTTP response body.

    Raises:
        SigEventsFeedError: If the text is not valid JSON.
        TimelineDecodeError: If the document does not decode.
    """
    return decode_significant_events(parse_feed_json(text))


def decode_feed_file(feed_path: str, config: SigEventsConfig) -> SignificantEvents:
    """Decode a feed document stored on disk.

    Args:
        feed_path: Path to a JSON or YAML feed document.
        config: Runtime configuration for file reading.

    Returns:
        Complete typed timeline.
    """
    return decode_significant_events(read_feed_payload(feed_path, config))


def count_changes(result: SignificantEvents) -> int:
    """Count classified changes across all large changes."""
    return sum(len(event.changes) for event in result.events if isinstance(event, LargeChange))


def count_templates(result: SignificantEvents) -> int:
    """Count resolved templates across all new-template changes."""
    return sum(
        len(change.templates)
        for event in result.events
        if isinstance(event, LargeChange)
        for change in event.changes
        if isinstance(change, NewTemplatesChange)
    )


def _log_decode_completion(result: SignificantEvents) -> None:
    _LOGGER.info(
        "timeline_decoded",
        event_count=len(result.events),
        change_count=count_changes(result),
        template_count=count_templates(result),
        sha=result.sha,
        next_rv_start_id=result.next_rv_start_id,
    )
