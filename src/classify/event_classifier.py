"""Classify raw timeline events into typed event variants.

The timeline decodes all-or-nothing: one unclassifiable event fails the
whole feed instead of silently misrepresenting the edit history.
"""

from __future__ import annotations

from typing import Callable, Mapping, Sequence, cast

from classify.change_classifier import classify_changes
from classify.required_fields import missing_event_fields
from core.constants import (
    EVENT_LARGE_CHANGE,
    EVENT_NEW_TALK_PAGE_TOPIC,
    EVENT_SMALL_CHANGE,
    EVENT_VANDALISM_REVERT,
)
from core.errors import TimelineClassificationError
from core.logging_config import get_logger
from core.raw_types import RawChange, RawTimelineEvent
from core.timeline_types import (
    LargeChange,
    NewTalkPageTopic,
    SmallChange,
    TimelineEvent,
    VandalismRevert,
)

_LOGGER = get_logger(__name__)


def classify_event(raw_event: RawTimelineEvent) -> TimelineEvent | None:
    """Build the typed variant for one raw event.

    Args:
        raw_event: Intermediate event record.

    Returns:
        Typed event, or None when the tag is unsupported, a required field
        is missing, or a nested change fails to classify.
    """
    missing_fields = missing_event_fields(raw_event)
    if missing_fields is None or missing_fields:
        return None
    builder = _EVENT_BUILDERS[cast(str, raw_event.output_type)]
    return builder(raw_event)


def classify_timeline(raw_events: Sequence[RawTimelineEvent]) -> tuple[TimelineEvent, ...]:
    """Classify every event of a feed.

    Args:
        raw_events: Intermediate event records in feed order.

    Returns:
        Typed events, one per input record.

    Raises:
        TimelineClassificationError: If any event fails classification.
    """
    events: list[TimelineEvent] = []
    for index, raw_event in enumerate(raw_events):
        event = classify_event(raw_event)
        if event is None:
            _LOGGER.warning(
                "timeline_event_unclassified",
                index=index,
                output_type=raw_event.output_type,
                missing_fields=missing_event_fields(raw_event),
            )
            raise TimelineClassificationError(index, raw_event.output_type)
        events.append(event)
    return tuple(events)


def _build_large_change(raw_event: RawTimelineEvent) -> LargeChange | None:
    changes = classify_changes(cast("tuple[RawChange, ...]", raw_event.changes))
    if changes is None:
        return None
    return LargeChange(
        rev_id=cast(int, raw_event.rev_id),
        timestamp=cast(str, raw_event.timestamp),
        user=cast(str, raw_event.user),
        user_id=cast(int, raw_event.user_id),
        user_groups=_unique_groups(raw_event.user_groups),
        user_edit_count=cast(int, raw_event.user_edit_count),
        changes=changes,
    )


def _build_small_change(raw_event: RawTimelineEvent) -> SmallChange:
    return SmallChange(count=cast(int, raw_event.count))


def _build_vandalism_revert(raw_event: RawTimelineEvent) -> VandalismRevert:
    return VandalismRevert(
        rev_id=cast(int, raw_event.rev_id),
        timestamp=cast(str, raw_event.timestamp),
        user=cast(str, raw_event.user),
        user_id=cast(int, raw_event.user_id),
        sections=cast("tuple[str, ...]", raw_event.sections),
        user_groups=_unique_groups(raw_event.user_groups),
        user_edit_count=cast(int, raw_event.user_edit_count),
    )


def _build_new_talk_page_topic(raw_event: RawTimelineEvent) -> NewTalkPageTopic:
    return NewTalkPageTopic(
        rev_id=cast(int, raw_event.rev_id),
        timestamp=cast(str, raw_event.timestamp),
        user=cast(str, raw_event.user),
        user_id=cast(int, raw_event.user_id),
        section=cast(str, raw_event.section),
        snippet=cast(str, raw_event.snippet),
        user_groups=_unique_groups(raw_event.user_groups),
        user_edit_count=cast(int, raw_event.user_edit_count),
    )


def _unique_groups(user_groups: tuple[str, ...] | None) -> tuple[str, ...]:
    """Collapse duplicate group names, keeping first-seen order."""
    return tuple(dict.fromkeys(user_groups or ()))


_EVENT_BUILDERS: Mapping[str, Callable[[RawTimelineEvent], TimelineEvent | None]] = {
    EVENT_LARGE_CHANGE: _build_large_change,
    EVENT_SMALL_CHANGE: _build_small_change,
    EVENT_VANDALISM_REVERT: _build_vandalism_revert,
    EVENT_NEW_TALK_PAGE_TOPIC: _build_new_talk_page_topic,
}
