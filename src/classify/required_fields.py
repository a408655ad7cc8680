"""Required-field tables for event and change variants.

Field names refer to attributes of the raw record models. A tag missing
from a table is not a supported discriminator.
"""

from __future__ import annotations

from typing import Mapping

from core.constants import (
    CHANGE_ADDED_TEXT,
    CHANGE_DELETED_TEXT,
    CHANGE_NEW_TEMPLATE,
    EVENT_LARGE_CHANGE,
    EVENT_NEW_TALK_PAGE_TOPIC,
    EVENT_SMALL_CHANGE,
    EVENT_VANDALISM_REVERT,
)
from core.raw_types import RawChange, RawTimelineEvent

EVENT_REQUIRED_FIELDS: Mapping[str, tuple[str, ...]] = {
    EVENT_LARGE_CHANGE: (
        "rev_id",
        "timestamp",
        "user",
        "user_id",
        "user_groups",
        "user_edit_count",
        "changes",
    ),
    EVENT_SMALL_CHANGE: ("count",),
    EVENT_VANDALISM_REVERT: (
        "rev_id",
        "timestamp",
        "user",
        "user_id",
        "sections",
        "user_groups",
        "user_edit_count",
    ),
    EVENT_NEW_TALK_PAGE_TOPIC: (
        "rev_id",
        "timestamp",
        "user",
        "user_id",
        "section",
        "snippet",
        "user_groups",
        "user_edit_count",
    ),
}

CHANGE_REQUIRED_FIELDS: Mapping[str, tuple[str, ...]] = {
    CHANGE_ADDED_TEXT: ("sections", "snippet", "snippet_type", "character_count"),
    CHANGE_DELETED_TEXT: ("sections", "character_count"),
    CHANGE_NEW_TEMPLATE: ("sections", "templates"),
}


def missing_event_fields(raw_event: RawTimelineEvent) -> tuple[str, ...] | None:
    """Return required fields absent from an event, or None for unknown tags."""
    return _missing_fields(raw_event, raw_event.output_type, EVENT_REQUIRED_FIELDS)


def missing_change_fields(raw_change: RawChange) -> tuple[str, ...] | None:
    """Return required fields absent from a change, or None for unknown tags."""
    return _missing_fields(raw_change, raw_change.output_type, CHANGE_REQUIRED_FIELDS)


def _missing_fields(
    record: object,
    output_type: str | None,
    table: Mapping[str, tuple[str, ...]],
) -> tuple[str, ...] | None:
    if output_type is None or output_type not in table:
        return None
    return tuple(
        field_name for field_name in table[output_type] if getattr(record, field_name) is None
    )
