"""Raw record layer for significant-events feeds.

This module destructures a JSON-shaped feed into intermediate records.
Field-level type mismatches are treated as absent; only a malformed
envelope raises, so classification decides what each variant needs.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Sequence

from core.errors import TimelineEnvelopeError
from core.raw_types import RawChange, RawFeed, RawTemplate, RawTimelineEvent
from core.timeline_types import Summary


def parse_raw_feed(payload: object) -> RawFeed:
    """Destructure a feed payload into intermediate records.

    Args:
        payload: Parsed JSON document.

    Returns:
        Raw feed with optional cursor and fingerprint.

    Raises:
        TimelineEnvelopeError: If summary or timeline is missing or malformed.
    """
    root = _expect_mapping(payload, "feed root")
    summary = _parse_summary(root.get("summary"))
    if "timeline" not in root:
        raise TimelineEnvelopeError(
            "Feed is missing required field 'timeline'. Provide the event list."
        )
    event_rows = _expect_sequence(root["timeline"], "feed timeline")
    events = tuple(
        _parse_event(row, f"timeline event #{index}") for index, row in enumerate(event_rows)
    )
    return RawFeed(
        next_rv_start_id=_optional_count(root, "nextRvStartId"),
        sha=_optional_string(root, "sha"),
        summary=summary,
        events=events,
    )


def _parse_summary(value: object) -> Summary:
    if value is None:
        raise TimelineEnvelopeError(
            "Feed is missing required field 'summary'. Provide earliestTimestamp, "
            "numChanges and numUsers."
        )
    summary_mapping = _expect_mapping(value, "feed summary")
    earliest_timestamp = _optional_string(summary_mapping, "earliestTimestamp")
    num_changes = _optional_count(summary_mapping, "numChanges")
    num_users = _optional_count(summary_mapping, "numUsers")
    if earliest_timestamp is None or num_changes is None or num_users is None:
        raise TimelineEnvelopeError(
            "Feed summary must contain string 'earliestTimestamp' and non-negative "
            "integers 'numChanges' and 'numUsers'."
        )
    return Summary(
        earliest_timestamp=earliest_timestamp,
        num_changes=num_changes,
        num_users=num_users,
    )


def _parse_event(value: object, context: str) -> RawTimelineEvent:
    row = _expect_mapping(value, context)
    return RawTimelineEvent(
        output_type=_optional_string(row, "outputType"),
        rev_id=_optional_count(row, "revid"),
        timestamp=_optional_string(row, "timestamp"),
        user=_optional_string(row, "user"),
        user_id=_optional_count(row, "userid"),
        user_groups=_optional_string_list(row, "userGroups"),
        user_edit_count=_optional_count(row, "userEditCount"),
        count=_optional_count(row, "count"),
        sections=_optional_string_list(row, "sections"),
        section=_optional_string(row, "section"),
        snippet=_optional_string(row, "snippet"),
        changes=_optional_changes(row, context),
    )


def _optional_changes(row: Mapping[str, object], context: str) -> tuple[RawChange, ...] | None:
    raw_changes = row.get("significantChanges")
    if not _is_list(raw_changes):
        return None
    return tuple(
        _parse_change(change_row, f"{context} change #{index}")
        for index, change_row in enumerate(raw_changes)  # type: ignore[arg-type]
    )


def _parse_change(value: object, context: str) -> RawChange:
    row = _expect_mapping(value, context)
    return RawChange(
        output_type=_optional_string(row, "outputType"),
        sections=_optional_string_list(row, "sections"),
        snippet=_optional_string(row, "snippet"),
        snippet_type=_optional_count(row, "snippetType"),
        character_count=_optional_count(row, "characterCount"),
        templates=_optional_templates(row),
    )


def _optional_templates(row: Mapping[str, object]) -> tuple[RawTemplate, ...] | None:
    raw_templates = row.get("templates")
    if not _is_list(raw_templates):
        return None
    templates: list[RawTemplate] = []
    for raw_template in raw_templates:  # type: ignore[union-attr]
        if not isinstance(raw_template, Mapping):
            return None
        templates.append(
            MappingProxyType(
                {
                    key: item
                    for key, item in raw_template.items()
                    if isinstance(key, str) and isinstance(item, str)
                }
            )
        )
    return tuple(templates)


def _optional_string(mapping: Mapping[str, object], field_name: str) -> str | None:
    value = mapping.get(field_name)
    return value if isinstance(value, str) else None


def _optional_count(mapping: Mapping[str, object], field_name: str) -> int | None:
    value = mapping.get(field_name)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value >= 0 else None


def _optional_string_list(mapping: Mapping[str, object], field_name: str) -> tuple[str, ...] | None:
    value = mapping.get(field_name)
    if not _is_list(value):
        return None
    items = tuple(value)  # type: ignore[arg-type]
    if not all(isinstance(item, str) for item in items):
        return None
    return items


def _is_list(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _expect_mapping(value: object, context: str) -> Mapping[str, object]:
    if isinstance(value, Mapping):
        return value
    raise TimelineEnvelopeError(
        f"Invalid {context}: expected object mapping, got {type(value).__name__}."
    )


def _expect_sequence(value: object, context: str) -> Sequence[object]:
    if _is_list(value):
        return value  # type: ignore[return-value]
    raise TimelineEnvelopeError(f"Invalid {context}: expected list, got {type(value).__name__}.")
