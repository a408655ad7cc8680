"""JSON-safe rendering of decoded timelines.

Each event and change is tagged with its ``outputType`` and each template
with its ``shape`` so the payload can be inspected without the types.
"""

from __future__ import annotations

from dataclasses import fields
from enum import Enum

from core.template_types import Template
from core.timeline_types import (
    Change,
    LargeChange,
    NewTemplatesChange,
    SignificantEvents,
    TimelineEvent,
)


def significant_events_to_payload(result: SignificantEvents) -> dict[str, object]:
    """Serialize a decoded timeline into a JSON-safe payload.

    Args:
        result: Decoded feed.

    Returns:
        Dictionary payload for JSON encoding.
    """
    summary = result.summary
    return {
        "nextRvStartId": result.next_rv_start_id,
        "sha": result.sha,
        "summary": {
            "earliestTimestamp": summary.earliest_timestamp,
            "numChanges": summary.num_changes,
            "numUsers": summary.num_users,
        },
        "timeline": [event_to_payload(event) for event in result.events],
    }


def event_to_payload(event: TimelineEvent) -> dict[str, object]:
    """Serialize one typed event."""
    payload: dict[str, object] = {"outputType": event.output_type}
    payload.update(_field_payload(event, skip=("changes",)))
    if isinstance(event, LargeChange):
        payload["changes"] = [change_to_payload(change) for change in event.changes]
    return payload


def change_to_payload(change: Change) -> dict[str, object]:
    """Serialize one typed change, leaving raw templates out."""
    payload: dict[str, object] = {"outputType": change.output_type}
    payload.update(_field_payload(change, skip=("templates", "raw_templates")))
    if isinstance(change, NewTemplatesChange):
        payload["templates"] = [template_to_payload(template) for template in change.templates]
    return payload


def template_to_payload(template: Template) -> dict[str, object]:
    """Serialize one typed template."""
    payload: dict[str, object] = {"shape": template.shape.value}
    payload.update(_field_payload(template, skip=()))
    return payload


def _field_payload(value: object, skip: tuple[str, ...]) -> dict[str, object]:
    payload: dict[str, object] = {}
    for model_field in fields(value):  # type: ignore[arg-type]
        if model_field.name in skip:
            continue
        payload[model_field.name] = _to_json_value(getattr(value, model_field.name))
    return payload


def _to_json_value(value: object) -> object:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, tuple):
        return list(value)
    return value
