"""Classify raw change records into typed change variants.

A large change is only valid when every one of its changes classifies,
so ``classify_changes`` is all-or-nothing.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping, Sequence, cast

from citations.template_resolver import resolve_templates
from classify.required_fields import missing_change_fields
from core.constants import CHANGE_ADDED_TEXT, CHANGE_DELETED_TEXT, CHANGE_NEW_TEMPLATE
from core.logging_config import get_logger
from core.raw_types import RawChange, RawTemplate
from core.timeline_types import (
    AddedTextChange,
    Change,
    DeletedTextChange,
    NewTemplatesChange,
    SnippetType,
)

_LOGGER = get_logger(__name__)


def classify_change(raw_change: RawChange) -> Change | None:
    """Build the typed variant for one raw change.

    Args:
        raw_change: Intermediate change record.

    Returns:
        Typed change, or None when the tag is unsupported or a required
        field is missing.
    """
    missing_fields = missing_change_fields(raw_change)
    if missing_fields is None or missing_fields:
        return None
    builder = _CHANGE_BUILDERS[cast(str, raw_change.output_type)]
    return builder(raw_change)


def classify_changes(raw_changes: Sequence[RawChange]) -> tuple[Change, ...] | None:
    """Classify every change of a large change.

    Args:
        raw_changes: Intermediate change records in input order.

    Returns:
        Typed changes, or None if any single change fails.
    """
    changes: list[Change] = []
    for index, raw_change in enumerate(raw_changes):
        change = classify_change(raw_change)
        if change is None:
            _LOGGER.warning(
                "timeline_change_unclassified",
                index=index,
                output_type=raw_change.output_type,
                missing_fields=missing_change_fields(raw_change),
            )
            return None
        changes.append(change)
    return tuple(changes)


def _build_added_text(raw_change: RawChange) -> AddedTextChange | None:
    snippet_type = _to_snippet_type(raw_change.snippet_type)
    if snippet_type is None:
        return None
    return AddedTextChange(
        sections=cast("tuple[str, ...]", raw_change.sections),
        snippet=cast(str, raw_change.snippet),
        snippet_type=snippet_type,
        character_count=cast(int, raw_change.character_count),
    )


def _build_deleted_text(raw_change: RawChange) -> DeletedTextChange:
    return DeletedTextChange(
        sections=cast("tuple[str, ...]", raw_change.sections),
        character_count=cast(int, raw_change.character_count),
    )


def _build_new_templates(raw_change: RawChange) -> NewTemplatesChange:
    raw_templates = cast("tuple[RawTemplate, ...]", raw_change.templates)
    return NewTemplatesChange(
        sections=cast("tuple[str, ...]", raw_change.sections),
        templates=resolve_templates(raw_templates),
        raw_templates=tuple(MappingProxyType(dict(template)) for template in raw_templates),
    )


def _to_snippet_type(raw_value: int | None) -> SnippetType | None:
    if raw_value is None:
        return None
    try:
        return SnippetType(raw_value)
    except ValueError:
        return None


_CHANGE_BUILDERS: Mapping[str, Callable[[RawChange], Change | None]] = {
    CHANGE_ADDED_TEXT: _build_added_text,
    CHANGE_DELETED_TEXT: _build_deleted_text,
    CHANGE_NEW_TEMPLATE: _build_new_templates,
}
