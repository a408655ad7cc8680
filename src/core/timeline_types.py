"""Typed timeline models.

This module defines the immutable variants produced by event and change
classification. Each variant records the discriminator that built it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, Mapping, Union

from core.constants import (
    CHANGE_ADDED_TEXT,
    CHANGE_DELETED_TEXT,
    CHANGE_NEW_TEMPLATE,
    EVENT_LARGE_CHANGE,
    EVENT_NEW_TALK_PAGE_TOPIC,
    EVENT_SMALL_CHANGE,
    EVENT_VANDALISM_REVERT,
)
from core.template_types import Template


class SnippetType(IntEnum):
    """Kind of snippet attached to an added-text change."""

    PLAIN_ADDITION = 1
    MIXED_ADDITION_DELETION_SAME_LINE = 3
    MIXED_ADDITION_DELETION_MOVED_LINE = 5


@dataclass(frozen=True)
class Summary:
    """Aggregate counts reported alongside the timeline.

    Attributes:
        earliest_timestamp: Opaque timestamp of the earliest change.
        num_changes: Total change count.
        num_users: Distinct user count.
    """

    earliest_timestamp: str
    num_changes: int
    num_users: int


@dataclass(frozen=True)
class AddedTextChange:
    """Text added inside a large change."""

    output_type: ClassVar[str] = CHANGE_ADDED_TEXT

    sections: tuple[str, ...]
    snippet: str
    snippet_type: SnippetType
    character_count: int


@dataclass(frozen=True)
class DeletedTextChange:
    """Text removed inside a large change."""

    output_type: ClassVar[str] = CHANGE_DELETED_TEXT

    sections: tuple[str, ...]
    character_count: int


@dataclass(frozen=True)
class NewTemplatesChange:
    """Templates added inside a large change.

    Attributes:
        sections: Affected section headings.
        templates: Resolved templates, in input order, unrecognized ones omitted.
        raw_templates: Read-only raw template mappings as received. Excluded
            from equality and hashing.
    """

    output_type: ClassVar[str] = CHANGE_NEW_TEMPLATE

    sections: tuple[str, ...]
    templates: tuple[Template, ...]
    raw_templates: tuple[Mapping[str, str], ...] = field(
        default=(), repr=False, compare=False, hash=False
    )


Change = Union[AddedTextChange, DeletedTextChange, NewTemplatesChange]


@dataclass(frozen=True)
class LargeChange:
    """A significant revision with its classified changes."""

    output_type: ClassVar[str] = EVENT_LARGE_CHANGE

    rev_id: int
    timestamp: str
    user: str
    user_id: int
    user_groups: tuple[str, ...]
    user_edit_count: int
    changes: tuple[Change, ...]


@dataclass(frozen=True)
class SmallChange:
    """A run of minor edits collapsed into one entry."""

    output_type: ClassVar[str] = EVENT_SMALL_CHANGE

    count: int


@dataclass(frozen=True)
class VandalismRevert:
    """A revision that reverted vandalism."""

    output_type: ClassVar[str] = EVENT_VANDALISM_REVERT

    rev_id: int
    timestamp: str
    user: str
    user_id: int
    sections: tuple[str, ...]
    user_groups: tuple[str, ...]
    user_edit_count: int


@dataclass(frozen=True)
class NewTalkPageTopic:
    """A new topic started on the talk page."""

    output_type: ClassVar[str] = EVENT_NEW_TALK_PAGE_TOPIC

    rev_id: int
    timestamp: str
    user: str
    user_id: int
    section: str
    snippet: str
    user_groups: tuple[str, ...]
    user_edit_count: int


TimelineEvent = Union[LargeChange, SmallChange, VandalismRevert, NewTalkPageTopic]


@dataclass(frozen=True)
class SignificantEvents:
    """Fully decoded feed.

    Attributes:
        next_rv_start_id: Cursor for the next page, if any.
        sha: Content revision fingerprint, if any.
        summary: Feed summary counts.
        events: Typed timeline, one entry per input event.
    """

    next_rv_start_id: int | None
    sha: str | None
    summary: Summary
    events: tuple[TimelineEvent, ...]
