"""Loosely-typed intermediate records.

These models mirror the feed wire format after basic destructuring.
Every field is optional here; classification decides what is required.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from core.timeline_types import Summary

RawTemplate = Mapping[str, str]


@dataclass(frozen=True)
class RawChange:
    """One entry of a large change's ``significantChanges`` list.

    Attributes:
        output_type: Discriminator tag such as ``added-text``.
        sections: Affected section headings.
        snippet: Text snippet for added text.
        snippet_type: Integer snippet kind from the wire.
        character_count: Number of characters added or removed.
        templates: Raw template dictionaries for new-template changes.
    """

    output_type: str | None = None
    sections: tuple[str, ...] | None = None
    snippet: str | None = None
    snippet_type: int | None = None
    character_count: int | None = None
    templates: tuple[RawTemplate, ...] | None = None


@dataclass(frozen=True)
class RawTimelineEvent:
    """One entry of the feed ``timeline`` list.

    Attributes:
        output_type: Discriminator tag such as ``large-change``.
        rev_id: Revision identifier.
        timestamp: Opaque timestamp string.
        user: Author name.
        user_id: Author identifier.
        user_groups: Author group memberships.
        user_edit_count: Author's historical edit count.
        count: Number of collapsed small edits.
        sections: Affected section headings.
        section: Talk page section name.
        snippet: Talk page text snippet.
        changes: Nested change records for large changes.
    """

    output_type: str | None = None
    rev_id: int | None = None
    timestamp: str | None = None
    user: str | None = None
    user_id: int | None = None
    user_groups: tuple[str, ...] | None = None
    user_edit_count: int | None = None
    count: int | None = None
    sections: tuple[str, ...] | None = None
    section: str | None = None
    snippet: str | None = None
    changes: tuple[RawChange, ...] | None = None


@dataclass(frozen=True)
class RawFeed:
    """Destructured feed envelope.

    Attributes:
        next_rv_start_id: Cursor for the next page, if any.
        sha: Content revision fingerprint, if any.
        summary: Mandatory feed summary.
        events: Ordered intermediate event records.
    """

    next_rv_start_id: int | None
    sha: str | None
    summary: Summary
    events: tuple[RawTimelineEvent, ...]
