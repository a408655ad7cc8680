"""Unit tests for change classification."""

from __future__ import annotations

from classify.change_classifier import classify_change, classify_changes
from core.raw_types import RawChange
from core.template_types import BookCitation
from core.timeline_types import (
    AddedTextChange,
    DeletedTextChange,
    NewTemplatesChange,
    SnippetType,
)


def _added_text(**overrides: object) -> RawChange:
    fields: dict[str, object] = {
        "output_type": "added-text",
        "sections": ("History",),
        "snippet": "Opened in 1932.",
        "snippet_type": 3,
        "character_count": 15,
    }
    fields.update(overrides)
    return RawChange(**fields)  # type: ignore[arg-type]


def test_classify_change_builds_added_text() -> None:
    """Complete added-text records become AddedTextChange."""
    change = classify_change(_added_text())

    assert change == AddedTextChange(
        sections=("History",),
        snippet="Opened in 1932.",
        snippet_type=SnippetType.MIXED_ADDITION_DELETION_SAME_LINE,
        character_count=15,
    )


def test_classify_change_rejects_added_text_without_snippet() -> None:
    """Snippet is mandatory for added text."""
    assert classify_change(_added_text(snippet=None)) is None


def test_classify_change_rejects_unknown_snippet_type() -> None:
    """Snippet types outside 1, 3, 5 are treated as absent."""
    assert classify_change(_added_text(snippet_type=2)) is None


def test_classify_change_rejects_missing_sections() -> None:
    """Every change needs its affected sections."""
    raw_change = RawChange(output_type="deleted-text", character_count=4)

    assert classify_change(raw_change) is None


def test_classify_change_builds_deleted_text() -> None:
    """Deleted text keeps sections and character count."""
    raw_change = RawChange(output_type="deleted-text", sections=("Lead",), character_count=4)

    change = classify_change(raw_change)

    assert change == DeletedTextChange(sections=("Lead",), character_count=4)


def test_classify_change_resolves_templates_and_keeps_raw_ones() -> None:
    """New-template changes resolve what they can and keep the raw input."""
    raw_templates = (
        {"name": "Cite book", "title": "Bridges"},
        {"name": "Cite book"},
    )
    raw_change = RawChange(output_type="new-template", sections=("Refs",), templates=raw_templates)

    change = classify_change(raw_change)

    assert isinstance(change, NewTemplatesChange)
    assert change.templates == (BookCitation(title="Bridges"),)
    assert len(change.raw_templates) == 2


def test_classify_change_copies_raw_templates() -> None:
    """Later edits to the raw dictionaries must not reach the typed change."""
    raw_template = {"name": "Cite book", "title": "Bridges"}
    raw_change = RawChange(output_type="new-template", sections=("Refs",), templates=(raw_template,))

    change = classify_change(raw_change)
    raw_template["title"] = "Tunnels"

    assert isinstance(change, NewTemplatesChange)
    assert change.raw_templates[0]["title"] == "Bridges"


def test_classify_change_rejects_new_template_without_templates() -> None:
    """A new-template change must carry a templates list."""
    raw_change = RawChange(output_type="new-template", sections=("Refs",))

    assert classify_change(raw_change) is None


def test_classify_change_rejects_unknown_tag() -> None:
    """Unsupported discriminators do not classify."""
    raw_change = RawChange(output_type="moved-paragraph", sections=(), character_count=1)

    assert classify_change(raw_change) is None


def test_classify_changes_fails_when_one_change_fails() -> None:
    """One failing change invalidates the whole list."""
    raw_changes = [
        RawChange(output_type="deleted-text", sections=(), character_count=1),
        RawChange(output_type="moved-paragraph", sections=(), character_count=1),
    ]

    assert classify_changes(raw_changes) is None


def test_classify_changes_preserves_count_and_order() -> None:
    """Successful classification yields one change per input record."""
    raw_changes = [
        RawChange(output_type="deleted-text", sections=(), character_count=1),
        _added_text(),
    ]

    changes = classify_changes(raw_changes)

    assert changes is not None
    assert [type(change) for change in changes] == [DeletedTextChange, AddedTextChange]


def test_classify_changes_accepts_empty_list() -> None:
    """A large change may report no significant changes."""
    assert classify_changes([]) == ()
