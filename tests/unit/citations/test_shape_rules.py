"""Unit tests for template shape selection."""

from __future__ import annotations

import pytest

from citations.shape_rules import CITATION_SHAPE_RULES, select_template_shape, template_shape_for
from core.template_types import TemplateShape


@pytest.mark.parametrize(
    ("name", "expected_shape"),
    [
        ("Cite book", TemplateShape.BOOK_CITATION),
        ("cite JOURNAL", TemplateShape.JOURNAL_CITATION),
        ("Cite web", TemplateShape.WEBSITE_CITATION),
        ("Cite news", TemplateShape.NEWS_CITATION),
        ("Short description", TemplateShape.ARTICLE_DESCRIPTION),
    ],
)
def test_select_template_shape_matches_known_names(
    name: str,
    expected_shape: TemplateShape,
) -> None:
    """Known names should map to their shapes regardless of case."""
    assert select_template_shape(name) == expected_shape


def test_select_template_shape_prefers_book_over_journal() -> None:
    """Rules are evaluated in order, so book wins over journal."""
    assert select_template_shape("Cite journal book") == TemplateShape.BOOK_CITATION


def test_select_template_shape_checks_web_before_news() -> None:
    """A name mentioning both web and news is a website citation."""
    assert select_template_shape("Cite news web") == TemplateShape.WEBSITE_CITATION


def test_select_template_shape_ignores_citation_without_subtype() -> None:
    """A citation name with no known subtype has no shape."""
    assert select_template_shape("Cite encyclopedia") is None


def test_select_template_shape_requires_cite_marker_for_citations() -> None:
    """Subtype words alone do not select a citation shape."""
    assert select_template_shape("Book cover") is None


def test_select_template_shape_handles_missing_name() -> None:
    """Templates without a name are not classified."""
    assert select_template_shape(None) is None
    assert template_shape_for({"title": "Untitled"}) is None


def test_citation_rule_order_is_fixed() -> None:
    """The rule table order decides ambiguous names."""
    assert [marker for marker, _ in CITATION_SHAPE_RULES] == ["book", "journal", "web", "news"]
