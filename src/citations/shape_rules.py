"""Template shape selection by name.

Rules are evaluated top to bottom and the first match wins, so a name
such as "Cite journal book" resolves to a book citation.
"""

from __future__ import annotations

from typing import Mapping

from core.constants import TEMPLATE_NAME_KEY
from core.template_types import TemplateShape

CITATION_MARKER = "cite"

CITATION_SHAPE_RULES: tuple[tuple[str, TemplateShape], ...] = (
    ("book", TemplateShape.BOOK_CITATION),
    ("journal", TemplateShape.JOURNAL_CITATION),
    ("web", TemplateShape.WEBSITE_CITATION),
    ("news", TemplateShape.NEWS_CITATION),
)

NON_CITATION_SHAPE_RULES: tuple[tuple[str, TemplateShape], ...] = (
    ("short description", TemplateShape.ARTICLE_DESCRIPTION),
)


def select_template_shape(name: str | None) -> TemplateShape | None:
    """Select a template shape from a free-text template name.

    Args:
        name: Raw template name, if any.

    Returns:
        Matching shape, or None for unknown names.
    """
    if name is None:
        return None
    folded_name = name.casefold()
    if CITATION_MARKER in folded_name:
        return _first_matching_shape(folded_name, CITATION_SHAPE_RULES)
    return _first_matching_shape(folded_name, NON_CITATION_SHAPE_RULES)


def template_shape_for(raw_template: Mapping[str, str]) -> TemplateShape | None:
    """Select a shape from a raw template's ``name`` entry."""
    return select_template_shape(raw_template.get(TEMPLATE_NAME_KEY))


def _first_matching_shape(
    folded_name: str,
    rules: tuple[tuple[str, TemplateShape], ...],
) -> TemplateShape | None:
    for marker, shape in rules:
        if marker in folded_name:
            return shape
    return None
