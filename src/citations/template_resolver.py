"""Resolve raw template dictionaries into typed templates.

Resolution never raises: a dictionary with an unknown name or a missing
mandatory field is omitted from the result.
"""

from __future__ import annotations

from typing import Callable, Iterable, Mapping

from citations.alias_tables import TEMPLATE_ALIASES, TEMPLATE_REQUIRED_FIELDS
from citations.field_resolution import resolve_fields
from citations.shape_rules import template_shape_for
from core.constants import TEMPLATE_NAME_KEY
from core.logging_config import get_logger
from core.template_types import (
    ArticleDescription,
    BookCitation,
    JournalCitation,
    NewsCitation,
    Template,
    TemplateShape,
    WebsiteCitation,
)

_LOGGER = get_logger(__name__)

TEMPLATE_BUILDERS: Mapping[TemplateShape, Callable[..., Template]] = {
    TemplateShape.BOOK_CITATION: BookCitation,
    TemplateShape.ARTICLE_DESCRIPTION: ArticleDescription,
    TemplateShape.JOURNAL_CITATION: JournalCitation,
    TemplateShape.NEWS_CITATION: NewsCitation,
    TemplateShape.WEBSITE_CITATION: WebsiteCitation,
}


def resolve_template(raw_template: Mapping[str, str]) -> Template | None:
    """Classify and resolve one raw template.

    Args:
        raw_template: Raw string key/value mapping.

    Returns:
        Typed template, or None when it cannot be classified or built.
    """
    shape = template_shape_for(raw_template)
    if shape is None:
        _log_dropped_template(raw_template, "unknown_shape")
        return None
    field_values = resolve_fields(raw_template, TEMPLATE_ALIASES[shape])
    missing_fields = [
        field_name
        for field_name in TEMPLATE_REQUIRED_FIELDS[shape]
        if field_values.get(field_name) is None
    ]
    if missing_fields:
        _log_dropped_template(raw_template, "missing_required", missing_fields=missing_fields)
        return None
    return TEMPLATE_BUILDERS[shape](**field_values)


def resolve_templates(raw_templates: Iterable[Mapping[str, str]]) -> tuple[Template, ...]:
    """Resolve raw templates in order, dropping the ones that fail."""
    resolved: list[Template] = []
    for raw_template in raw_templates:
        template = resolve_template(raw_template)
        if template is not None:
            resolved.append(template)
    return tuple(resolved)


def _log_dropped_template(
    raw_template: Mapping[str, str],
    reason: str,
    **fields: object,
) -> None:
    _LOGGER.debug(
        "template_dropped",
        name=raw_template.get(TEMPLATE_NAME_KEY),
        reason=reason,
        **fields,
    )
