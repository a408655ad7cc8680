"""Unit tests for template resolution."""

from __future__ import annotations

from citations.alias_tables import TEMPLATE_ALIASES, TEMPLATE_REQUIRED_FIELDS
from citations.template_resolver import resolve_template, resolve_templates
from core.template_types import (
    ArticleDescription,
    BookCitation,
    JournalCitation,
    NewsCitation,
    TemplateShape,
    WebsiteCitation,
)


def test_resolve_template_builds_book_citation_through_aliases() -> None:
    """Book citations resolve each field through its alias chain."""
    raw_template = {
        "name": "Cite book",
        "title": "Bridges of the North",
        "author1-last": "Smith",
        "surname": "Jones",
        "given": "Jane",
        "place": "Oslo",
        "institution": "Press",
        "pp": "10-12",
        "ISBN13": "978-0-00-000000-2",
    }

    template = resolve_template(raw_template)

    assert template == BookCitation(
        title="Bridges of the North",
        last_name="Smith",
        first_name="Jane",
        location_published="Oslo",
        publisher="Press",
        pages_cited="10-12",
        isbn="978-0-00-000000-2",
    )


def test_resolve_template_drops_book_without_title() -> None:
    """A book citation without title fails to construct."""
    assert resolve_template({"name": "Cite book", "last": "Smith"}) is None


def test_resolve_template_builds_article_description() -> None:
    """Short descriptions read the positional key."""
    template = resolve_template({"name": "short description", "1": "Bridge in Norway"})

    assert template == ArticleDescription(description="Bridge in Norway")


def test_resolve_template_builds_journal_citation() -> None:
    """Journal citations need title and journal."""
    raw_template = {
        "name": "Cite journal",
        "title": "Load tests",
        "journal": "Structures",
        "authors": "Lee",
        "first1": "Kim",
        "volume": "12",
        "via": "JSTOR",
    }

    template = resolve_template(raw_template)

    assert template == JournalCitation(
        title="Load tests",
        journal="Structures",
        last_name="Lee",
        first_name="Kim",
        volume_number="12",
        database="JSTOR",
    )


def test_resolve_template_drops_journal_without_journal_name() -> None:
    """Journal is mandatory for journal citations."""
    assert resolve_template({"name": "Cite journal", "title": "Load tests"}) is None


def test_resolve_template_builds_news_citation_publication_chain() -> None:
    """News publication falls back through work, journal, magazine and others."""
    raw_template = {
        "name": "Cite news",
        "title": "Bridge opens",
        "newspaper": "Daily Example",
        "website": "example.org",
        "accessdate": "2021-01-01",
    }

    template = resolve_template(raw_template)

    assert template == NewsCitation(
        title="Bridge opens",
        publication="Daily Example",
        access_date="2021-01-01",
    )


def test_resolve_template_builds_website_citation() -> None:
    """Website citations need title and url."""
    raw_template = {
        "name": "Cite web",
        "title": "Bridge Authority",
        "url": "https://example.org",
        "work": "Example",
        "archive-date": "2020-01-01",
    }

    template = resolve_template(raw_template)

    assert template == WebsiteCitation(
        title="Bridge Authority",
        url="https://example.org",
        publisher="Example",
        archive_date="2020-01-01",
    )


def test_resolve_template_drops_website_with_empty_title() -> None:
    """An empty title counts as absent."""
    raw_template = {"name": "Cite web", "title": "", "url": "https://example.org"}

    assert resolve_template(raw_template) is None


def test_resolve_template_drops_unknown_name() -> None:
    """Unknown template names are not resolved."""
    assert resolve_template({"name": "Infobox bridge", "title": "Bridge"}) is None


def test_resolve_templates_omits_failures_and_keeps_order() -> None:
    """Failed templates are dropped without affecting siblings."""
    raw_templates = [
        {"name": "Cite web", "title": "A", "url": "https://a.example"},
        {"name": "Cite book"},
        {"name": "Short description", "1": "B"},
    ]

    templates = resolve_templates(raw_templates)

    assert [template.shape for template in templates] == [
        TemplateShape.WEBSITE_CITATION,
        TemplateShape.ARTICLE_DESCRIPTION,
    ]


def test_required_fields_are_resolvable_for_every_shape() -> None:
    """Every mandatory field should have an alias chain."""
    for shape, required_fields in TEMPLATE_REQUIRED_FIELDS.items():
        assert set(required_fields) <= set(TEMPLATE_ALIASES[shape])
