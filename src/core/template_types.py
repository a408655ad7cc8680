"""Typed citation and description templates.

Each shape is resolved from a raw string mapping by the citations package.
Optional fields are ``None`` when no alias produced a non-empty value.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union


class TemplateShape(str, Enum):
    """Known template shapes, selected from the template name."""

    BOOK_CITATION = "book-citation"
    ARTICLE_DESCRIPTION = "article-description"
    JOURNAL_CITATION = "journal-citation"
    NEWS_CITATION = "news-citation"
    WEBSITE_CITATION = "website-citation"


@dataclass(frozen=True)
class BookCitation:
    """Resolved ``Cite book`` template."""

    shape: ClassVar[TemplateShape] = TemplateShape.BOOK_CITATION

    title: str
    last_name: str | None = None
    first_name: str | None = None
    year_published: str | None = None
    location_published: str | None = None
    publisher: str | None = None
    pages_cited: str | None = None
    isbn: str | None = None


@dataclass(frozen=True)
class ArticleDescription:
    """Resolved ``Short description`` template."""

    shape: ClassVar[TemplateShape] = TemplateShape.ARTICLE_DESCRIPTION

    description: str


@dataclass(frozen=True)
class JournalCitation:
    """Resolved ``Cite journal`` template."""

    shape: ClassVar[TemplateShape] = TemplateShape.JOURNAL_CITATION

    title: str
    journal: str
    last_name: str | None = None
    first_name: str | None = None
    source_date: str | None = None
    url: str | None = None
    volume_number: str | None = None
    pages: str | None = None
    database: str | None = None


@dataclass(frozen=True)
class NewsCitation:
    """Resolved ``Cite news`` template."""

    shape: ClassVar[TemplateShape] = TemplateShape.NEWS_CITATION

    title: str
    last_name: str | None = None
    first_name: str | None = None
    source_date: str | None = None
    publication: str | None = None
    url: str | None = None
    access_date: str | None = None


@dataclass(frozen=True)
class WebsiteCitation:
    """Resolved ``Cite web`` template."""

    shape: ClassVar[TemplateShape] = TemplateShape.WEBSITE_CITATION

    title: str
    url: str
    publisher: str | None = None
    access_date: str | None = None
    archive_date: str | None = None
    archive_url: str | None = None


Template = Union[BookCitation, ArticleDescription, JournalCitation, NewsCitation, WebsiteCitation]
