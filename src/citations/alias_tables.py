"""Ordered alias chains for template fields.

Each semantic field maps to the raw keys tried in priority order.
Key spellings follow the TemplateData of the corresponding templates:
https://en.wikipedia.org/wiki/Template:Cite_book/TemplateData
https://en.wikipedia.org/wiki/Template:Cite_journal#TemplateData
https://en.wikipedia.org/wiki/Template:Cite_news#TemplateData
https://en.wikipedia.org/wiki/Template:Cite_web#TemplateData
"""

from __future__ import annotations

from typing import Mapping

from core.template_types import TemplateShape

AliasTable = Mapping[str, tuple[str, ...]]

BOOK_CITATION_ALIASES: AliasTable = {
    "title": ("title",),
    "last_name": (
        "last",
        "last1",
        "author",
        "author1",
        "author1-last",
        "author-last",
        "surname1",
        "author-last1",
        "subject1",
        "surname",
        "subject",
    ),
    "first_name": (
        "first",
        "given",
        "author-first",
        "first1",
        "given1",
        "author-first1",
        "author1-first",
    ),
    "year_published": ("year",),
    "location_published": ("location", "place"),
    "publisher": ("publisher", "distributor", "institution", "newsgroup"),
    "pages_cited": ("pages", "pp"),
    "isbn": ("isbn", "ISBN13", "isbn13", "ISBN"),
}

ARTICLE_DESCRIPTION_ALIASES: AliasTable = {
    "description": ("1",),
}

JOURNAL_CITATION_ALIASES: AliasTable = {
    "title": ("title",),
    "journal": ("journal",),
    "last_name": ("last", "author", "author1", "authors", "last1"),
    "first_name": ("first", "first1"),
    "source_date": ("date",),
    "url": ("url",),
    "volume_number": ("volume",),
    "pages": ("pages",),
    "database": ("via",),
}

NEWS_CITATION_ALIASES: AliasTable = {
    "title": ("title",),
    "last_name": ("last", "last1", "author", "author1", "authors"),
    "first_name": ("first", "first1"),
    "source_date": ("date",),
    "publication": ("work", "journal", "magazine", "periodical", "newspaper", "website"),
    "url": ("url",),
    "access_date": ("access-date", "accessdate"),
}

WEBSITE_CITATION_ALIASES: AliasTable = {
    "title": ("title",),
    "url": ("url",),
    "publisher": ("publisher", "website", "work"),
    "access_date": ("access-date", "accessdate"),
    "archive_date": ("archive-date", "archivedate"),
    "archive_url": ("archive-url", "archiveurl"),
}

TEMPLATE_ALIASES: Mapping[TemplateShape, AliasTable] = {
    TemplateShape.BOOK_CITATION: BOOK_CITATION_ALIASES,
    TemplateShape.ARTICLE_DESCRIPTION: ARTICLE_DESCRIPTION_ALIASES,
    TemplateShape.JOURNAL_CITATION: JOURNAL_CITATION_ALIASES,
    TemplateShape.NEWS_CITATION: NEWS_CITATION_ALIASES,
    TemplateShape.WEBSITE_CITATION: WEBSITE_CITATION_ALIASES,
}

TEMPLATE_REQUIRED_FIELDS: Mapping[TemplateShape, tuple[str, ...]] = {
    TemplateShape.BOOK_CITATION: ("title",),
    TemplateShape.ARTICLE_DESCRIPTION: ("description",),
    TemplateShape.JOURNAL_CITATION: ("title", "journal"),
    TemplateShape.NEWS_CITATION: ("title",),
    TemplateShape.WEBSITE_CITATION: ("title", "url"),
}
