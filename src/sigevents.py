"""Public SDK surface for sigevents.

This module provides a stable import path for feed consumers.
It re-exports the decode entry points and typed timeline models.
"""

from __future__ import annotations

from citations.template_resolver import resolve_template, resolve_templates
from core.config import SigEventsConfig
from core.errors import (
    SigEventsError,
    TimelineClassificationError,
    TimelineDecodeError,
    TimelineEnvelopeError,
)
from core.template_types import (
    ArticleDescription,
    BookCitation,
    JournalCitation,
    NewsCitation,
    Template,
    TemplateShape,
    WebsiteCitation,
)
from core.timeline_types import (
    AddedTextChange,
    Change,
    DeletedTextChange,
    LargeChange,
    NewTalkPageTopic,
    NewTemplatesChange,
    SignificantEvents,
    SmallChange,
    SnippetType,
    Summary,
    TimelineEvent,
    VandalismRevert,
)
from decode.timeline_decoder import decode_feed_file, decode_feed_text, decode_significant_events
from decode.timeline_payload import significant_events_to_payload

__all__ = [
    "AddedTextChange",
    "ArticleDescription",
    "BookCitation",
    "Change",
    "DeletedTextChange",
    "JournalCitation",
    "LargeChange",
    "NewTalkPageTopic",
    "NewTemplatesChange",
    "NewsCitation",
    "SigEventsConfig",
    "SigEventsError",
    "SignificantEvents",
    "SmallChange",
    "SnippetType",
    "Summary",
    "Template",
    "TemplateShape",
    "TimelineClassificationError",
    "TimelineDecodeError",
    "TimelineEnvelopeError",
    "TimelineEvent",
    "VandalismRevert",
    "WebsiteCitation",
    "decode_feed_file",
    "decode_feed_text",
    "decode_significant_events",
    "resolve_template",
    "resolve_templates",
    "significant_events_to_payload",
]
