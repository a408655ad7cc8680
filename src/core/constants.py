"""Project-wide constants for sigevents.

This module stores wire keys, discriminator values, and runtime defaults
used across raw parsing, classification, and configuration.
"""

from __future__ import annotations

DEFAULT_FEED_ENCODING = "utf-8"
DEFAULT_MAX_FEED_BYTES = 16 * 1024 * 1024

SUPPORTED_FEED_EXTENSIONS = (".json", ".yaml", ".yml")

EVENT_LARGE_CHANGE = "large-change"
EVENT_SMALL_CHANGE = "small-change"
EVENT_VANDALISM_REVERT = "vandalism-revert"
EVENT_NEW_TALK_PAGE_TOPIC = "new-talk-page-topic"
SUPPORTED_EVENT_TYPES = (
    EVENT_LARGE_CHANGE,
    EVENT_SMALL_CHANGE,
    EVENT_VANDALISM_REVERT,
    EVENT_NEW_TALK_PAGE_TOPIC,
)

CHANGE_ADDED_TEXT = "added-text"
CHANGE_DELETED_TEXT = "deleted-text"
CHANGE_NEW_TEMPLATE = "new-template"
SUPPORTED_CHANGE_TYPES = (
    CHANGE_ADDED_TEXT,
    CHANGE_DELETED_TEXT,
    CHANGE_NEW_TEMPLATE,
)

TEMPLATE_NAME_KEY = "name"

DEFAULT_LOG_LEVEL = "warning"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")
