"""Templates command wiring for sigevents CLI."""

from __future__ import annotations

import argparse
from typing import Any

from core.config import SigEventsConfig
from core.template_types import ArticleDescription, Template
from core.timeline_types import LargeChange, NewTemplatesChange
from decode.timeline_decoder import decode_feed_file


def add_templates_command(subparsers: Any) -> None:
    """Register templates subcommand."""
    parser = subparsers.add_parser(
        "templates",
        help="List resolved citation and description templates",
    )
    parser.add_argument("feed", help="Feed document path (.json, .yaml, .yml)")


def run_templates_command(config: SigEventsConfig, args: argparse.Namespace) -> int:
    """Print one tab-separated row per resolved template."""
    result = decode_feed_file(args.feed, config)
    for event_index, event in enumerate(result.events):
        if not isinstance(event, LargeChange):
            continue
        for change_index, change in enumerate(event.changes):
            if not isinstance(change, NewTemplatesChange):
                continue
            for template in change.templates:
                print(f"{event_index}\t{change_index}\t{template.shape.value}\t{_label(template)}")
    return 0


def _label(template: Template) -> str:
    if isinstance(template, ArticleDescription):
        return template.description
    return template.title
