"""Sigevents CLI entry points.
This module exposes commands for inspecting significant-events feeds.
It maps argparse commands onto decode calls.
"""

from __future__ import annotations

import argparse
import json
from dataclasses import replace
from typing import Any, Sequence

from cli.templates_command import add_templates_command, run_templates_command
from core.config import SigEventsConfig, parse_feed_encoding, parse_log_level
from core.errors import SigEventsConfigError, SigEventsError
from core.logging_config import configure_logging
from decode.timeline_decoder import count_changes, count_templates, decode_feed_file
from decode.timeline_payload import significant_events_to_payload


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="sigevents", description="Significant events feed CLI")
    parser.add_argument("--encoding", help="Override SIGEVENTS_FEED_ENCODING for this command")
    parser.add_argument("--log-level", help="Override SIGEVENTS_LOG_LEVEL for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_decode_command(subparsers)
    add_templates_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sigevents CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args.encoding, args.log_level)
        configure_logging(config.log_level)
        if args.command == "decode":
            return _run_decode_command(config, args)
        if args.command == "templates":
            return run_templates_command(config, args)
    except SigEventsConfigError as error:
        print(f"config_error={error}")
        return 1
    except SigEventsError as error:
        print(f"decode_error={error}")
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(encoding: str | None, log_level: str | None) -> SigEventsConfig:
    """Build runtime config with optional overrides.

    Args:
        encoding: Optional codec name.
        log_level: Optional log level name.

    Returns:
        Configured runtime config.
    """
    config = SigEventsConfig.from_env()
    if encoding:
        config = replace(config, feed_encoding=parse_feed_encoding(encoding))
    if log_level:
        config = replace(config, log_level=parse_log_level(log_level))
    return config


def _run_decode_command(config: SigEventsConfig, args: argparse.Namespace) -> int:
    """Handle decode command.

    Args:
        config: Runtime config.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    result = decode_feed_file(args.feed, config)
    if args.json:
        print(json.dumps(significant_events_to_payload(result), indent=2, sort_keys=True))
        return 0
    summary = result.summary
    print(f"events={len(result.events)}")
    print(f"changes={count_changes(result)}")
    print(f"templates={count_templates(result)}")
    print(f"earliest_timestamp={summary.earliest_timestamp}")
    print(f"num_changes={summary.num_changes}")
    print(f"num_users={summary.num_users}")
    print(f"sha={result.sha or '-'}")
    print(f"next_rv_start_id={'-' if result.next_rv_start_id is None else result.next_rv_start_id}")
    return 0


def _add_decode_command(subparsers: Any) -> None:
    """Register decode subcommand."""
    parser = subparsers.add_parser("decode", help="Decode a feed and print a summary")
    parser.add_argument("feed", help="Feed document path (.json, .yaml, .yml)")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full typed timeline as JSON",
    )
