"""Unit tests for CLI command handling."""

from __future__ import annotations

import json

import pytest

from cli.main import main
from tests.fixture_paths import feed_fixture


def test_cli_decode_prints_summary(capsys: pytest.CaptureFixture[str]) -> None:
    """Decode should print event, change, and template totals."""
    exit_code = main(["decode", feed_fixture("valid_feed.json")])
    output = capsys.readouterr().out

    assert exit_code == 0
    assert "events=4" in output and "changes=3" in output and "templates=2" in output


def test_cli_decode_json_prints_typed_timeline(capsys: pytest.CaptureFixture[str]) -> None:
    """Decode --json should print the serialized timeline."""
    exit_code = main(["decode", feed_fixture("valid_feed.yaml"), "--json"])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert [event["outputType"] for event in payload["timeline"]] == [
        "small-change",
        "large-change",
    ]


def test_cli_decode_reports_classification_failure(capsys: pytest.CaptureFixture[str]) -> None:
    """Decode failures should exit one without a traceback."""
    exit_code = main(["decode", feed_fixture("unknown_change_type.json")])
    output = capsys.readouterr().out

    assert exit_code == 1 and output.startswith("decode_error=")


def test_cli_decode_reports_missing_file(capsys: pytest.CaptureFixture[str]) -> None:
    """Unreadable feeds should exit one with a friendly message."""
    exit_code = main(["decode", "/tmp/sigevents-missing-feed.json"])
    output = capsys.readouterr().out

    assert exit_code == 1 and "does not exist" in output


def test_cli_rejects_unknown_encoding_override(capsys: pytest.CaptureFixture[str]) -> None:
    """An invalid --encoding should be reported as a config error."""
    exit_code = main(["--encoding", "not-a-codec", "decode", feed_fixture("valid_feed.json")])
    output = capsys.readouterr().out

    assert exit_code == 1 and output.startswith("config_error=")
    assert "SIGEVENTS_FEED_ENCODING" in output


def test_cli_templates_lists_resolved_templates(capsys: pytest.CaptureFixture[str]) -> None:
    """Templates should list one row per resolved template."""
    exit_code = main(["templates", feed_fixture("valid_feed.json")])
    rows = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0
    assert rows == [
        "0\t2\tbook-citation\tBridges of the North",
        "0\t2\twebsite-citation\tBridge Authority",
    ]
