"""Pytest configuration for repository test runs."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import pytest

_PROJECT_ROOT = Path(__file__).resolve().parent.parent


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    src_path = _PROJECT_ROOT / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def valid_feed_payload() -> dict[str, Any]:
    """Parsed copy of the four-event JSON feed fixture."""
    feed_path = _PROJECT_ROOT / "tests" / "fixtures" / "feeds" / "valid_feed.json"
    return json.loads(feed_path.read_text(encoding="utf-8"))
