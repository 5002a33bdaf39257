"""Shared test fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture
def event_payload(tmp_path: Path) -> Path:
    """Write a minimal pull_request event payload."""
    payload = {
        "action": "synchronize",
        "pull_request": {
            "number": 42,
            "base": {"sha": "base-sha"},
            "head": {"sha": "head-sha"},
        },
    }
    path = tmp_path / "event.json"
    path.write_text(json.dumps(payload))
    return path


@pytest.fixture
def action_env(event_payload: Path, tmp_path: Path) -> dict[str, str]:
    """Environment as the Actions runner provides it for a pull_request run."""
    return {
        "INPUT_GITHUB_TOKEN": "ghs_test",
        "GITHUB_REPOSITORY": "test-owner/test-repo",
        "GITHUB_EVENT_PATH": str(event_payload),
        "GITHUB_OUTPUT": str(tmp_path / "github_output.txt"),
    }
