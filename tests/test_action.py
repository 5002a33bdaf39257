"""Tests for major_bump_check.action."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import httpx
import pytest

from major_bump_check.action import emit_outputs, main, report, run_action
from major_bump_check.config import ActionSettings
from major_bump_check.models import MajorBump, ManifestAnalysis
from major_bump_check.versions import InvalidVersionFormat


@pytest.fixture
def bumped() -> ManifestAnalysis:
    return ManifestAnalysis(
        major_bumps={"packages/foo": MajorBump(old="1.2.3", new="2.0.0")}
    )


class TestEmitOutputs:
    def test_writes_github_output(
        self, bumped: ManifestAnalysis, tmp_path: Path
    ) -> None:
        output_file = tmp_path / "github_output.txt"

        emit_outputs(bumped, str(output_file))

        lines = output_file.read_text().splitlines()
        assert lines == [
            "has_major_bump=true",
            'updated_paths={"packages/foo":["1.2.3","2.0.0"]}',
        ]

    def test_empty_result_still_writes_both(self, tmp_path: Path) -> None:
        output_file = tmp_path / "github_output.txt"

        emit_outputs(ManifestAnalysis(), str(output_file))

        raw = output_file.read_text()
        assert "has_major_bump=false" in raw
        assert "updated_paths={}" in raw

    def test_prints_without_output_file(
        self, bumped: ManifestAnalysis, capsys: pytest.CaptureFixture[str]
    ) -> None:
        emit_outputs(bumped, None)

        out = capsys.readouterr().out
        assert "has_major_bump=true" in out


class TestReport:
    def test_lists_bumps(
        self, bumped: ManifestAnalysis, capsys: pytest.CaptureFixture[str]
    ) -> None:
        report(bumped)

        out = capsys.readouterr().out
        assert "Major version bump(s) detected" in out
        assert "packages/foo: 1.2.3 → 2.0.0" in out

    def test_no_bumps(self, capsys: pytest.CaptureFixture[str]) -> None:
        report(ManifestAnalysis())

        assert "No major version bumps detected" in capsys.readouterr().out


class TestRunAction:
    @patch("major_bump_check.action.detect_major_bumps")
    def test_analyzes_pull_request_refs(
        self,
        mock_detect: MagicMock,
        action_env: dict[str, str],
        bumped: ManifestAnalysis,
    ) -> None:
        mock_detect.return_value = bumped
        settings = ActionSettings.from_env(
            action_env | {"INPUT_MANIFEST_FILE": "custom/manifest.json"}
        )

        result = run_action(settings)

        assert result == bumped
        _client, path, base, head = mock_detect.call_args[0]
        assert (path, base, head) == ("custom/manifest.json", "base-sha", "head-sha")
        raw = Path(action_env["GITHUB_OUTPUT"]).read_text()
        assert "has_major_bump=true" in raw

    @patch("major_bump_check.action.detect_major_bumps")
    def test_error_propagates(
        self, mock_detect: MagicMock, action_env: dict[str, str]
    ) -> None:
        mock_detect.side_effect = InvalidVersionFormat("1.2")

        with pytest.raises(InvalidVersionFormat):
            run_action(ActionSettings.from_env(action_env))
        assert not Path(action_env["GITHUB_OUTPUT"]).exists()


class TestMain:
    def test_non_pull_request_event_fails(
        self,
        action_env: dict[str, str],
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        event = tmp_path / "push.json"
        event.write_text(json.dumps({"ref": "refs/heads/main"}))
        for key, value in (action_env | {"GITHUB_EVENT_PATH": str(event)}).items():
            monkeypatch.setenv(key, value)

        with pytest.raises(SystemExit) as excinfo:
            main()

        assert excinfo.value.code == 1
        err = capsys.readouterr().err
        assert (
            "Action failed: This action can only be run on pull_request events" in err
        )

    @patch("major_bump_check.action.detect_major_bumps")
    def test_http_error_fails(
        self,
        mock_detect: MagicMock,
        action_env: dict[str, str],
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        request = httpx.Request("GET", "https://api.github.com/repos/o/r/contents/m")
        mock_detect.side_effect = httpx.HTTPStatusError(
            "Server error", request=request, response=httpx.Response(500)
        )
        for key, value in action_env.items():
            monkeypatch.setenv(key, value)

        with pytest.raises(SystemExit) as excinfo:
            main()

        assert excinfo.value.code == 1
        assert "Action failed: Server error" in capsys.readouterr().err
