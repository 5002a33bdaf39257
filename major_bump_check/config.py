"""Action settings.

GitHub Actions passes `with:` inputs as INPUT_<NAME> environment variables
and describes the triggering event in the JSON file at GITHUB_EVENT_PATH.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .github import DEFAULT_API_URL
from .manifest import DEFAULT_MANIFEST_FILE


class ActionConfigError(ValueError):
    """Raised when the action inputs or event payload are unusable."""


class PullRequestRefs(BaseModel):
    """Base and head commits of the pull request that triggered the run."""

    base_sha: str
    head_sha: str


class ActionSettings(BaseModel):
    """Everything the action needs, resolved from the environment.

    Attributes:
        github_token: Token for the contents API (input `github_token`).
        manifest_file: Manifest path in the repository (input `manifest_file`).
        repository: "owner/repo" of the repository the workflow runs in.
        api_url: GitHub REST API root.
        pull_request: Commits to compare.
        github_output: Step output file, if the runner provides one.
    """

    model_config = ConfigDict(frozen=True)

    github_token: str
    manifest_file: str = DEFAULT_MANIFEST_FILE
    repository: str
    api_url: str = DEFAULT_API_URL
    pull_request: PullRequestRefs
    github_output: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> ActionSettings:
        """Build settings from environment variables.

        Raises:
            ActionConfigError: If a required input is missing or the event is
                not a pull request.
        """
        env = os.environ if environ is None else environ

        token = _get_input(env, "github_token")
        if not token:
            raise ActionConfigError("Input required and not supplied: github_token")

        repository = env.get("GITHUB_REPOSITORY", "")
        if not repository:
            raise ActionConfigError("GITHUB_REPOSITORY is not set")

        return cls(
            github_token=token,
            manifest_file=_get_input(env, "manifest_file") or DEFAULT_MANIFEST_FILE,
            repository=repository,
            api_url=env.get("GITHUB_API_URL") or DEFAULT_API_URL,
            pull_request=load_pull_request(env.get("GITHUB_EVENT_PATH", "")),
            github_output=env.get("GITHUB_OUTPUT") or None,
        )


def _get_input(env: Mapping[str, str], name: str) -> str:
    """Read an action input the way the runner exposes it."""
    return env.get(f"INPUT_{name.replace(' ', '_').upper()}", "").strip()


def load_pull_request(event_path: str) -> PullRequestRefs:
    """Extract base/head SHAs from the event payload file.

    Raises:
        ActionConfigError: If the payload is missing or has no pull_request.
    """
    if not event_path or not Path(event_path).is_file():
        raise ActionConfigError("GITHUB_EVENT_PATH does not point to an event payload")

    try:
        payload = json.loads(Path(event_path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ActionConfigError(f"Invalid event payload: {exc}") from exc

    pr = payload.get("pull_request") if isinstance(payload, dict) else None
    if not pr:
        raise ActionConfigError("This action can only be run on pull_request events")

    try:
        return PullRequestRefs(base_sha=pr["base"]["sha"], head_sha=pr["head"]["sha"])
    except (KeyError, TypeError) as exc:
        raise ActionConfigError(f"pull_request payload is missing {exc}") from exc
