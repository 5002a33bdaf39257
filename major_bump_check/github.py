"""GitHub contents API access.

Fetches the manifest file at the base and head commits of a pull request and
hands both snapshots to the differ. The two fetches run concurrently.
"""

from __future__ import annotations

import asyncio
import base64
from typing import Any, Optional

import httpx

from .manifest import (
    ABSENT,
    ManifestSnapshot,
    analyze_manifest_changes,
    decode_manifest,
)
from .models import ManifestAnalysis

DEFAULT_API_URL = "https://api.github.com"


class GitHubClient:
    """Minimal async client for the repository contents endpoint."""

    def __init__(
        self,
        token: str,
        repository: str,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        owner, sep, repo = repository.partition("/")
        if not sep or not owner or not repo:
            raise ValueError(f"Repository must be 'owner/repo', got: {repository!r}")
        self.owner = owner
        self.repo = repo
        self.client = httpx.AsyncClient(
            base_url=api_url.rstrip("/"),
            timeout=httpx.Timeout(timeout),
            headers=self._get_default_headers(token),
            transport=transport,
        )

    @staticmethod
    def _get_default_headers(token: str) -> dict[str, str]:
        return {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {token}",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": "major-bump-check",
        }

    async def __aenter__(self) -> GitHubClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self.client.aclose()

    async def get_manifest_at_ref(
        self, manifest_path: str, ref: str
    ) -> ManifestSnapshot:
        """Fetch and decode the manifest file at a specific ref.

        Args:
            manifest_path: Path to the manifest file in the repository.
            ref: Git ref (commit SHA, branch name, etc.).

        Returns:
            The decoded manifest, or ABSENT if the file does not exist at the
            ref (HTTP 404) or the path is not a file.

        Raises:
            httpx.HTTPStatusError: For any error response other than 404.
        """
        response = await self.client.get(
            f"/repos/{self.owner}/{self.repo}/contents/{manifest_path}",
            params={"ref": ref},
        )
        if response.status_code == 404:
            return ABSENT
        response.raise_for_status()

        data = response.json()
        # Directories come back as a list; symlinks and submodules carry no content
        if not isinstance(data, dict) or not data.get("content"):
            return ABSENT

        content = base64.b64decode(data["content"]).decode("utf-8")
        return decode_manifest(content)


async def detect_major_bumps(
    client: GitHubClient,
    manifest_path: str,
    base_sha: str,
    head_sha: str,
) -> ManifestAnalysis:
    """Detect major version bumps in a pull request.

    Args:
        client: GitHub API client.
        manifest_path: Path to the manifest file.
        base_sha: Base commit SHA.
        head_sha: Head commit SHA.

    Returns:
        Analysis of manifest changes.
    """
    old_manifest, new_manifest = await asyncio.gather(
        client.get_manifest_at_ref(manifest_path, base_sha),
        client.get_manifest_at_ref(manifest_path, head_sha),
    )
    return analyze_manifest_changes(old_manifest, new_manifest)
