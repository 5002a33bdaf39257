"""GitHub Action runner.

Usage in a workflow step:

    - run: python -m major_bump_check.action
      env:
        INPUT_GITHUB_TOKEN: ${{ secrets.GITHUB_TOKEN }}

Outputs:
    has_major_bump: "true" or "false".
    updated_paths: JSON object of path → [old, new] for major bumps only.
"""

from __future__ import annotations

import asyncio
from typing import Optional

from .config import ActionSettings
from .github import GitHubClient, detect_major_bumps
from .models import ManifestAnalysis
from .shell import fatal, step

OUTPUT_HAS_MAJOR_BUMP = "has_major_bump"
OUTPUT_UPDATED_PATHS = "updated_paths"


def write_output(output_path: str, name: str, value: str) -> None:
    """Append a step output to the runner's GITHUB_OUTPUT file."""
    with open(output_path, "a", encoding="utf-8") as fh:
        fh.write(f"{name}={value}\n")


def report(analysis: ManifestAnalysis) -> None:
    """Print a human-readable summary of the analysis."""
    if analysis.has_major_bump:
        print("🚨 Major version bump(s) detected!")
        for path, bump in analysis.major_bumps.items():
            print(f"📈 {path}: {bump.old} → {bump.new}")
    else:
        print("✅ No major version bumps detected")


def emit_outputs(analysis: ManifestAnalysis, github_output: Optional[str]) -> None:
    """Publish both outputs, or print them when there is no output file."""
    outputs = {
        OUTPUT_HAS_MAJOR_BUMP: analysis.has_major_bump_text(),
        OUTPUT_UPDATED_PATHS: analysis.updated_paths_json(),
    }
    for name, value in outputs.items():
        if github_output:
            write_output(github_output, name, value)
        else:
            print(f"{name}={value}")


async def analyze_pull_request(settings: ActionSettings) -> ManifestAnalysis:
    """Fetch the manifest at both ends of the pull request and compare."""
    async with GitHubClient(
        settings.github_token, settings.repository, api_url=settings.api_url
    ) as client:
        return await detect_major_bumps(
            client,
            settings.manifest_file,
            settings.pull_request.base_sha,
            settings.pull_request.head_sha,
        )


def run_action(settings: ActionSettings) -> ManifestAnalysis:
    """Run the full check for one pull request event."""
    base = settings.pull_request.base_sha
    head = settings.pull_request.head_sha
    step(f"Analyzing {settings.manifest_file} changes between {base} and {head}")

    analysis = asyncio.run(analyze_pull_request(settings))

    report(analysis)
    emit_outputs(analysis, settings.github_output)
    return analysis


def main() -> None:
    """Entry point for `python -m major_bump_check.action`.

    Any failure fails the step with exit code 1.
    """
    try:
        run_action(ActionSettings.from_env())
    except Exception as exc:
        fatal(f"Action failed: {exc}")


if __name__ == "__main__":
    main()
