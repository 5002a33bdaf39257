"""CLI entry point for major-bump-check."""

from __future__ import annotations

import subprocess

import click

from major_bump_check.action import emit_outputs, report, run_action
from major_bump_check.config import ActionSettings
from major_bump_check.local import compare_revisions
from major_bump_check.manifest import DEFAULT_MANIFEST_FILE


@click.group()
@click.version_option(package_name="major-bump-check")
def cli() -> None:
    """Detect major version bumps in a release manifest."""


@cli.command()
def action() -> None:
    """Run as a GitHub Action step (inputs come from the environment)."""
    try:
        run_action(ActionSettings.from_env())
    except Exception as exc:
        raise click.ClickException(f"Action failed: {exc}") from exc


@cli.command()
@click.option("--base", required=True, help="Base revision (e.g. main).")
@click.option("--head", default="HEAD", show_default=True, help="Head revision.")
@click.option(
    "--manifest-file",
    default=DEFAULT_MANIFEST_FILE,
    show_default=True,
    help="Path of the manifest file in the repository.",
)
@click.option(
    "--github-output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Append outputs to this file instead of printing them.",
)
def compare(
    base: str, head: str, manifest_file: str, github_output: str | None
) -> None:
    """Compare the manifest between two revisions of the local repository."""
    click.echo(f"Analyzing {manifest_file} changes between {base} and {head}")
    try:
        analysis = compare_revisions(manifest_file, base, head)
    except subprocess.CalledProcessError as exc:
        raise click.ClickException(
            f"git {' '.join(exc.cmd[1:])} failed: {(exc.stderr or '').strip()}"
        ) from exc
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    report(analysis)
    emit_outputs(analysis, github_output)
