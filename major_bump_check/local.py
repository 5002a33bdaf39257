"""Manifest access through a local git checkout.

Lets the same comparison run outside of GitHub Actions, e.g. before opening
a pull request: `major-bump-check compare --base main --head HEAD`.
"""

from __future__ import annotations

from .manifest import (
    ABSENT,
    ManifestSnapshot,
    analyze_manifest_changes,
    decode_manifest,
)
from .models import ManifestAnalysis
from .shell import git, git_succeeds


def get_manifest_at_revision(manifest_path: str, revision: str) -> ManifestSnapshot:
    """Read the manifest file as of a revision of the current repository.

    Returns:
        The decoded manifest, or ABSENT if the path does not exist at the
        revision.

    Raises:
        subprocess.CalledProcessError: If the revision does not name a commit,
            or git fails to read an existing blob.
    """
    git("rev-parse", "--verify", "--quiet", f"{revision}^{{commit}}")

    spec = f"{revision}:{manifest_path}"
    if not git_succeeds("cat-file", "-e", spec):
        return ABSENT
    # Same as a directory response from the contents API
    if git("cat-file", "-t", spec) != "blob":
        return ABSENT
    return decode_manifest(git("show", spec))


def compare_revisions(manifest_path: str, base: str, head: str) -> ManifestAnalysis:
    """Compare the manifest between two local revisions."""
    old_manifest = get_manifest_at_revision(manifest_path, base)
    new_manifest = get_manifest_at_revision(manifest_path, head)
    return analyze_manifest_changes(old_manifest, new_manifest)
