"""Manifest decoding and comparison.

A manifest is a flat JSON object mapping package path to version string,
e.g. release-please's `.release-please-manifest.json`:

    {".": "1.2.3", "packages/foo": "0.4.0"}

A snapshot is the manifest as of one revision. When the file does not exist
at a revision the snapshot is ABSENT, which is distinct from an empty
mapping (a manifest that exists but lists no packages).
"""

from __future__ import annotations

import enum
import json
from collections.abc import Mapping
from typing import Union

from .models import MajorBump, ManifestAnalysis
from .versions import is_major_bump

DEFAULT_MANIFEST_FILE = ".release-please-manifest.json"


class Absent(enum.Enum):
    """Marker type for a manifest that does not exist at a revision."""

    ABSENT = "absent"

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = Absent.ABSENT

ManifestSnapshot = Union[Mapping[str, str], Absent]


class ManifestFormatError(ValueError):
    """Raised when manifest text is not a JSON object."""


def decode_manifest(text: str) -> dict[str, str]:
    """Parse manifest text into a path → version mapping.

    Values are not validated here; a malformed version surfaces as
    InvalidVersionFormat when the entry is compared.

    Raises:
        ManifestFormatError: If the text is not JSON or not a JSON object.
    """
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestFormatError(f"Manifest is not valid JSON: {exc}") from exc

    if not isinstance(doc, dict):
        raise ManifestFormatError(
            f"Manifest must be a JSON object, got {type(doc).__name__}"
        )
    return doc


def analyze_manifest_changes(
    old_manifest: ManifestSnapshot,
    new_manifest: ManifestSnapshot,
) -> ManifestAnalysis:
    """Find the entries whose major version increased between two snapshots.

    Only paths present in both snapshots are compared:
    - Paths new in new_manifest are skipped, whatever their version.
    - Paths removed from new_manifest are never looked at.
    - Unchanged, minor and patch changes are skipped.

    If either snapshot is ABSENT, no comparison is possible and the result
    is empty.

    Args:
        old_manifest: Snapshot at the base revision.
        new_manifest: Snapshot at the head revision.

    Returns:
        ManifestAnalysis with only the major bumps.

    Raises:
        InvalidVersionFormat: If any compared version is malformed. The whole
            analysis is aborted; there is no partial result.
    """
    if old_manifest is ABSENT or new_manifest is ABSENT:
        return ManifestAnalysis()

    major_bumps: dict[str, MajorBump] = {}
    for path, new_version in new_manifest.items():
        if path not in old_manifest:
            continue
        old_version = old_manifest[path]
        if old_version == new_version:
            continue
        if is_major_bump(old_version, new_version):
            major_bumps[path] = MajorBump(old=old_version, new=new_version)

    return ManifestAnalysis(major_bumps=major_bumps)
