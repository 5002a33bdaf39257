"""Detect major version bumps in a release manifest between two revisions."""

from .manifest import ABSENT, analyze_manifest_changes
from .versions import InvalidVersionFormat, is_major_bump, parse_version

__all__ = [
    "ABSENT",
    "InvalidVersionFormat",
    "analyze_manifest_changes",
    "is_major_bump",
    "parse_version",
]
