"""Version parsing and major-bump detection.

Versions are plain major.minor.patch strings as written by release tooling
into a manifest. A single leading marker character (e.g. "v1.2.3") is
tolerated; anything else that is not exactly three numeric components is
rejected.
"""

from __future__ import annotations

import semver


class InvalidVersionFormat(ValueError):
    """Raised when a version string is not [prefix]MAJOR.MINOR.PATCH.

    Attributes:
        version: The offending input, exactly as it was received.
    """

    def __init__(self, version: object) -> None:
        super().__init__(f"Invalid version format: {version}")
        self.version = version


def parse_version(version_str: str) -> semver.Version:
    """Parse a version string into a semver.Version object.

    At most one leading non-digit character is stripped before parsing:
    - "1.2.3" → 1.2.3
    - "v1.2.3" → 1.2.3
    - "vv1.2.3" → error

    Prerelease/build metadata is not supported, and neither are incomplete
    versions such as "1.2".

    Raises:
        InvalidVersionFormat: If the string does not have the expected shape.
    """
    if not isinstance(version_str, str):
        raise InvalidVersionFormat(version_str)

    text = version_str
    if text and not text[0].isdigit():
        text = text[1:]

    try:
        version = semver.Version.parse(text)
    except (ValueError, TypeError) as exc:
        raise InvalidVersionFormat(version_str) from exc

    if version.prerelease or version.build:
        raise InvalidVersionFormat(version_str)
    return version


def is_major_bump(old_version: str, new_version: str) -> bool:
    """Return True if the major component increased from old to new.

    Minor and patch components are ignored, so "1.2.3" → "1.3.0" is not a
    major bump. A decrease in major is not one either.

    Raises:
        InvalidVersionFormat: If either version cannot be parsed.
    """
    old = parse_version(old_version)
    new = parse_version(new_version)
    return new.major > old.major
