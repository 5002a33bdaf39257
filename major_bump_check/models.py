"""Data models for major-bump-check.

These Pydantic models represent the result of comparing two snapshots of a
version manifest.
"""

from __future__ import annotations

import json

from pydantic import BaseModel, ConfigDict, Field, computed_field


class MajorBump(BaseModel):
    """Records a major version change for one manifest entry.

    Attributes:
        old: The version at the base revision.
        new: The version at the head revision.
    """

    model_config = ConfigDict(frozen=True)

    old: str
    new: str

    def as_pair(self) -> list[str]:
        """Return [old, new], the shape used in the updated_paths output."""
        return [self.old, self.new]


class ManifestAnalysis(BaseModel):
    """Outcome of comparing a base and head manifest.

    Attributes:
        major_bumps: Map of package path → MajorBump. Only entries whose
            major version increased are present.
    """

    model_config = ConfigDict(frozen=True)

    major_bumps: dict[str, MajorBump] = Field(default_factory=dict)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_major_bump(self) -> bool:
        """True iff at least one entry had a major bump."""
        return bool(self.major_bumps)

    def updated_paths(self) -> dict[str, list[str]]:
        """Map of package path → [old, new]."""
        return {path: bump.as_pair() for path, bump in self.major_bumps.items()}

    def updated_paths_json(self) -> str:
        """Compact JSON text of updated_paths(), e.g. {"a":["1.0.0","2.0.0"]}."""
        return json.dumps(
            self.updated_paths(), separators=(",", ":"), ensure_ascii=False
        )

    def has_major_bump_text(self) -> str:
        """Lowercase 'true'/'false', as exposed in step outputs."""
        return "true" if self.has_major_bump else "false"
