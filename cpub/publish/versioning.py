"""Version suffix classification.

The suffix of the resolved version decides where a publication goes and
whether repository credentials are needed.
"""

from __future__ import annotations

from enum import Enum, auto

__all__ = ["LOCAL_SUFFIX", "SNAPSHOT_SUFFIX", "VersionSuffix", "classify_version"]

LOCAL_SUFFIX = "-LOCAL"
SNAPSHOT_SUFFIX = "-SNAPSHOT"


class VersionSuffix(Enum):
    LOCAL = auto()
    SNAPSHOT = auto()
    RELEASE = auto()

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def needs_credentials(self) -> bool:
        return self != VersionSuffix.LOCAL


def classify_version(version: str) -> VersionSuffix:
    """Classify by trailing token; anything else is a release."""
    if version.endswith(LOCAL_SUFFIX):
        return VersionSuffix.LOCAL
    if version.endswith(SNAPSHOT_SUFFIX):
        return VersionSuffix.SNAPSHOT
    return VersionSuffix.RELEASE
