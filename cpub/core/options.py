"""Publish options set by the user in the `[publish]` table.

Every string defaults to empty; the option resolver fills the blanks from the
project and the fallback sources.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace

from .structured import get_bool, get_str

__all__ = ["PublishOptions"]


@dataclass(frozen=True, slots=True)
class PublishOptions:
    """Maven coordinates, repository access and packing switches."""

    group: str = ""
    artifact_id: str = ""
    version: str = ""
    user_name: str = ""
    password: str = ""
    release_repo_url: str = ""
    snapshot_repo_url: str = ""
    description: str = ""
    pack_source_code: bool = True
    transitive_dependency: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> PublishOptions:
        """Create options from a `[publish]` table.

        Both the snake_case field names and the camelCase names of the Gradle
        DSL (`artifactId`, `releaseRepoUrl`, ...) are accepted.
        """
        pack = get_bool(data, "pack_source_code", "packSourceCode")
        transitive = get_bool(data, "transitive_dependency", "transitiveDependency")
        return cls(
            group=get_str(data, "group") or "",
            artifact_id=get_str(data, "artifact_id", "artifactId") or "",
            version=get_str(data, "version") or "",
            user_name=get_str(data, "user_name", "userName") or "",
            password=get_str(data, "password") or "",
            release_repo_url=get_str(data, "release_repo_url", "releaseRepoUrl") or "",
            snapshot_repo_url=get_str(data, "snapshot_repo_url", "snapshotRepoUrl") or "",
            description=get_str(data, "description") or "",
            pack_source_code=True if pack is None else pack,
            transitive_dependency=False if transitive is None else transitive,
        )

    def with_overrides(self, **changes: object) -> PublishOptions:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)  # type: ignore[arg-type]

    def masked(self) -> dict[str, str]:
        """Field values for display, with the password hidden."""
        return {
            "group": self.group,
            "artifactId": self.artifact_id,
            "version": self.version,
            "userName": self.user_name,
            "password": "***" if self.password else "",
            "releaseRepoUrl": self.release_repo_url,
            "snapshotRepoUrl": self.snapshot_repo_url,
            "description": self.description,
            "packSourceCode": str(self.pack_source_code).lower(),
            "transitiveDependency": str(self.transitive_dependency).lower(),
        }
