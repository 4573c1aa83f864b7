"""Destination repository selection."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from cpub.core.options import PublishOptions
from cpub.core.project import Project
from cpub.core.result import Err, Ok, Result

from .errors import ConfigurationError
from .versioning import VersionSuffix, classify_version

__all__ = ["Credentials", "RepositoryTarget", "local_repository_dir", "select_repository"]

# Name of the repository entry on the host; part of the upload task name.
REPOSITORY_NAME = "maven"


@dataclass(frozen=True, slots=True)
class Credentials:
    user_name: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(user_name={self.user_name!r}, password='***')"


@dataclass(frozen=True, slots=True)
class RepositoryTarget:
    """Where a publication goes.

    Attributes:
        kind: Version classification that selected this target.
        url: Repository URL (a file: URI for local publishing).
        credentials: Credentials attached to uploads; None for local.
    """

    kind: VersionSuffix
    url: str
    credentials: Credentials | None = None

    @property
    def credentials_required(self) -> bool:
        return self.kind.needs_credentials


def local_repository_dir(project: Project) -> Path:
    """Local repository under the root project's build output."""
    return project.root.build_dir / "repo"


def select_repository(
    options: PublishOptions,
    project: Project,
) -> Result[RepositoryTarget, ConfigurationError]:
    """Pick the repository for the resolved `options.version`.

    Must be called with resolved options: the version suffix decides the
    target, so an earlier partial configuration would give a wrong answer.
    """
    kind = classify_version(options.version)
    match kind:
        case VersionSuffix.LOCAL:
            url = local_repository_dir(project).resolve().as_uri()
            return Ok(RepositoryTarget(kind=kind, url=url))
        case VersionSuffix.SNAPSHOT:
            url, field_name = options.snapshot_repo_url, "snapshotRepoUrl"
        case VersionSuffix.RELEASE:
            url, field_name = options.release_repo_url, "releaseRepoUrl"

    if not url:
        return Err(
            ConfigurationError(
                f"{field_name} is required to publish {kind} version '{options.version}'",
                fields=(field_name,),
            )
        )
    return Ok(
        RepositoryTarget(
            kind=kind,
            url=url,
            credentials=Credentials(options.user_name, options.password),
        )
    )
