"""Publish option resolution.

Fills the blanks of the user's options from the project and the fallback
sources, then validates the result. Resolution is idempotent: resolving an
already resolved value changes nothing, because every "if blank" branch is
skipped.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from cpub.core.options import PublishOptions
from cpub.core.project import UNSPECIFIED_VERSION, Project
from cpub.core.properties import LOCAL_PROPERTIES, load_properties
from cpub.core.result import Err, Ok, Result

from .errors import ConfigurationError
from .versioning import VersionSuffix, classify_version

__all__ = [
    "FallbackSources",
    "REPOSITORY_PASSWORD_KEY",
    "REPOSITORY_RELEASE_URL_KEY",
    "REPOSITORY_SNAPSHOT_URL_KEY",
    "REPOSITORY_USERNAME_KEY",
    "default_group",
    "resolve",
]

# Keys read from local.properties.
REPOSITORY_USERNAME_KEY = "REPO_USER"
REPOSITORY_PASSWORD_KEY = "REPO_PASSWORD"
REPOSITORY_RELEASE_URL_KEY = "REPO_RELEASE_URL"
REPOSITORY_SNAPSHOT_URL_KEY = "REPO_SNAPSHOT_URL"

# Environment variables consulted after the property file.
OSSRH_USERNAME_ENV = "OSSRH_USERNAME"
OSSRH_PASSWORD_ENV = "OSSRH_PASSWORD"


def _empty() -> dict[str, str]:
    return {}


@dataclass(frozen=True, slots=True)
class FallbackSources:
    """Read-only key/value sources used when an option is blank."""

    properties: Mapping[str, str] = field(default_factory=_empty)
    environment: Mapping[str, str] = field(default_factory=_empty)

    @classmethod
    def load(cls, root_dir: Path, environ: Mapping[str, str] | None = None) -> FallbackSources:
        """Read `local.properties` from the root project and snapshot the environment."""
        env = os.environ if environ is None else environ
        return cls(
            properties=load_properties(root_dir / LOCAL_PROPERTIES),
            environment=dict(env),
        )

    def property(self, key: str) -> str:
        return self.properties.get(key, "").strip()

    def env(self, key: str) -> str:
        return self.environment.get(key, "").strip()


def _first(*candidates: str) -> str:
    for value in candidates:
        if value.strip():
            return value.strip()
    return ""


def default_group(project: Project) -> str | None:
    """Nearest non-blank group on the project or its ancestors.

    Gradle gives every subproject the root name (or "<root>.<parent path>")
    as an implicit group; such values are not real coordinates and are skipped.
    """
    root_name = project.root.name
    for candidate in (project, *project.ancestors()):
        group = candidate.group.strip()
        if not group or group == root_name or group.startswith(f"{root_name}."):
            continue
        return group
    return None


def _resolve_version(options: PublishOptions, project: Project) -> str | None:
    if options.version.strip():
        return options.version.strip()
    declared = project.version.strip()
    if not declared or declared == UNSPECIFIED_VERSION:
        return None
    return declared


def resolve(
    options: PublishOptions,
    project: Project,
    fallbacks: FallbackSources | None = None,
) -> Result[PublishOptions, ConfigurationError]:
    """Produce fully resolved, validated publish options.

    Args:
        options: Options as collected from the user (may have blanks).
        project: The project being published.
        fallbacks: Property file / environment values; empty if None.

    Returns:
        Ok(resolved options), or Err(ConfigurationError) naming the missing fields.
    """
    sources = fallbacks or FallbackSources()

    group = options.group.strip() or default_group(project)
    if not group:
        return Err(
            ConfigurationError(
                f"unspecified group for project '{project.name}'",
                fields=("group",),
                hint="set 'group' in [publish] or declare a group on a parent project",
            )
        )

    version = _resolve_version(options, project)
    if version is None:
        return Err(
            ConfigurationError(
                f"unspecified version for project '{project.name}'",
                fields=("version",),
                hint="set 'version' in [publish] or on the project",
            )
        )

    resolved = options.with_overrides(
        group=group,
        artifact_id=options.artifact_id.strip() or project.name,
        version=version,
    )
    if classify_version(version) == VersionSuffix.LOCAL:
        return Ok(resolved)

    resolved = resolved.with_overrides(
        user_name=_first(
            options.user_name,
            sources.property(REPOSITORY_USERNAME_KEY),
            sources.env(OSSRH_USERNAME_ENV),
        ),
        password=_first(
            options.password,
            sources.property(REPOSITORY_PASSWORD_KEY),
            sources.env(OSSRH_PASSWORD_ENV),
        ),
        release_repo_url=_first(
            options.release_repo_url, sources.property(REPOSITORY_RELEASE_URL_KEY)
        ),
        snapshot_repo_url=_first(
            options.snapshot_repo_url, sources.property(REPOSITORY_SNAPSHOT_URL_KEY)
        ),
    )

    missing: list[str] = []
    if not resolved.user_name:
        missing.append("userName")
    if not resolved.password:
        missing.append("password")
    if not resolved.release_repo_url and not resolved.snapshot_repo_url:
        missing.append("releaseRepoUrl|snapshotRepoUrl")
    if missing:
        return Err(
            ConfigurationError(
                f"missing repository credentials/urls: {', '.join(missing)}",
                fields=tuple(missing),
                hint=(
                    f"publish a '-LOCAL' version, or provide them in [publish] or "
                    f"{LOCAL_PROPERTIES} ({REPOSITORY_USERNAME_KEY}, {REPOSITORY_PASSWORD_KEY}, "
                    f"{REPOSITORY_RELEASE_URL_KEY}, {REPOSITORY_SNAPSHOT_URL_KEY})"
                ),
            )
        )
    return Ok(resolved)
