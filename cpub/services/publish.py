"""Publish service - configure and run a component publication.

Configuration is a two-phase protocol: the caller collects the user's options
(`PublishOptions`), then `configure()` classifies the project, resolves the
options, dispatches to the platform strategy and selects the repository.
Nothing runs on the host until every step succeeded.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from cpub.core.options import PublishOptions
from cpub.core.project import Coordinates, PomSpec, Project, Publication
from cpub.core.result import Err, Ok, Result
from cpub.output.console import ConsoleProtocol
from cpub.platform.detection import PlatformKind, classify_project
from cpub.publish.artifacts import capitalize_first
from cpub.publish.errors import ConfigurationError, PublishError, UnsupportedPlatformError
from cpub.publish.host_contract import publication_properties
from cpub.publish.report import coordinate, print_report
from cpub.publish.repository import REPOSITORY_NAME, RepositoryTarget, select_repository
from cpub.publish.resolver import FallbackSources, resolve
from cpub.publish.signing import PluginPortalKeys, SigningOptions
from cpub.publish.strategies import (
    DEFAULT_PUBLICATION,
    AndroidLibraryPublication,
    KotlinMultiplatformPublication,
    PublicationStrategy,
    UnsupportedPublication,
    setup_publication,
    strategy_for,
)

from .uploader import Uploader

__all__ = ["PublishPlan", "PublishService", "publish_task_name"]

PUBLISH_ALL_TASK = f"publishAllPublicationsTo{capitalize_first(REPOSITORY_NAME)}Repository"


def publish_task_name(publication: str = DEFAULT_PUBLICATION) -> str:
    """Host task uploading one publication ("publishMavenPublicationToMavenRepository")."""
    return (
        f"publish{capitalize_first(publication)}PublicationTo"
        f"{capitalize_first(REPOSITORY_NAME)}Repository"
    )


@dataclass(frozen=True, slots=True)
class PublishPlan:
    """Everything decided during configuration, before any task runs."""

    kind: PlatformKind
    options: PublishOptions
    strategy: PublicationStrategy
    publications: tuple[Publication, ...]
    repository: RepositoryTarget
    signing: SigningOptions | None = None
    portal_keys: PluginPortalKeys | None = None

    @property
    def tasks(self) -> tuple[str, ...]:
        """Host tasks run by publishComponent, in order."""
        match self.strategy:
            case AndroidLibraryPublication(variant=variant):
                return (f"assemble{capitalize_first(variant)}", publish_task_name())
            case KotlinMultiplatformPublication():
                return (PUBLISH_ALL_TASK,)
            case _:
                return (publish_task_name(),)

    def host_properties(self) -> dict[str, str]:
        """Project properties handed to the host tool.

        Besides coordinates and credentials they describe every configured
        publication (see `cpub.publish.host_contract`).
        """
        props = {
            "publishGroup": self.options.group,
            "publishArtifactId": self.options.artifact_id,
            "publishVersion": self.options.version,
            "publishDescription": self.options.description,
            "publishTransitiveDependency": str(self.options.transitive_dependency).lower(),
            "publishRepoUrl": self.repository.url,
        }
        props.update(publication_properties(self.publications))
        creds = self.repository.credentials
        if creds is not None:
            # <repository name>Username/Password is what Gradle's
            # credentials(PasswordCredentials) looks up.
            props[f"{REPOSITORY_NAME}Username"] = creds.user_name
            props[f"{REPOSITORY_NAME}Password"] = creds.password
        if self.signing is not None:
            props.update(self.signing.project_properties())
        if self.portal_keys is not None and self.kind == PlatformKind.GRADLE_PLUGIN:
            props.update(self.portal_keys.project_properties())
        return props


class PublishService:
    """Configure and publish one project."""

    def __init__(
        self,
        *,
        project: Project,
        options: PublishOptions,
        fallbacks: FallbackSources,
        console: ConsoleProtocol,
        uploader: Uploader,
    ) -> None:
        self._project = project
        self._options = options
        self._fallbacks = fallbacks
        self._console = console
        self._uploader = uploader

    def classify(self) -> PlatformKind:
        return classify_project(self._project)

    def resolve_options(self) -> Result[PublishOptions, ConfigurationError]:
        return resolve(self._options, self._project, self._fallbacks)

    def configure(self) -> Result[PublishPlan, PublishError]:
        """Classify, resolve, register publications and select the repository."""
        project = self._project
        kind = self.classify()
        self._console.detail(f"platform: {kind}")

        strategy = strategy_for(kind, project, self._options.pack_source_code)
        if isinstance(strategy, UnsupportedPublication):
            return Err(
                UnsupportedPlatformError(project=project.name, kind=kind, message=strategy.message)
            )

        resolved = self.resolve_options()
        if isinstance(resolved, Err):
            return resolved
        options = resolved.value

        coordinates = Coordinates(options.group, options.artifact_id, options.version)
        pom = PomSpec(
            name=options.artifact_id,
            description=options.description,
            include_dependencies=options.transitive_dependency,
        )
        publications = setup_publication(strategy, project, coordinates, pom)
        if isinstance(publications, Err):
            return publications
        if not publications.value:
            self._console.warning(f"project '{project.name}' has no publications to configure")
        for publication in publications.value:
            self._console.detail(
                f"publication {publication.name}: {', '.join(publication.classifiers) or 'no sidecars'}"
            )

        repository = select_repository(options, project)
        if isinstance(repository, Err):
            return repository

        env: Mapping[str, str] = self._fallbacks.environment
        return Ok(
            PublishPlan(
                kind=kind,
                options=options,
                strategy=strategy,
                publications=publications.value,
                repository=repository.value,
                signing=SigningOptions.from_env(env),
                portal_keys=PluginPortalKeys.from_env(env),
            )
        )

    def publish_component(self) -> Result[PublishPlan, PublishError]:
        """Configure, run the host tasks, then print the report.

        The report is printed only after the upload task succeeded.
        """
        planned = self.configure()
        if isinstance(planned, Err):
            return planned
        plan = planned.value

        self._console.header(f"Publishing {coordinate(plan.options)}")
        properties = plan.host_properties()
        for task in plan.tasks:
            self._console.info(f"running {self._project.task_path(task)}")
            ran = self._uploader.run_task(self._project, task, properties)
            if isinstance(ran, Err):
                return ran

        print_report(self._console, plan.options, plan.repository)
        return Ok(plan)
