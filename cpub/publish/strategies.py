"""Per-platform publication strategies.

Each platform kind maps to one strategy value that knows which binary
component to publish and which sidecar archives to attach. Dispatch is a
`match` over the closed union, so a new kind without a strategy is caught by
the type checker (`assert_never`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import assert_never

from cpub.core.project import Coordinates, PomSpec, Project, Publication
from cpub.core.result import Err, Ok, Result
from cpub.platform.detection import PlatformKind

from .artifacts import ArtifactTaskFactory
from .errors import MissingVariantError, PublishError, UnsupportedPlatformError
from .javadoc import JavadocEmpty, JavadocNone, JavadocPolicy, default_javadoc_policy

__all__ = [
    "AndroidLibraryPublication",
    "DEFAULT_PUBLICATION",
    "GradlePluginPublication",
    "JavaLibraryPublication",
    "KotlinJsPublication",
    "KotlinLibraryPublication",
    "KotlinMultiplatformPublication",
    "PublicationStrategy",
    "UnsupportedPublication",
    "default_variant",
    "setup_publication",
    "strategy_for",
]

# Every single-variant strategy creates its publication under this name; the
# host's upload task name is derived from it.
DEFAULT_PUBLICATION = "maven"
DEFAULT_BUILD_TYPE = "release"
KMP_ROOT_PUBLICATION = "kotlinMultiplatform"

JAVA_COMPONENT = "java"
KOTLIN_COMPONENT = "kotlin"


@dataclass(frozen=True, slots=True)
class JavaLibraryPublication:
    """`java` / `java-library` projects: publish the `java` component."""

    javadoc: JavadocPolicy
    pack_sources: bool = True
    component: str = JAVA_COMPONENT


@dataclass(frozen=True, slots=True)
class KotlinLibraryPublication:
    """Kotlin/JVM projects: the Kotlin plugin also contributes to `java`."""

    javadoc: JavadocPolicy = field(default_factory=JavadocEmpty)
    pack_sources: bool = True
    component: str = JAVA_COMPONENT


@dataclass(frozen=True, slots=True)
class GradlePluginPublication:
    """`java-gradle-plugin` projects."""

    javadoc: JavadocPolicy
    pack_sources: bool = True
    component: str = JAVA_COMPONENT


@dataclass(frozen=True, slots=True)
class KotlinJsPublication:
    """Kotlin/JS projects: publish the `kotlin` component.

    Kotlin/JS creates no publication by itself, and there is no javadoc for
    it, hence the empty jar by default.
    """

    javadoc: JavadocPolicy = field(default_factory=JavadocEmpty)
    pack_sources: bool = True
    component: str = KOTLIN_COMPONENT


@dataclass(frozen=True, slots=True)
class KotlinMultiplatformPublication:
    """Kotlin multiplatform projects.

    The Kotlin plugin creates one publication per target, sources jars
    included; only the javadoc jar is added to each of them.
    """

    javadoc: JavadocPolicy = field(default_factory=JavadocEmpty)

    @property
    def pack_sources(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class AndroidLibraryPublication:
    """`com.android.library` projects: publish one build variant's component."""

    variant: str = DEFAULT_BUILD_TYPE
    pack_sources: bool = True
    javadoc: JavadocPolicy = field(default_factory=JavadocNone)


@dataclass(frozen=True, slots=True)
class UnsupportedPublication:
    """Kinds without a strategy; setting it up always fails."""

    kind: PlatformKind
    message: str

    @property
    def pack_sources(self) -> bool:
        return False


type PublicationStrategy = (
    JavaLibraryPublication
    | KotlinLibraryPublication
    | GradlePluginPublication
    | KotlinJsPublication
    | KotlinMultiplatformPublication
    | AndroidLibraryPublication
    | UnsupportedPublication
)


def default_variant(project: Project) -> str:
    """Build type published for Android libraries.

    `release` when declared (or when nothing is declared), else the first
    declared build type.
    """
    if not project.build_types or DEFAULT_BUILD_TYPE in project.build_types:
        return DEFAULT_BUILD_TYPE
    return project.build_types[0]


def strategy_for(kind: PlatformKind, project: Project, pack_source_code: bool) -> PublicationStrategy:
    """Build the strategy for `kind` with its default javadoc policy."""
    javadoc = default_javadoc_policy(kind, project)
    match kind:
        case PlatformKind.JAVA_LIBRARY:
            return JavaLibraryPublication(javadoc, pack_source_code)
        case PlatformKind.KOTLIN_LIBRARY:
            return KotlinLibraryPublication(javadoc, pack_source_code)
        case PlatformKind.GRADLE_PLUGIN:
            return GradlePluginPublication(javadoc, pack_source_code)
        case PlatformKind.KOTLIN_JS_LIBRARY:
            return KotlinJsPublication(javadoc, pack_source_code)
        case PlatformKind.KOTLIN_MULTIPLATFORM:
            return KotlinMultiplatformPublication(javadoc)
        case PlatformKind.ANDROID_LIBRARY:
            return AndroidLibraryPublication(default_variant(project), pack_source_code, javadoc)
        case PlatformKind.ANDROID_APPLICATION:
            return UnsupportedPublication(
                kind, f"Project '{project.name}' is an Android application; only libraries are published."
            )
        case PlatformKind.UNSUPPORTED:
            return UnsupportedPublication(
                kind,
                f"Project '{project.name}' applies no supported plugin "
                "(java, Kotlin JVM/JS/multiplatform, Android library or Gradle plugin).",
            )
        case _:
            assert_never(kind)


def _configure(publication: Publication, coordinates: Coordinates, pom: PomSpec) -> None:
    publication.coordinates = coordinates
    publication.pom = pom


def _single(
    project: Project,
    component: str,
    coordinates: Coordinates,
    pom: PomSpec,
) -> Publication:
    publication = project.publications.maybe_create(DEFAULT_PUBLICATION)
    _configure(publication, coordinates, pom)
    publication.component = component
    return publication


def _target_coordinates(publication: Publication, coordinates: Coordinates) -> Coordinates:
    if publication.name == KMP_ROOT_PUBLICATION:
        return coordinates
    return Coordinates(
        group=coordinates.group,
        artifact_id=f"{coordinates.artifact_id}-{publication.name.lower()}",
        version=coordinates.version,
    )


def setup_publication(
    strategy: PublicationStrategy,
    project: Project,
    coordinates: Coordinates,
    pom: PomSpec,
) -> Result[tuple[Publication, ...], PublishError]:
    """Register the publication(s) and sidecar archives of `strategy` on `project`.

    Running it again for the same project reuses the publication and the
    registered tasks.

    Returns:
        Ok(configured publications), or Err for unsupported kinds and missing
        Android variants.
    """
    factory = ArtifactTaskFactory(project)

    match strategy:
        case JavaLibraryPublication() | KotlinLibraryPublication() | GradlePluginPublication():
            publication = _single(project, strategy.component, coordinates, pom)
            publication.add_artifact(factory.java_sources_jar(strategy.pack_sources))
            publication.add_artifact(factory.javadoc_jar(strategy.javadoc))
            return Ok((publication,))

        case KotlinJsPublication():
            publication = _single(project, strategy.component, coordinates, pom)
            publication.add_artifact(factory.kotlin_sources_jar(strategy.pack_sources))
            publication.add_artifact(factory.javadoc_jar(strategy.javadoc))
            return Ok((publication,))

        case KotlinMultiplatformPublication(javadoc=javadoc):
            publications = project.publications.all()
            javadoc_jar = factory.javadoc_jar(javadoc)
            for publication in publications:
                _configure(publication, _target_coordinates(publication, coordinates), pom)
                publication.add_artifact(javadoc_jar)
            return Ok(publications)

        case AndroidLibraryPublication(variant=variant):
            if variant not in project.components:
                return Err(
                    MissingVariantError(
                        project=project.name,
                        variant=variant,
                        available=project.components,
                    )
                )
            publication = _single(project, variant, coordinates, pom)
            publication.add_artifact(factory.android_sources_jar(strategy.pack_sources, variant))
            publication.add_artifact(factory.javadoc_jar(strategy.javadoc))
            return Ok((publication,))

        case UnsupportedPublication(kind=kind, message=message):
            return Err(UnsupportedPlatformError(project=project.name, kind=kind, message=message))

        case _:
            assert_never(strategy)
