"""Project properties describing the configured publications to the host.

The host build applies `samples/publishing.gradle.kts`, which rebuilds the
publications and archive tasks from these properties:

    publish.publications                 maven
    publish.maven.component              java
    publish.maven.groupId                com.example
    publish.maven.artifactId             core
    publish.maven.version                1.0.0
    publish.maven.pomDependencies        false
    publish.maven.artifacts              javaSourceJarForCore,emptyJavadocJarForCore
    publish.task.javaSourceJarForCore.classifier   sources
    publish.task.javaSourceJarForCore.dependsOn    classes
    publish.task.javaSourceJarForCore.contents     sourceSets.main.allSource
    publish.task.javaSourceJarForCore.external     false

Lists are comma separated; an empty `contents` means an empty archive, and a
blank `component` keeps whatever the host already put in the publication.
"""

from __future__ import annotations

from collections.abc import Iterable

from cpub.core.project import ArchiveTask, Publication

__all__ = ["PROPERTY_PREFIX", "archive_properties", "publication_properties"]

PROPERTY_PREFIX = "publish."


def _flag(value: bool) -> str:
    return str(value).lower()


def archive_properties(task: ArchiveTask) -> dict[str, str]:
    key = f"{PROPERTY_PREFIX}task.{task.name}"
    return {
        f"{key}.classifier": task.classifier,
        f"{key}.dependsOn": ",".join(task.depends_on),
        f"{key}.contents": task.contents or "",
        f"{key}.external": _flag(task.external),
    }


def publication_properties(publications: Iterable[Publication]) -> dict[str, str]:
    """Flatten configured publications and their sidecar archives."""
    props: dict[str, str] = {}
    names: list[str] = []
    for publication in publications:
        names.append(publication.name)
        key = f"{PROPERTY_PREFIX}{publication.name}"
        props[f"{key}.component"] = publication.component or ""
        if publication.coordinates is not None:
            props[f"{key}.groupId"] = publication.coordinates.group
            props[f"{key}.artifactId"] = publication.coordinates.artifact_id
            props[f"{key}.version"] = publication.coordinates.version
        if publication.pom is not None:
            props[f"{key}.pomDependencies"] = _flag(publication.pom.include_dependencies)
        props[f"{key}.artifacts"] = ",".join(a.name for a in publication.artifacts)
        for task in publication.artifacts:
            props.update(archive_properties(task))
    props[f"{PROPERTY_PREFIX}publications"] = ",".join(names)
    return props
