"""Sidecar archive tasks (sources and javadoc jars).

Every task is registered on the project's TaskRegistry under a fixed name, so
asking twice for the same archive in one configuration pass returns the task
registered the first time.
"""

from __future__ import annotations

from typing import assert_never

from cpub.core.project import ArchiveTask, Project

from .javadoc import JavadocEmpty, JavadocGenerated, JavadocNone, JavadocPolicy, JavadocStandard

__all__ = ["ArtifactTaskFactory", "capitalize_first"]

SOURCES_CLASSIFIER = "sources"
JAVADOC_CLASSIFIER = "javadoc"

JAVADOC_TASK = "javadoc"
CLASSES_TASK = "classes"
KOTLIN_SOURCES_JAR_TASK = "kotlinSourcesJar"


def capitalize_first(value: str) -> str:
    """Upper-case the first character only ("core-lib" -> "Core-lib")."""
    return value[:1].upper() + value[1:]


class ArtifactTaskFactory:
    """Creates the sidecar archive tasks of one project."""

    def __init__(self, project: Project) -> None:
        self._project = project
        self._suffix = capitalize_first(project.name)

    def _register(
        self,
        name: str,
        classifier: str,
        *,
        depends_on: tuple[str, ...] = (),
        contents: str | None = None,
        external: bool = False,
    ) -> ArchiveTask:
        return self._project.tasks.register(
            name,
            lambda: ArchiveTask(
                name=name,
                classifier=classifier,
                depends_on=depends_on,
                contents=contents,
                external=external,
            ),
        )

    def javadoc_jar(self, policy: JavadocPolicy) -> ArchiveTask | None:
        """Javadoc jar for `policy`; None when no javadoc is attached."""
        match policy:
            case JavadocNone():
                return None
            case JavadocEmpty():
                return self._register(f"emptyJavadocJarFor{self._suffix}", JAVADOC_CLASSIFIER)
            case JavadocStandard():
                return self._register(
                    f"simpleJavadocJarFor{self._suffix}",
                    JAVADOC_CLASSIFIER,
                    depends_on=(JAVADOC_TASK,),
                    contents=f"{JAVADOC_TASK} output",
                )
            case JavadocGenerated(task_name=task_name):
                return self._register(
                    f"dokkaJavadocJarFor{self._suffix}",
                    JAVADOC_CLASSIFIER,
                    depends_on=(task_name,),
                    contents=f"{task_name} output",
                )
            case _:
                assert_never(policy)

    def empty_sources_jar(self) -> ArchiveTask:
        return self._register(f"emptySourceJarFor{self._suffix}", SOURCES_CLASSIFIER)

    def java_sources_jar(self, pack_source: bool) -> ArchiveTask:
        """Sources of the `main` source set, or an empty jar."""
        if not pack_source:
            return self.empty_sources_jar()
        return self._register(
            f"javaSourceJarFor{self._suffix}",
            SOURCES_CLASSIFIER,
            depends_on=(CLASSES_TASK,),
            contents="sourceSets.main.allSource",
        )

    def kotlin_sources_jar(self, pack_source: bool) -> ArchiveTask:
        """The Kotlin plugin's own sources jar, or an empty jar."""
        if not pack_source:
            return self.empty_sources_jar()
        return self._register(
            KOTLIN_SOURCES_JAR_TASK,
            SOURCES_CLASSIFIER,
            contents="kotlin sources",
            external=True,
        )

    def android_sources_jar(self, pack_source: bool, variant: str) -> ArchiveTask:
        """Java sources of the Android `main` source set, or an empty jar."""
        if not pack_source:
            return self.empty_sources_jar()
        return self._register(
            f"androidSourceJarFor{variant}",
            SOURCES_CLASSIFIER,
            contents="android.sourceSets.main.java.srcDirs",
        )
