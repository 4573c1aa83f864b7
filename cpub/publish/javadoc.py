"""How the `-javadoc` jar of a publication is produced."""

from __future__ import annotations

from dataclasses import dataclass

from cpub.core.project import Project
from cpub.platform.detection import PlatformKind, has_doc_generator

__all__ = [
    "JavadocEmpty",
    "JavadocGenerated",
    "JavadocNone",
    "JavadocPolicy",
    "JavadocStandard",
    "default_javadoc_policy",
    "find_doc_task",
]

DOKKA_HTML_TASK = "dokkaHtml"
DOKKA_TASK = "dokka"


@dataclass(frozen=True, slots=True)
class JavadocNone:
    """No javadoc jar. Not accepted by Maven Central."""


@dataclass(frozen=True, slots=True)
class JavadocEmpty:
    """An empty javadoc jar, enough for repositories that require one."""


@dataclass(frozen=True, slots=True)
class JavadocStandard:
    """Repackage the output of the host's `javadoc` task."""


@dataclass(frozen=True, slots=True)
class JavadocGenerated:
    """Repackage the output of a documentation generator task."""

    task_name: str


type JavadocPolicy = JavadocNone | JavadocEmpty | JavadocStandard | JavadocGenerated


def find_doc_task(project: Project) -> str:
    """Pick the documentation task to package.

    The only generator task if there is exactly one, else `dokkaHtml` when
    present, else the conventional `dokka`.
    """
    if len(project.doc_tasks) == 1:
        return project.doc_tasks[0]
    if DOKKA_HTML_TASK in project.doc_tasks:
        return DOKKA_HTML_TASK
    return DOKKA_TASK


def default_javadoc_policy(kind: PlatformKind, project: Project) -> JavadocPolicy:
    """Javadoc policy for a platform when the user did not pick one."""
    if kind.is_android or kind == PlatformKind.UNSUPPORTED:
        return JavadocNone()
    if has_doc_generator(project):
        return JavadocGenerated(find_doc_task(project))
    if kind in (PlatformKind.JAVA_LIBRARY, PlatformKind.GRADLE_PLUGIN):
        return JavadocStandard()
    # Kotlin has no javadoc tool of its own.
    return JavadocEmpty()
