"""Platform detection.

Classifies a host project by the plugins applied to it, and detects the
operating system running the host tool (for the wrapper script name).
"""

from __future__ import annotations

import sys as _sys
from collections.abc import Collection
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cpub.core.project import Project

__all__ = [
    "ANDROID_APPLICATION_PLUGIN",
    "ANDROID_LIBRARY_PLUGIN",
    "DOKKA_PLUGINS",
    "GRADLE_PLUGIN_PLUGIN",
    "JAVA_PLUGINS",
    "KOTLIN_JS_PLUGIN",
    "KOTLIN_JVM_PLUGIN",
    "KOTLIN_MULTIPLATFORM_PLUGIN",
    "PlatformKind",
    "classify",
    "classify_project",
    "has_doc_generator",
    "is_windows",
    "wrapper_script",
]

ANDROID_APPLICATION_PLUGIN = "com.android.application"
ANDROID_LIBRARY_PLUGIN = "com.android.library"
JAVA_PLUGINS = ("java-library", "java")
KOTLIN_JVM_PLUGIN = "org.jetbrains.kotlin.jvm"
GRADLE_PLUGIN_PLUGIN = "java-gradle-plugin"
KOTLIN_JS_PLUGIN = "org.jetbrains.kotlin.js"
KOTLIN_MULTIPLATFORM_PLUGIN = "org.jetbrains.kotlin.multiplatform"
DOKKA_PLUGINS = ("org.jetbrains.dokka", "org.jetbrains.dokka-android")


class PlatformKind(Enum):
    """Kind of buildable module."""

    ANDROID_APPLICATION = auto()
    ANDROID_LIBRARY = auto()
    JAVA_LIBRARY = auto()
    KOTLIN_LIBRARY = auto()
    KOTLIN_JS_LIBRARY = auto()
    KOTLIN_MULTIPLATFORM = auto()
    GRADLE_PLUGIN = auto()
    UNSUPPORTED = auto()

    def __str__(self) -> str:
        return self.name.lower().replace("_", "-")

    @property
    def is_android(self) -> bool:
        return self in (PlatformKind.ANDROID_APPLICATION, PlatformKind.ANDROID_LIBRARY)

    @property
    def is_publishable(self) -> bool:
        """Check if a publication strategy exists for this kind."""
        return self not in (PlatformKind.ANDROID_APPLICATION, PlatformKind.UNSUPPORTED)


# Checked top to bottom; a project usually carries several of these markers
# (an Android library with Kotlin, a Kotlin/JVM module with java-library), so
# the order decides.
_PRIORITY: tuple[tuple[PlatformKind, tuple[str, ...]], ...] = (
    (PlatformKind.ANDROID_APPLICATION, (ANDROID_APPLICATION_PLUGIN,)),
    (PlatformKind.ANDROID_LIBRARY, (ANDROID_LIBRARY_PLUGIN,)),
    (PlatformKind.JAVA_LIBRARY, JAVA_PLUGINS),
    (PlatformKind.KOTLIN_LIBRARY, (KOTLIN_JVM_PLUGIN,)),
    (PlatformKind.GRADLE_PLUGIN, (GRADLE_PLUGIN_PLUGIN,)),
    (PlatformKind.KOTLIN_JS_LIBRARY, (KOTLIN_JS_PLUGIN,)),
    (PlatformKind.KOTLIN_MULTIPLATFORM, (KOTLIN_MULTIPLATFORM_PLUGIN,)),
)


def classify(capabilities: Collection[str]) -> PlatformKind:
    """Map a set of applied plugin ids to exactly one PlatformKind.

    Never fails: a project with no known marker is UNSUPPORTED.
    """
    for kind, markers in _PRIORITY:
        if any(marker in capabilities for marker in markers):
            return kind
    return PlatformKind.UNSUPPORTED


def classify_project(project: Project) -> PlatformKind:
    """Classify a project from its current plugins (not cached)."""
    return classify(project.plugins)


def has_doc_generator(project: Project) -> bool:
    """Check if a documentation generator plugin (Dokka) is applied."""
    return any(project.has_plugin(p) for p in DOKKA_PLUGINS)


def is_windows() -> bool:
    """Check if the host tool runs on Windows."""
    return _sys.platform.lower().startswith(("win32", "cygwin", "msys"))


def wrapper_script() -> str:
    """Name of the Gradle wrapper script for this operating system."""
    return "gradlew.bat" if is_windows() else "./gradlew"
