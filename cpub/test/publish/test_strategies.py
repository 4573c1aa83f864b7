"""Tests for cpub.publish.strategies module."""

from __future__ import annotations

from pathlib import Path

from cpub.core.project import Coordinates, PomSpec, Project, PublicationContainer
from cpub.core.result import Err, Ok
from cpub.platform.detection import PlatformKind
from cpub.publish.errors import MissingVariantError, UnsupportedPlatformError
from cpub.publish.javadoc import JavadocEmpty, JavadocNone, JavadocStandard
from cpub.publish.strategies import (
    AndroidLibraryPublication,
    GradlePluginPublication,
    JavaLibraryPublication,
    KotlinJsPublication,
    KotlinLibraryPublication,
    KotlinMultiplatformPublication,
    UnsupportedPublication,
    default_variant,
    setup_publication,
    strategy_for,
)

COORDS = Coordinates("com.example", "core", "1.0.0")
POM = PomSpec(name="core")


def _project(tmp_path: Path, **kwargs: object) -> Project:
    return Project(name="core", directory=tmp_path, **kwargs)  # type: ignore[arg-type]


class TestStrategyFor:
    def test_one_strategy_per_kind(self, tmp_path: Path) -> None:
        project = _project(tmp_path)
        expected = {
            PlatformKind.JAVA_LIBRARY: JavaLibraryPublication,
            PlatformKind.KOTLIN_LIBRARY: KotlinLibraryPublication,
            PlatformKind.GRADLE_PLUGIN: GradlePluginPublication,
            PlatformKind.KOTLIN_JS_LIBRARY: KotlinJsPublication,
            PlatformKind.KOTLIN_MULTIPLATFORM: KotlinMultiplatformPublication,
            PlatformKind.ANDROID_LIBRARY: AndroidLibraryPublication,
            PlatformKind.ANDROID_APPLICATION: UnsupportedPublication,
            PlatformKind.UNSUPPORTED: UnsupportedPublication,
        }
        for kind, strategy_type in expected.items():
            assert isinstance(strategy_for(kind, project, True), strategy_type)

    def test_kotlin_defaults_to_empty_javadoc(self, tmp_path: Path) -> None:
        strategy = strategy_for(PlatformKind.KOTLIN_LIBRARY, _project(tmp_path), True)
        assert strategy == KotlinLibraryPublication(JavadocEmpty(), True)

    def test_pack_source_flag_is_carried(self, tmp_path: Path) -> None:
        strategy = strategy_for(PlatformKind.JAVA_LIBRARY, _project(tmp_path), False)
        assert strategy == JavaLibraryPublication(JavadocStandard(), False)

    def test_unsupported_message_names_project(self, tmp_path: Path) -> None:
        strategy = strategy_for(PlatformKind.UNSUPPORTED, _project(tmp_path), True)
        assert isinstance(strategy, UnsupportedPublication)
        assert "'core'" in strategy.message


class TestDefaultVariant:
    def test_release_when_declared(self, tmp_path: Path) -> None:
        assert default_variant(_project(tmp_path, build_types=("debug", "release"))) == "release"

    def test_release_when_nothing_declared(self, tmp_path: Path) -> None:
        assert default_variant(_project(tmp_path)) == "release"

    def test_first_build_type_otherwise(self, tmp_path: Path) -> None:
        assert default_variant(_project(tmp_path, build_types=("staging", "debug"))) == "staging"


class TestSetupPublication:
    def test_java_library(self, tmp_path: Path) -> None:
        project = _project(tmp_path)
        result = setup_publication(JavaLibraryPublication(JavadocStandard()), project, COORDS, POM)

        assert isinstance(result, Ok)
        (publication,) = result.value
        assert publication.name == "maven"
        assert publication.component == "java"
        assert publication.coordinates == COORDS
        assert publication.pom == POM
        assert [a.name for a in publication.artifacts] == ["javaSourceJarForCore", "simpleJavadocJarForCore"]

    def test_kotlin_js_uses_kotlin_component(self, tmp_path: Path) -> None:
        project = _project(tmp_path)
        result = setup_publication(KotlinJsPublication(), project, COORDS, POM)

        assert isinstance(result, Ok)
        (publication,) = result.value
        assert publication.component == "kotlin"
        assert [a.name for a in publication.artifacts] == ["kotlinSourcesJar", "emptyJavadocJarForCore"]

    def test_gradle_plugin_reuses_existing_publication(self, tmp_path: Path) -> None:
        project = _project(tmp_path, publications=PublicationContainer(("maven", "pluginMaven")))
        result = setup_publication(GradlePluginPublication(JavadocEmpty()), project, COORDS, POM)

        assert isinstance(result, Ok)
        assert len(project.publications) == 2
        assert result.value[0] is project.publications.find("maven")

    def test_multiplatform_configures_existing_publications(self, tmp_path: Path) -> None:
        project = _project(
            tmp_path,
            publications=PublicationContainer(("kotlinMultiplatform", "jvm", "iosArm64")),
        )
        result = setup_publication(KotlinMultiplatformPublication(), project, COORDS, POM)

        assert isinstance(result, Ok)
        assert len(result.value) == 3
        assert len(project.publications) == 3
        by_name = {p.name: p for p in result.value}
        assert by_name["kotlinMultiplatform"].coordinates == COORDS
        jvm = by_name["jvm"].coordinates
        assert jvm is not None
        assert jvm.artifact_id == "core-jvm"
        assert by_name["iosArm64"].coordinates == Coordinates("com.example", "core-iosarm64", "1.0.0")
        for publication in result.value:
            assert publication.classifiers == ("javadoc",)
        assert project.tasks.names == ("emptyJavadocJarForCore",)

    def test_multiplatform_creates_nothing(self, tmp_path: Path) -> None:
        project = _project(tmp_path)
        result = setup_publication(KotlinMultiplatformPublication(), project, COORDS, POM)

        assert result == Ok(())
        assert len(project.publications) == 0

    def test_android_library(self, tmp_path: Path) -> None:
        project = _project(tmp_path, build_types=("debug", "release"), components=("debug", "release"))
        result = setup_publication(AndroidLibraryPublication("release"), project, COORDS, POM)

        assert isinstance(result, Ok)
        (publication,) = result.value
        assert publication.component == "release"
        assert publication.classifiers == ("sources",)
        assert publication.artifacts[0].name == "androidSourceJarForrelease"

    def test_android_missing_variant(self, tmp_path: Path) -> None:
        project = _project(tmp_path, components=("debug",))
        result = setup_publication(AndroidLibraryPublication("release"), project, COORDS, POM)

        assert result == Err(MissingVariantError(project="core", variant="release", available=("debug",)))
        assert len(project.publications) == 0

    def test_android_with_javadoc_policy(self, tmp_path: Path) -> None:
        project = _project(tmp_path, components=("release",))
        strategy = AndroidLibraryPublication("release", pack_sources=False, javadoc=JavadocEmpty())
        result = setup_publication(strategy, project, COORDS, POM)

        assert isinstance(result, Ok)
        assert [a.name for a in result.value[0].artifacts] == ["emptySourceJarForCore", "emptyJavadocJarForCore"]

    def test_unsupported_always_fails(self, tmp_path: Path) -> None:
        strategy = UnsupportedPublication(PlatformKind.UNSUPPORTED, "no plugin on 'core'")
        result = setup_publication(strategy, _project(tmp_path), COORDS, POM)

        assert isinstance(result, Err)
        assert isinstance(result.error, UnsupportedPlatformError)
        assert result.error.project == "core"

    def test_setup_twice_registers_each_task_once(self, tmp_path: Path) -> None:
        project = _project(tmp_path)
        strategy = KotlinLibraryPublication(JavadocEmpty(), True)

        first = setup_publication(strategy, project, COORDS, POM)
        second = setup_publication(strategy, project, COORDS, POM)

        assert isinstance(first, Ok) and isinstance(second, Ok)
        assert first.value[0] is second.value[0]
        assert project.tasks.names == ("javaSourceJarForCore", "emptyJavadocJarForCore")
        assert len(second.value[0].artifacts) == 2

    def test_android_javadoc_none_by_default(self) -> None:
        assert AndroidLibraryPublication().javadoc == JavadocNone()
