"""Tests for cpub.core.project module."""

from __future__ import annotations

from pathlib import Path

from cpub.core.project import (
    ArchiveTask,
    Coordinates,
    Project,
    Publication,
    PublicationContainer,
    TaskRegistry,
)


def _tree(tmp_path: Path) -> tuple[Project, Project, Project]:
    root = Project(name="samples", directory=tmp_path)
    mid = Project(name="libs", directory=tmp_path / "libs", parent=root)
    leaf = Project(name="core", directory=tmp_path / "libs" / "core", parent=mid)
    return root, mid, leaf


class TestProject:
    def test_root_and_path(self, tmp_path: Path) -> None:
        root, mid, leaf = _tree(tmp_path)
        assert leaf.root is root
        assert root.is_root is True
        assert leaf.is_root is False
        assert root.path == ":"
        assert mid.path == ":libs"
        assert leaf.path == ":libs:core"

    def test_ancestors_nearest_first(self, tmp_path: Path) -> None:
        root, mid, leaf = _tree(tmp_path)
        assert list(leaf.ancestors()) == [mid, root]
        assert list(root.ancestors()) == []

    def test_task_path(self, tmp_path: Path) -> None:
        root, _, leaf = _tree(tmp_path)
        assert root.task_path("publish") == ":publish"
        assert leaf.task_path("assembleRelease") == ":libs:core:assembleRelease"

    def test_build_dir(self, tmp_path: Path) -> None:
        root, _, _ = _tree(tmp_path)
        assert root.build_dir == tmp_path / "build"

    def test_plugins_are_read_live(self, tmp_path: Path) -> None:
        project = Project(name="core", directory=tmp_path)
        assert project.has_plugin("java") is False
        project.plugins.add("java")
        assert project.has_plugin("java") is True

    def test_repr(self, tmp_path: Path) -> None:
        _, _, leaf = _tree(tmp_path)
        assert repr(leaf) == "Project(':libs:core', name='core')"


class TestTaskRegistry:
    def test_register_is_memoized(self) -> None:
        """A second registration returns the first task without building again."""
        registry = TaskRegistry()
        calls: list[str] = []

        def build() -> ArchiveTask:
            calls.append("built")
            return ArchiveTask(name="emptySourceJarForCore", classifier="sources")

        first = registry.register("emptySourceJarForCore", build)
        second = registry.register("emptySourceJarForCore", build)

        assert first is second
        assert calls == ["built"]
        assert len(registry) == 1

    def test_find_and_names(self) -> None:
        registry = TaskRegistry()
        registry.register("a", lambda: ArchiveTask(name="a", classifier="sources"))
        registry.register("b", lambda: ArchiveTask(name="b", classifier="javadoc"))
        assert registry.names == ("a", "b")
        assert registry.find("missing") is None
        assert [t.classifier for t in registry] == ["sources", "javadoc"]

    def test_empty_archive(self) -> None:
        assert ArchiveTask(name="x", classifier="javadoc").is_empty is True
        assert ArchiveTask(name="x", classifier="sources", contents="src").is_empty is False


class TestPublication:
    def test_add_artifact_ignores_none_and_duplicates(self) -> None:
        publication = Publication("maven")
        task = ArchiveTask(name="emptyJavadocJarForCore", classifier="javadoc")
        publication.add_artifact(task)
        publication.add_artifact(task)
        publication.add_artifact(None)
        assert publication.classifiers == ("javadoc",)

    def test_coordinates_str(self) -> None:
        assert str(Coordinates("com.example", "core", "1.0.0")) == "com.example:core:1.0.0"


class TestPublicationContainer:
    def test_maybe_create_reuses_existing(self) -> None:
        container = PublicationContainer()
        first = container.maybe_create("maven")
        second = container.maybe_create("maven")
        assert first is second
        assert len(container) == 1

    def test_existing_publications(self) -> None:
        container = PublicationContainer(("kotlinMultiplatform", "jvm"))
        assert [p.name for p in container.all()] == ["kotlinMultiplatform", "jvm"]
        assert container.find("jvm") is not None
        assert container.find("js") is None
