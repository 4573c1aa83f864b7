"""Host build project model.

A `Project` mirrors what the host build tool knows about one module: its
coordinates, the plugins applied to it, its build types and components, and
the projects above it. Each project owns a `TaskRegistry` and a
`PublicationContainer`, which the publish engine fills in during one
configuration pass.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

__all__ = [
    "ArchiveTask",
    "Coordinates",
    "PomSpec",
    "Project",
    "Publication",
    "PublicationContainer",
    "TaskRegistry",
    "UNSPECIFIED_VERSION",
]

# Gradle reports this when a project never declared a version.
UNSPECIFIED_VERSION = "unspecified"


@dataclass(frozen=True, slots=True)
class ArchiveTask:
    """A jar task attached to a publication as a sidecar artifact.

    Attributes:
        name: Task name, unique within a project.
        classifier: Maven classifier ("sources" or "javadoc").
        depends_on: Tasks that must run first.
        contents: What the archive packs; None for an empty archive.
        external: True when the host already provides the task.
    """

    name: str
    classifier: str
    depends_on: tuple[str, ...] = ()
    contents: str | None = None
    external: bool = False

    @property
    def is_empty(self) -> bool:
        return self.contents is None


class TaskRegistry:
    """Tasks registered on a project, keyed by name."""

    def __init__(self) -> None:
        self._tasks: dict[str, ArchiveTask] = {}

    def register(self, name: str, build: Callable[[], ArchiveTask]) -> ArchiveTask:
        """Register the task built by `build` unless `name` already exists.

        Returns the registered task; a second registration under the same name
        returns the first one and does not call `build`.
        """
        existing = self._tasks.get(name)
        if existing is not None:
            return existing
        task = build()
        self._tasks[name] = task
        return task

    def find(self, name: str) -> ArchiveTask | None:
        return self._tasks.get(name)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[ArchiveTask]:
        return iter(self._tasks.values())


@dataclass(frozen=True, slots=True)
class Coordinates:
    """Maven coordinates of a publication."""

    group: str
    artifact_id: str
    version: str

    def __str__(self) -> str:
        return f"{self.group}:{self.artifact_id}:{self.version}"


@dataclass(frozen=True, slots=True)
class PomSpec:
    """POM metadata written for a publication.

    When `include_dependencies` is False the `<dependencies>` node is dropped,
    so consumers do not pull the library's dependencies transitively.
    """

    name: str
    description: str = ""
    include_dependencies: bool = False


@dataclass(slots=True)
class Publication:
    """A named bundle of one binary component plus sidecar archives."""

    name: str
    component: str | None = None
    coordinates: Coordinates | None = None
    pom: PomSpec | None = None
    artifacts: list[ArchiveTask] = field(default_factory=list)

    def add_artifact(self, task: ArchiveTask | None) -> None:
        """Attach a sidecar archive; None and repeated task names are ignored."""
        if task is None:
            return
        if any(a.name == task.name for a in self.artifacts):
            return
        self.artifacts.append(task)

    @property
    def classifiers(self) -> tuple[str, ...]:
        return tuple(a.classifier for a in self.artifacts)


class PublicationContainer:
    """Publications of a project, keyed by name."""

    def __init__(self, existing: tuple[str, ...] = ()) -> None:
        self._items: dict[str, Publication] = {name: Publication(name) for name in existing}

    def maybe_create(self, name: str) -> Publication:
        """Return the publication called `name`, creating it if needed."""
        publication = self._items.get(name)
        if publication is None:
            publication = Publication(name)
            self._items[name] = publication
        return publication

    def find(self, name: str) -> Publication | None:
        return self._items.get(name)

    def all(self) -> tuple[Publication, ...]:
        return tuple(self._items.values())

    def __len__(self) -> int:
        return len(self._items)


@dataclass(slots=True, eq=False)
class Project:
    """One module of a host build.

    Attributes:
        name: Project name (default artifact id).
        directory: Project directory on disk.
        group: Declared group; may be blank.
        version: Declared version; blank or "unspecified" when not set.
        plugins: Applied plugin ids; mutable, classification reads it fresh.
        build_types: Android build types, in declaration order.
        components: Software components the host created (e.g. Android variants).
        doc_tasks: Documentation generator tasks (e.g. "dokkaHtml").
        parent: Enclosing project; None for the root project.
    """

    name: str
    directory: Path
    group: str = ""
    version: str = ""
    plugins: set[str] = field(default_factory=set)
    build_types: tuple[str, ...] = ()
    components: tuple[str, ...] = ()
    doc_tasks: tuple[str, ...] = ()
    parent: Project | None = None
    tasks: TaskRegistry = field(default_factory=TaskRegistry)
    publications: PublicationContainer = field(default_factory=PublicationContainer)

    @property
    def root(self) -> Project:
        project = self
        while project.parent is not None:
            project = project.parent
        return project

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def path(self) -> str:
        """Gradle project path: ":" for the root, ":a:b" below it."""
        names: list[str] = []
        project = self
        while project.parent is not None:
            names.append(project.name)
            project = project.parent
        return ":" + ":".join(reversed(names))

    @property
    def build_dir(self) -> Path:
        return self.directory / "build"

    def ancestors(self) -> Iterator[Project]:
        """Yield the parent, grandparent, ... up to the root."""
        project = self.parent
        while project is not None:
            yield project
            project = project.parent

    def has_plugin(self, plugin_id: str) -> bool:
        return plugin_id in self.plugins

    def task_path(self, task: str) -> str:
        """Fully qualified task path (":lib:assembleRelease")."""
        if self.is_root:
            return f":{task}"
        return f"{self.path}:{task}"

    def __repr__(self) -> str:
        return f"Project({self.path!r}, name={self.name!r})"
