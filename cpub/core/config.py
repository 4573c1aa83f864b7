"""Project descriptor loading.

A descriptor (`publish.toml`) describes the module to publish and the user's
publish options:

    [project]
    name = "kotlin-library-sample"
    version = "1.0.0"
    plugins = ["java-library", "org.jetbrains.kotlin.jvm"]

    [project.parent]
    name = "samples"
    group = "com.dorck"

    [publish]
    group = "com.dorck.kotlin"
    version = "1.0.0-LOCAL"

The directory holding the descriptor is the root project's directory.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .options import PublishOptions
from .project import Project, PublicationContainer
from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_str_list, get_table

__all__ = [
    "Config",
    "ConfigFileError",
    "DESCRIPTOR_NAME",
    "find_descriptor_upward",
    "load_config",
    "locate_descriptor",
    "project_from_dict",
]

DESCRIPTOR_NAME = "publish.toml"
DESCRIPTOR_ENV_VAR = "CPUB_PROJECT"

# Nesting deeper than this is almost certainly a cycle in hand-written TOML.
_MAX_DEPTH = 32

# The Android Gradle plugin always creates these two build types.
ANDROID_DEFAULT_BUILD_TYPES = ("debug", "release")
_ANDROID_PLUGIN_PREFIX = "com.android."


@dataclass(frozen=True, slots=True)
class ConfigFileError:
    """Error when the descriptor cannot be found, read or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class Config:
    """A loaded descriptor: the project to publish and the raw options."""

    project: Project
    options: PublishOptions
    path: Path

    @property
    def root_dir(self) -> Path:
        return self.path.parent


def _build_project(table: Mapping[str, object], root_dir: Path, depth: int) -> Project:
    if depth > _MAX_DEPTH:
        raise ValueError("project parents nested too deeply")

    name = get_str(table, "name")
    if name is None:
        raise ValueError("every [project] table needs a 'name'")

    parent_table = get_table(table, "parent")
    parent = _build_project(parent_table, root_dir, depth + 1) if parent_table else None

    rel = get_str(table, "directory")
    if parent is None:
        directory = root_dir / rel if rel else root_dir
    else:
        directory = parent.root.directory / rel if rel else parent.directory / name

    plugins = set(get_str_list(table, "plugins"))
    build_types = get_str_list(table, "build_types")
    if not build_types and any(p.startswith(_ANDROID_PLUGIN_PREFIX) for p in plugins):
        build_types = ANDROID_DEFAULT_BUILD_TYPES
    components = get_str_list(table, "components") if "components" in table else build_types

    return Project(
        name=name,
        directory=directory,
        group=get_str(table, "group") or "",
        version=get_str(table, "version") or "",
        plugins=plugins,
        build_types=build_types,
        components=components,
        doc_tasks=get_str_list(table, "doc_tasks"),
        parent=parent,
        publications=PublicationContainer(get_str_list(table, "publications")),
    )


def project_from_dict(data: Mapping[str, object], root_dir: Path) -> Project:
    """Build a Project (with its parents) from a `[project]` table.

    Raises:
        ValueError: If a project table has no name.
    """
    return _build_project(data, root_dir, 0)


def _parse_toml(path: Path) -> Result[StrDict, ConfigFileError]:
    """Parse a TOML file, handling read and syntax errors."""
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigFileError(f"Descriptor not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigFileError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigFileError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigFileError(f"Error reading descriptor: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigFileError("Descriptor root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path) -> Result[Config, ConfigFileError]:
    """Load a descriptor file.

    Args:
        path: Path to publish.toml

    Returns:
        Ok(Config) on success, Err(ConfigFileError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    data = result.value
    project_table = get_table(data, "project")
    if project_table is None:
        return Err(ConfigFileError("Descriptor has no [project] table", path=path))

    try:
        project = project_from_dict(project_table, path.parent)
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigFileError(f"Invalid [project] table: {e}", path=path))

    options = PublishOptions.from_dict(get_table(data, "publish") or {})
    return Ok(Config(project=project, options=options, path=path))


def find_descriptor_upward(start: Path) -> Path | None:
    """Search upward from `start` for a publish.toml."""
    for parent in (start, *start.parents):
        candidate = parent / DESCRIPTOR_NAME
        if candidate.is_file():
            return candidate
    return None


def locate_descriptor(
    *,
    start_dir: Path | None = None,
    env_var: str = DESCRIPTOR_ENV_VAR,
) -> Result[Path, ConfigFileError]:
    """Find the descriptor to use.

    Detection order:
    1. The environment variable (a file, or a directory holding publish.toml)
    2. Search upward from start_dir (or cwd)
    """
    env_value = os.environ.get(env_var)
    if env_value:
        env_path = Path(env_value).expanduser().resolve()
        if env_path.is_dir():
            env_path = env_path / DESCRIPTOR_NAME
        if env_path.is_file():
            return Ok(env_path)
        return Err(
            ConfigFileError(
                f"${env_var} is set to '{env_value}' but no descriptor exists there",
                path=env_path,
            )
        )

    search_start = (start_dir or Path.cwd()).resolve()
    found = find_descriptor_upward(search_start)
    if found is None:
        return Err(
            ConfigFileError(
                f"Could not find {DESCRIPTOR_NAME} (searched upward from {search_start})",
                path=search_start,
            )
        )
    return Ok(found)
