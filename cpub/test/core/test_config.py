"""Tests for cpub.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from cpub.core.config import (
    DESCRIPTOR_ENV_VAR,
    DESCRIPTOR_NAME,
    find_descriptor_upward,
    load_config,
    locate_descriptor,
    project_from_dict,
)
from cpub.core.result import Err, Ok

DESCRIPTOR = """
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
packSourceCode = false
"""


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestProjectFromDict:
    def test_root_project(self, tmp_path: Path) -> None:
        project = project_from_dict({"name": "core", "plugins": ["java"]}, tmp_path)
        assert project.is_root
        assert project.directory == tmp_path
        assert project.plugins == {"java"}

    def test_parent_chain_and_directories(self, tmp_path: Path) -> None:
        project = project_from_dict(
            {
                "name": "core",
                "parent": {"name": "libs", "parent": {"name": "root"}},
            },
            tmp_path,
        )
        assert project.path == ":libs:core"
        assert project.root.directory == tmp_path
        assert project.directory == tmp_path / "libs" / "core"

    def test_explicit_directory_relative_to_root(self, tmp_path: Path) -> None:
        project = project_from_dict(
            {"name": "core", "directory": "modules/core", "parent": {"name": "root"}},
            tmp_path,
        )
        assert project.directory == tmp_path / "modules" / "core"

    def test_components_default_to_build_types(self, tmp_path: Path) -> None:
        project = project_from_dict({"name": "lib", "build_types": ["debug", "release"]}, tmp_path)
        assert project.components == ("debug", "release")

    def test_android_without_build_types_gets_defaults(self, tmp_path: Path) -> None:
        project = project_from_dict({"name": "lib", "plugins": ["com.android.library"]}, tmp_path)
        assert project.build_types == ("debug", "release")
        assert project.components == ("debug", "release")

    def test_non_android_without_build_types(self, tmp_path: Path) -> None:
        project = project_from_dict({"name": "lib", "plugins": ["java-library"]}, tmp_path)
        assert project.build_types == ()
        assert project.components == ()

    def test_explicit_components(self, tmp_path: Path) -> None:
        project = project_from_dict(
            {"name": "lib", "build_types": ["debug", "release"], "components": []},
            tmp_path,
        )
        assert project.components == ()

    def test_existing_publications(self, tmp_path: Path) -> None:
        project = project_from_dict(
            {"name": "kmp", "publications": ["kotlinMultiplatform", "jvm"]},
            tmp_path,
        )
        assert len(project.publications) == 2

    def test_missing_name_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="name"):
            project_from_dict({"version": "1.0"}, tmp_path)


class TestLoadConfig:
    def test_load_valid(self, tmp_path: Path) -> None:
        path = _write(tmp_path / DESCRIPTOR_NAME, DESCRIPTOR)
        result = load_config(path)

        assert isinstance(result, Ok)
        config = result.value
        assert config.root_dir == tmp_path
        assert config.project.name == "kotlin-library-sample"
        assert config.project.parent is not None
        assert config.project.parent.group == "com.dorck"
        assert config.options.group == "com.dorck.kotlin"
        assert config.options.version == "1.0.0-LOCAL"
        assert config.options.pack_source_code is False

    def test_missing_publish_table_uses_defaults(self, tmp_path: Path) -> None:
        path = _write(tmp_path / DESCRIPTOR_NAME, '[project]\nname = "core"\n')
        result = load_config(path)
        assert isinstance(result, Ok)
        assert result.value.options.group == ""

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / DESCRIPTOR_NAME)
        assert isinstance(result, Err)
        assert "not found" in result.error.message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = _write(tmp_path / DESCRIPTOR_NAME, "[project\nname=")
        result = load_config(path)
        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message

    def test_missing_project_table(self, tmp_path: Path) -> None:
        path = _write(tmp_path / DESCRIPTOR_NAME, '[publish]\ngroup = "x"\n')
        result = load_config(path)
        assert isinstance(result, Err)
        assert "[project]" in result.error.message

    def test_project_without_name(self, tmp_path: Path) -> None:
        path = _write(tmp_path / DESCRIPTOR_NAME, '[project]\nversion = "1.0"\n')
        result = load_config(path)
        assert isinstance(result, Err)
        assert "Invalid [project]" in result.error.message


class TestLocateDescriptor:
    def test_find_upward(self, tmp_path: Path) -> None:
        path = _write(tmp_path / DESCRIPTOR_NAME, DESCRIPTOR)
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_descriptor_upward(nested) == path

    def test_env_var_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = _write(tmp_path / DESCRIPTOR_NAME, DESCRIPTOR)
        monkeypatch.setenv(DESCRIPTOR_ENV_VAR, str(tmp_path))
        result = locate_descriptor(start_dir=tmp_path / "elsewhere")
        assert result == Ok(path.resolve())

    def test_env_var_missing_target(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(DESCRIPTOR_ENV_VAR, str(tmp_path / "nope.toml"))
        result = locate_descriptor(start_dir=tmp_path)
        assert isinstance(result, Err)
        assert DESCRIPTOR_ENV_VAR in result.error.message

    def test_not_found(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(DESCRIPTOR_ENV_VAR, raising=False)
        result = locate_descriptor(start_dir=tmp_path)
        # tmp dirs normally have no descriptor above them
        if isinstance(result, Err):
            assert DESCRIPTOR_NAME in result.error.message


class TestSampleDescriptors:
    def test_samples_load(self) -> None:
        samples = Path(__file__).resolve().parents[3] / "samples"
        descriptors = sorted(samples.glob(f"*/{DESCRIPTOR_NAME}"))

        assert descriptors
        for path in descriptors:
            result = load_config(path)
            assert isinstance(result, Ok), path
