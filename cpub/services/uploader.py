"""Host tool task runners.

Building and uploading artifacts is the host tool's job. The publish service
only asks an uploader to run named tasks of a project; `GradleUploader` runs
them through the Gradle wrapper, `DryRunUploader` only prints what would run.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from cpub.core.project import Project
from cpub.core.result import Err, Ok, Result
from cpub.output.console import ConsoleProtocol
from cpub.platform.detection import wrapper_script
from cpub.platform.process import run, run_silent
from cpub.publish.errors import TaskFailure

__all__ = ["DryRunUploader", "GradleUploader", "Uploader", "gradle_env"]

# Gradle maps ORG_GRADLE_PROJECT_<name> environment variables to project
# properties; secrets passed this way stay out of the process list.
GRADLE_PROJECT_ENV_PREFIX = "ORG_GRADLE_PROJECT_"


class Uploader(Protocol):
    def run_task(
        self,
        project: Project,
        task: str,
        properties: Mapping[str, str],
    ) -> Result[None, TaskFailure]: ...


def gradle_env(properties: Mapping[str, str], base: Mapping[str, str] | None = None) -> dict[str, str]:
    """Environment for a Gradle run carrying `properties` as project properties."""
    env = dict(os.environ if base is None else base)
    for name, value in properties.items():
        env[f"{GRADLE_PROJECT_ENV_PREFIX}{name}"] = value
    return env


class GradleUploader:
    """Run tasks with the root project's Gradle wrapper.

    Args:
        root_dir: Root project directory (holds the wrapper script).
        capture_output: Capture output instead of streaming it; stderr is then
            reported with the failure.
        wrapper: Wrapper command, defaults to the platform's gradlew script.
    """

    def __init__(
        self,
        *,
        root_dir: Path,
        capture_output: bool = False,
        wrapper: str | None = None,
    ) -> None:
        self._root_dir = root_dir
        self._capture = capture_output
        self._wrapper = wrapper or wrapper_script()

    def command(self, project: Project, task: str) -> list[str]:
        return [self._wrapper, project.task_path(task), "--console=plain"]

    def run_task(
        self,
        project: Project,
        task: str,
        properties: Mapping[str, str],
    ) -> Result[None, TaskFailure]:
        cmd = self.command(project, task)
        env = gradle_env(properties)
        task_path = project.task_path(task)

        if self._capture:
            captured = run(cmd, cwd=self._root_dir, env=env)
            if isinstance(captured, Err):
                e = captured.error
                return Err(TaskFailure(task=task_path, returncode=e.returncode, stderr=e.stderr))
            return Ok(None)

        streamed = run_silent(cmd, cwd=self._root_dir, env=env)
        if isinstance(streamed, Err):
            e = streamed.error
            return Err(TaskFailure(task=task_path, returncode=e.returncode, stderr=e.stderr))
        return Ok(None)


class DryRunUploader:
    """Print the tasks that would run; never fails."""

    def __init__(self, console: ConsoleProtocol) -> None:
        self._console = console
        self.executed: list[str] = []

    def run_task(
        self,
        project: Project,
        task: str,
        properties: Mapping[str, str],
    ) -> Result[None, TaskFailure]:
        task_path = project.task_path(task)
        self.executed.append(task_path)
        self._console.info(f"[dry-run] would run {task_path}")
        for name in sorted(properties):
            self._console.detail(f"  -P{name}=***")
        return Ok(None)
