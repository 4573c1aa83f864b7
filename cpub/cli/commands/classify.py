"""Classify command - show the detected platform of the project."""

from __future__ import annotations

import typer

from cpub.cli.context import build_context
from cpub.core.errors import ErrorCode
from cpub.output.console import Style
from cpub.platform.detection import classify_project


def classify() -> None:
    """Show which platform the project is published as."""
    ctx = build_context()
    project = ctx.config.project
    kind = classify_project(project)

    ctx.console.print(f"{project.path} ({project.name}): {kind}")
    plugins = ", ".join(sorted(project.plugins)) or "none"
    ctx.console.print(f"plugins: {plugins}", Style.DIM)
    if not kind.is_publishable:
        ctx.console.warning("no publication strategy for this platform")
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
