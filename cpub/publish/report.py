"""Summary printed once a component has been published."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cpub.core.options import PublishOptions
from cpub.core.project import Coordinates

from .repository import RepositoryTarget

if TYPE_CHECKING:
    from cpub.output.console import ConsoleProtocol

__all__ = ["coordinate", "format_report", "print_report"]

_RULE = "─" * 72


def coordinate(options: PublishOptions) -> str:
    """Dependency notation `group:artifactId:version`."""
    return str(Coordinates(options.group, options.artifact_id, options.version))


def format_report(options: PublishOptions, target: RepositoryTarget) -> list[str]:
    return [
        f"┌{_RULE}",
        "│ Your component was published!",
        f"│ Component artifactId: {options.artifact_id}",
        f"│ Component dependency: implementation '{coordinate(options)}'",
        f"│ Published at: {target.url}",
        f"└{_RULE}",
    ]


def print_report(console: ConsoleProtocol, options: PublishOptions, target: RepositoryTarget) -> None:
    for line in format_report(options, target):
        console.print(line)
