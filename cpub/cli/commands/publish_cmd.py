"""Publish command - publishComponent."""

from __future__ import annotations

import typer

from cpub.cli.commands._helpers import exit_with_error, make_service
from cpub.cli.context import build_context
from cpub.core.result import Err, Ok


def publish(
    dry_run: bool = typer.Option(False, "--dry-run", help="Print tasks without running them"),
    capture_output: bool = typer.Option(
        False, "--capture-output", help="Capture host tool output (print it only on failure)"
    ),
) -> None:
    """Build and upload the component, then print its dependency notation."""
    ctx = build_context()
    service = make_service(ctx, dry_run=dry_run, capture_output=capture_output)

    match service.publish_component():
        case Ok(_):
            return
        case Err(error):
            exit_with_error(error, ctx)
