"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import typer

from cpub.output.errors import print_publish_error, publish_error_exit_code
from cpub.publish.errors import PublishError
from cpub.services.publish import PublishService
from cpub.services.uploader import DryRunUploader, GradleUploader, Uploader

if TYPE_CHECKING:
    from cpub.cli.context import CLIContext


def exit_with_error(error: PublishError, ctx: CLIContext) -> NoReturn:
    """Print a publish error and exit with its mapped code."""
    print_publish_error(error, ctx.console)
    raise typer.Exit(code=publish_error_exit_code(error))


def make_service(
    ctx: CLIContext,
    *,
    dry_run: bool = True,
    capture_output: bool = False,
) -> PublishService:
    """PublishService for the loaded descriptor.

    Commands that only inspect the configuration never run tasks, so they get
    a dry-run uploader.
    """
    uploader: Uploader
    if dry_run:
        uploader = DryRunUploader(ctx.console)
    else:
        uploader = GradleUploader(root_dir=ctx.config.root_dir, capture_output=capture_output)
    return PublishService(
        project=ctx.config.project,
        options=ctx.config.options,
        fallbacks=ctx.fallbacks,
        console=ctx.console,
        uploader=uploader,
    )
