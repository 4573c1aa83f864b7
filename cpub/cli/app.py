from __future__ import annotations

import os
from pathlib import Path

import typer

from cpub import __version__
from cpub.cli.commands.classify import classify
from cpub.cli.commands.plan import plan
from cpub.cli.commands.publish_cmd import publish
from cpub.cli.commands.resolve_cmd import resolve
from cpub.cli.context import VERBOSE_ENV_VAR
from cpub.core.config import DESCRIPTOR_ENV_VAR, DESCRIPTOR_NAME
from cpub.core.errors import ErrorCode


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Commands
app.command()(classify)
app.command()(resolve)
app.command()(plan)
app.command()(publish)
app.command("publishComponent", hidden=True)(publish)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    project: Path | None = typer.Option(
        None,
        "--project",
        help=f"Descriptor file or directory (default: nearest {DESCRIPTOR_NAME})",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show resolution details."),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if verbose:
        os.environ[VERBOSE_ENV_VAR] = "1"

    if project is not None:
        try:
            path = project.expanduser().resolve()
        except OSError as e:
            typer.echo(f"error: invalid --project: {e}", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

        if path.is_dir():
            path = path / DESCRIPTOR_NAME
        if not path.is_file():
            typer.echo(f"error: --project '{path}' does not exist", err=True)
            raise typer.Exit(code=int(ErrorCode.IO_ERROR))

        os.environ[DESCRIPTOR_ENV_VAR] = str(path)


def main() -> None:
    app()
