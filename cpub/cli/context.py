from __future__ import annotations

import os
from dataclasses import dataclass

import typer

from cpub.core.config import Config, load_config, locate_descriptor
from cpub.core.errors import ErrorCode
from cpub.core.result import Err
from cpub.output.console import ConsoleProtocol, RichConsole
from cpub.publish.resolver import FallbackSources

VERBOSE_ENV_VAR = "CPUB_VERBOSE"


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    fallbacks: FallbackSources
    console: ConsoleProtocol


def build_context() -> CLIContext:
    located = locate_descriptor()
    if isinstance(located, Err):
        typer.echo(f"error: {located.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.IO_ERROR))

    loaded = load_config(located.value)
    if isinstance(loaded, Err):
        typer.echo(f"error: {loaded.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.IO_ERROR))

    config = loaded.value
    return CLIContext(
        config=config,
        fallbacks=FallbackSources.load(config.root_dir),
        console=RichConsole(verbose=os.environ.get(VERBOSE_ENV_VAR) == "1"),
    )
