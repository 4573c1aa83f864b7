"""Resolve command - show the publish options after defaulting."""

from __future__ import annotations

from cpub.cli.commands._helpers import exit_with_error, make_service
from cpub.cli.context import build_context
from cpub.core.result import Err, Ok
from cpub.output.console import Style


def resolve() -> None:
    """Resolve publish options against the project and local.properties."""
    ctx = build_context()
    service = make_service(ctx)

    match service.resolve_options():
        case Ok(options):
            width = max(len(k) for k in options.masked())
            for key, value in options.masked().items():
                ctx.console.print(f"{key.ljust(width)}  {value or '-'}", Style.DEFAULT if value else Style.DIM)
        case Err(error):
            exit_with_error(error, ctx)
