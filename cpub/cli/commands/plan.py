"""Plan command - show what publishComponent would do."""

from __future__ import annotations

from cpub.cli.commands._helpers import exit_with_error, make_service
from cpub.cli.context import build_context
from cpub.core.result import Err, Ok
from cpub.output.console import Style
from cpub.publish.report import coordinate


def plan() -> None:
    """Configure the publication without running any task."""
    ctx = build_context()
    service = make_service(ctx)

    match service.configure():
        case Ok(p):
            console = ctx.console
            console.header(coordinate(p.options))
            console.print(f"platform:   {p.kind}")
            console.print(f"strategy:   {type(p.strategy).__name__}")
            console.print(f"repository: {p.repository.url} ({p.repository.kind})")
            console.print(f"credentials required: {'yes' if p.repository.credentials_required else 'no'}")
            console.print(f"signing: {'enabled' if p.signing else 'disabled'}", Style.DIM)
            for publication in p.publications:
                console.print(f"publication {publication.name} <- {publication.component or '(host)'}")
                for artifact in publication.artifacts:
                    contents = artifact.contents or "empty"
                    console.print(f"  {artifact.classifier}: {artifact.name} [{contents}]", Style.DIM)
            console.print(f"tasks: {', '.join(p.tasks)}")
        case Err(error):
            exit_with_error(error, ctx)
