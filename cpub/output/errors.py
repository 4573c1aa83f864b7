"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from cpub.core.errors import ErrorCode
from cpub.output.console import Style
from cpub.publish.errors import (
    ConfigurationError,
    MissingVariantError,
    PublishError,
    TaskFailure,
    UnsupportedPlatformError,
)

if TYPE_CHECKING:
    from cpub.output.console import ConsoleProtocol

__all__ = ["print_publish_error", "publish_error_exit_code"]


def print_publish_error(error: PublishError, console: ConsoleProtocol) -> None:
    """Print a publish error to console with appropriate formatting."""
    match error:
        case ConfigurationError(message=message, hint=hint):
            console.error(message)
            if hint:
                console.print(f"hint: {hint}", Style.DIM)
        case UnsupportedPlatformError(message=message, kind=kind):
            console.error(message)
            console.print(f"detected platform: {kind}", Style.DIM)
        case MissingVariantError(project=project, variant=variant, available=available):
            console.error(f"No variant '{variant}' found in project '{project}'")
            if available:
                console.print(f"Available: {', '.join(available)}", Style.DIM)
        case TaskFailure(task=task, returncode=rc, stderr=stderr):
            console.error(f"{task} failed (exit {rc})")
            if stderr:
                console.print(stderr.rstrip(), Style.DIM)
        case _:
            assert_never(error)


def publish_error_exit_code(error: PublishError) -> int:
    """Get exit code for a publish error."""
    match error:
        case ConfigurationError():
            return int(ErrorCode.USER_ERROR)
        case UnsupportedPlatformError() | MissingVariantError():
            return int(ErrorCode.ENV_ERROR)
        case TaskFailure():
            return int(ErrorCode.BUILD_ERROR)
        case _:
            assert_never(error)
