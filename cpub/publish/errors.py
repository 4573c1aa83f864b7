"""Error types for a publish run."""

from __future__ import annotations

from dataclasses import dataclass

from cpub.platform.detection import PlatformKind


@dataclass(frozen=True, slots=True)
class ConfigurationError:
    """Missing or unsatisfiable publish configuration.

    `fields` names the option(s) that must be supplied.
    """

    message: str
    fields: tuple[str, ...] = ()
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class UnsupportedPlatformError:
    project: str
    kind: PlatformKind
    message: str


@dataclass(frozen=True, slots=True)
class MissingVariantError:
    project: str
    variant: str
    available: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class TaskFailure:
    """A host tool task exited with an error."""

    task: str
    returncode: int
    stderr: str = ""


PublishError = ConfigurationError | UnsupportedPlatformError | MissingVariantError | TaskFailure
