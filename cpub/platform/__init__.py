"""Platform classification and host process layer."""

from .detection import (
    PlatformKind,
    classify,
    classify_project,
    has_doc_generator,
    is_windows,
    wrapper_script,
)
from .process import (
    ProcessError,
    run,
    run_silent,
)

__all__ = [
    # detection
    "PlatformKind",
    "classify",
    "classify_project",
    "has_doc_generator",
    "is_windows",
    "wrapper_script",
    # process
    "ProcessError",
    "run",
    "run_silent",
]
