"""Core domain types and logic."""

from .config import Config, ConfigFileError, load_config, locate_descriptor
from .errors import ErrorCode
from .options import PublishOptions
from .project import (
    ArchiveTask,
    Coordinates,
    PomSpec,
    Project,
    Publication,
    PublicationContainer,
    TaskRegistry,
)
from .result import Err, Ok, Result, is_err, is_ok

__all__ = [
    # config
    "Config",
    "ConfigFileError",
    "load_config",
    "locate_descriptor",
    # errors
    "ErrorCode",
    # options
    "PublishOptions",
    # project
    "ArchiveTask",
    "Coordinates",
    "PomSpec",
    "Project",
    "Publication",
    "PublicationContainer",
    "TaskRegistry",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
]
