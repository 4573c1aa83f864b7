"""Publication resolution engine."""

from .artifacts import ArtifactTaskFactory
from .errors import (
    ConfigurationError,
    MissingVariantError,
    PublishError,
    TaskFailure,
    UnsupportedPlatformError,
)
from .host_contract import publication_properties
from .javadoc import (
    JavadocEmpty,
    JavadocGenerated,
    JavadocNone,
    JavadocPolicy,
    JavadocStandard,
)
from .report import coordinate, format_report, print_report
from .repository import RepositoryTarget, select_repository
from .resolver import FallbackSources, resolve
from .strategies import PublicationStrategy, setup_publication, strategy_for
from .versioning import VersionSuffix, classify_version

__all__ = [
    "ArtifactTaskFactory",
    "ConfigurationError",
    "FallbackSources",
    "JavadocEmpty",
    "JavadocGenerated",
    "JavadocNone",
    "JavadocPolicy",
    "JavadocStandard",
    "MissingVariantError",
    "PublicationStrategy",
    "PublishError",
    "RepositoryTarget",
    "TaskFailure",
    "UnsupportedPlatformError",
    "VersionSuffix",
    "classify_version",
    "coordinate",
    "format_report",
    "print_report",
    "publication_properties",
    "resolve",
    "select_repository",
    "setup_publication",
    "strategy_for",
]
