"""Service layer."""

from .publish import PublishPlan, PublishService
from .uploader import DryRunUploader, GradleUploader, Uploader

__all__ = [
    "DryRunUploader",
    "GradleUploader",
    "PublishPlan",
    "PublishService",
    "Uploader",
]
