"""Error codes for CLI exit status.

Each failure class of a publish run maps to one stable exit code:
- 0: Success
- 1: Configuration error (missing group/version/credentials)
- 2: Environment error (unsupported platform, missing build variant)
- 3: Build error (a host tool task failed)
- 4: I/O error (descriptor missing or unreadable)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable.
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    BUILD_ERROR = 3
    IO_ERROR = 4

    def __str__(self) -> str:
        """Return human-readable name."""
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        """Check if this code indicates success."""
        return self == ErrorCode.OK
