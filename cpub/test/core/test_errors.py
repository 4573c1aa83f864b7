"""Tests for cpub.core.errors module."""

from cpub.core.errors import ErrorCode


class TestErrorCode:
    def test_values_are_stable(self) -> None:
        """Exit codes are part of the CLI contract."""
        assert ErrorCode.OK == 0
        assert ErrorCode.USER_ERROR == 1
        assert ErrorCode.ENV_ERROR == 2
        assert ErrorCode.BUILD_ERROR == 3
        assert ErrorCode.IO_ERROR == 4

    def test_str(self) -> None:
        assert str(ErrorCode.USER_ERROR) == "user error"
        assert str(ErrorCode.IO_ERROR) == "io error"

    def test_is_success(self) -> None:
        assert ErrorCode.OK.is_success is True
        assert ErrorCode.BUILD_ERROR.is_success is False

    def test_usable_as_exit_code(self) -> None:
        assert int(ErrorCode.ENV_ERROR) == 2
