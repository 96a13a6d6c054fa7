"""Tests for error types and codes."""

import pytest

from picklejar.core.errors import (
    ConfigError,
    ErrorCode,
    InternalError,
    PickleJarError,
    ScanError,
)


class TestErrorCode:
    """Error code value tests."""

    @pytest.mark.parametrize(
        ("code", "expected_range"),
        [
            (ErrorCode.CONFIG_PARSE_ERROR, 2000),
            (ErrorCode.CONFIG_INVALID_VALUE, 2000),
            (ErrorCode.SCAN_FILE_UNREADABLE, 3000),
            (ErrorCode.SCAN_ROOT_NOT_FOUND, 3000),
            (ErrorCode.SCAN_LOCATION_INVALID, 3000),
            (ErrorCode.INTERNAL_ERROR, 9000),
        ],
    )
    def test_given_error_code_when_checked_then_in_correct_range(
        self, code: ErrorCode, expected_range: int
    ) -> None:
        """Error codes fall within their designated numeric range."""
        assert expected_range <= code.value < expected_range + 1000


class TestPickleJarError:
    """Base error behavior tests."""

    def test_given_error_when_to_dict_then_serializes_all_fields(self) -> None:
        """Error serializes to dict with all required fields."""
        # Given
        error = ScanError(
            code=ErrorCode.SCAN_FILE_UNREADABLE,
            message="Test message",
            retryable=True,
            details={"path": "a.js"},
        )

        # When
        result = error.to_dict()

        # Then
        assert result == {
            "code": 3001,
            "error": "SCAN_FILE_UNREADABLE",
            "message": "Test message",
            "retryable": True,
            "details": {"path": "a.js"},
        }

    def test_given_error_when_str_then_includes_code_and_message(self) -> None:
        error = ConfigError.file_not_found("/tmp/missing.yaml")

        assert str(error) == (
            "[2004] CONFIG_FILE_NOT_FOUND: Config file not found: /tmp/missing.yaml"
        )

    def test_given_error_when_raised_then_catchable_as_base(self) -> None:
        with pytest.raises(PickleJarError):
            raise ScanError.root_not_found("/nowhere")


class TestFactories:
    """Classmethod factories."""

    def test_config_parse_error(self) -> None:
        error = ConfigError.parse_error("/x/config.yaml", "bad indent")

        assert error.code == ErrorCode.CONFIG_PARSE_ERROR
        assert error.details == {"path": "/x/config.yaml", "reason": "bad indent"}

    def test_config_invalid_value(self) -> None:
        error = ConfigError.invalid_value("scan.max_workers", 0, "must be at least 1")

        assert error.code == ErrorCode.CONFIG_INVALID_VALUE
        assert error.details["field"] == "scan.max_workers"
        assert not error.retryable

    def test_scan_unreadable_is_retryable(self) -> None:
        error = ScanError.unreadable("a.steps.js", "Permission denied")

        assert error.retryable
        assert error.details == {"path": "a.steps.js", "reason": "Permission denied"}
        assert "a.steps.js" in error.message

    def test_scan_root_not_found(self) -> None:
        error = ScanError.root_not_found("/nowhere")

        assert error.code == ErrorCode.SCAN_ROOT_NOT_FOUND
        assert error.details == {"path": "/nowhere"}

    def test_scan_location_invalid(self) -> None:
        error = ScanError.location_invalid("a.js:x", "line must be an integer")

        assert error.code == ErrorCode.SCAN_LOCATION_INVALID
        assert error.details["location"] == "a.js:x"

    def test_internal_unexpected(self) -> None:
        error = InternalError.unexpected("boom", stage="parse")

        assert error.code == ErrorCode.INTERNAL_ERROR
        assert error.details["stage"] == "parse"
