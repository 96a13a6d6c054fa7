"""PickleJar error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Scan
- 9xxx: Internal
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2004

    # Scan (3xxx)
    SCAN_FILE_UNREADABLE = 3001
    SCAN_ROOT_NOT_FOUND = 3002
    SCAN_LOCATION_INVALID = 3003

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class PickleJarError(Exception):
    """Base error with structured context for CLI and JSON output."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(PickleJarError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class ScanError(PickleJarError):
    """Step definition scanning errors.

    ``unreadable`` is recorded per file and never aborts a workspace scan.
    """

    @classmethod
    def unreadable(cls, path: str, reason: str) -> "ScanError":
        return cls(
            code=ErrorCode.SCAN_FILE_UNREADABLE,
            message=f"Cannot read {path}: {reason}",
            retryable=True,
            details={"path": path, "reason": reason},
        )

    @classmethod
    def root_not_found(cls, path: str) -> "ScanError":
        return cls(
            code=ErrorCode.SCAN_ROOT_NOT_FOUND,
            message=f"Workspace root is not a directory: {path}",
            details={"path": path},
        )

    @classmethod
    def location_invalid(cls, location: str, reason: str) -> "ScanError":
        return cls(
            code=ErrorCode.SCAN_LOCATION_INVALID,
            message=f"Invalid step location '{location}': {reason}",
            details={"location": location, "reason": reason},
        )


class InternalError(PickleJarError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
