"""Core module exports."""

from picklejar.core.errors import (
    ConfigError,
    ErrorCode,
    InternalError,
    PickleJarError,
    ScanError,
)
from picklejar.core.logging import (
    clear_scan_id,
    configure_logging,
    get_logger,
    get_scan_id,
    set_scan_id,
)
from picklejar.core.progress import pluralize, spinner, status

__all__ = [
    # Errors
    "PickleJarError",
    "ConfigError",
    "ErrorCode",
    "InternalError",
    "ScanError",
    # Logging
    "clear_scan_id",
    "configure_logging",
    "get_logger",
    "get_scan_id",
    "set_scan_id",
    # Progress
    "pluralize",
    "spinner",
    "status",
]
