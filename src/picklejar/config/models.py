"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (PICKLEJAR__SECTION__KEY)
3. Repo YAML (.picklejar/config.yaml)
4. Global YAML (~/.config/picklejar/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    PICKLEJAR__<SECTION>__<KEY>=<VALUE>

Examples:
    PICKLEJAR__LOGGING__LEVEL=DEBUG
    PICKLEJAR__SCAN__MAX_WORKERS=8
    PICKLEJAR__DISPLAY__GROUP_BY_TYPE=false
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from picklejar.core.excludes import DEFAULT_EXCLUDE_PATTERNS, DEFAULT_INCLUDE_PATTERNS

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        PICKLEJAR__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. INFO reports per-scan summaries, DEBUG every file.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class DiscoveryConfig(BaseModel):
    """Which files are scanned for step definitions.

    Env vars:
        PICKLEJAR__DISCOVERY__MAX_FILE_SIZE_MB: Skip files larger than this
    """

    include_patterns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_INCLUDE_PATTERNS),
        description="Glob patterns (relative to the workspace root) of step definition files.",
    )
    exclude_patterns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDE_PATTERNS),
        description="Glob patterns excluded from discovery. '**/name/**' prunes the directory.",
    )
    max_file_size_mb: int = Field(
        default=10,
        description="Skip files larger than this (MB).",
    )

    @field_validator("max_file_size_mb")
    @classmethod
    def validate_max_file_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"max_file_size_mb must be positive, got {v}")
        return v


class ScanConfig(BaseModel):
    """Parser and scan orchestration settings.

    Env vars:
        PICKLEJAR__SCAN__SIGNATURE_LOOKAHEAD: Lines searched for a bound signature
        PICKLEJAR__SCAN__MAX_WORKERS: Parallel file parsing workers
    """

    signature_lookahead: int = Field(
        default=5,
        description="Lines after a declaration searched for the bound function signature.",
    )
    max_workers: int = Field(
        default=4,
        description="Parallel workers for workspace scans. 1 scans sequentially.",
    )

    @field_validator("signature_lookahead")
    @classmethod
    def validate_lookahead(cls, v: int) -> int:
        if not (0 <= v <= 50):
            raise ValueError(f"signature_lookahead must be 0-50, got {v}")
        return v

    @field_validator("max_workers")
    @classmethod
    def validate_workers(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"max_workers must be at least 1, got {v}")
        return v


class DisplayConfig(BaseModel):
    """Presentation toggles. These never affect recognition.

    Env vars:
        PICKLEJAR__DISPLAY__GROUP_BY_TYPE
        PICKLEJAR__DISPLAY__SORT_ALPHABETICALLY
        PICKLEJAR__DISPLAY__SHOW_FILE_PATH
    """

    group_by_type: bool = Field(default=True, description="Group by file, then step type.")
    sort_alphabetically: bool = Field(default=True, description="Sort leaves by display text.")
    show_file_path: bool = Field(default=True, description="Show file path and line per step.")


class WatchConfig(BaseModel):
    """File watcher settings.

    Env vars:
        PICKLEJAR__WATCH__DEBOUNCE_SEC: Quiet window before a rescan
        PICKLEJAR__WATCH__MAX_DEBOUNCE_WAIT_SEC: Upper bound on batching delay
    """

    debounce_sec: float = Field(
        default=0.5,
        description="Quiet window before changed files are rescanned.",
    )
    max_debounce_wait_sec: float = Field(
        default=2.0,
        description="Maximum delay before a rescan during continuous edits.",
    )


class PickleJarConfig(BaseModel):
    """Root configuration for PickleJar.

    All settings can be configured via:
    1. Environment variables: PICKLEJAR__SECTION__KEY
    2. YAML config files (repo or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)
    scan: ScanConfig = Field(default_factory=ScanConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    watch: WatchConfig = Field(default_factory=WatchConfig)
