"""Config module exports."""

from picklejar.config.loader import config_path, load_config
from picklejar.config.models import (
    DiscoveryConfig,
    DisplayConfig,
    LoggingConfig,
    PickleJarConfig,
    ScanConfig,
    WatchConfig,
)
from picklejar.config.user_config import write_config_template

__all__ = [
    "load_config",
    "config_path",
    "write_config_template",
    "PickleJarConfig",
    "DiscoveryConfig",
    "DisplayConfig",
    "LoggingConfig",
    "ScanConfig",
    "WatchConfig",
]
