"""Configuration models and loaders for aoc-fetch."""

from .loader import CONFIG_FILENAMES, ConfigError, find_config_file, load_config
from .models import (
    DEFAULT_BASE_URL,
    DEFAULT_USER_AGENT,
    AocFetchConfig,
    LoggingConfig,
    ServiceConfig,
    StorageConfig,
)

__all__ = [
    "AocFetchConfig",
    "CONFIG_FILENAMES",
    "ConfigError",
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "LoggingConfig",
    "ServiceConfig",
    "StorageConfig",
    "find_config_file",
    "load_config",
]
