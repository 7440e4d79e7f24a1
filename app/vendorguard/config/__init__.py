"""Cleanup configuration module.

This module provides the built-in cleanup table, the project file
schema and loader, and the merged per-package lookup.
"""

from vendorguard.config.cleanup import CleanupConfig, CleanupTable, merge_cleanup_paths
from vendorguard.config.defaults import DEFAULT_CLEANUP_PATHS
from vendorguard.config.loader import (
    ConfigError,
    ConfigParseError,
    ConfigValidationError,
    load_config,
    save_config,
)
from vendorguard.config.models import HardeningConfig, IgnoreConfig

__all__ = [
    "DEFAULT_CLEANUP_PATHS",
    "CleanupConfig",
    "CleanupTable",
    "ConfigError",
    "ConfigParseError",
    "ConfigValidationError",
    "HardeningConfig",
    "IgnoreConfig",
    "load_config",
    "merge_cleanup_paths",
    "save_config",
]
