"""Filesystem operations module.

This module provides package path removal and the web-server access
restriction files for the vendor directory.
"""

from vendorguard.filesystem.access import (
    ACCESS_RESTRICTION_FILES,
    HTACCESS_CONTENT,
    WEB_CONFIG_CONTENT,
    AccessRestrictionError,
    write_access_restriction_files,
)
from vendorguard.filesystem.remover import PathRemover

__all__ = [
    "ACCESS_RESTRICTION_FILES",
    "HTACCESS_CONTENT",
    "WEB_CONFIG_CONTENT",
    "AccessRestrictionError",
    "PathRemover",
    "write_access_restriction_files",
]
