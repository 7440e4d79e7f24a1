"""Data models for vendorguard.

This module exports the core data structures used throughout the application.
"""

from vendorguard.models.outcome import CleanupOutcome, PackageCleanupResult, PathCleanupResult
from vendorguard.models.package import InstalledPackage, normalize_package_name

__all__ = [
    "CleanupOutcome",
    "InstalledPackage",
    "PackageCleanupResult",
    "PathCleanupResult",
    "normalize_package_name",
]
