"""Installed package registries.

This module exports the registry adapters for reading installed packages.
"""

from vendorguard.scanners.base import PackageRegistry, RegistryNotFoundError, RegistryReadError
from vendorguard.scanners.composer import ComposerRegistry

__all__ = ["ComposerRegistry", "PackageRegistry", "RegistryNotFoundError", "RegistryReadError"]
