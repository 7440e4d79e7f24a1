"""Abstract base class for installed package registries.

This module defines the PackageRegistry interface that every package
manager adapter must implement, and the errors it may raise.
"""

from abc import ABC, abstractmethod

from vendorguard.models.package import InstalledPackage


class RegistryReadError(Exception):
    """Raised when the installed package list cannot be produced."""


class RegistryNotFoundError(RegistryReadError):
    """Raised when the package manager's local repository does not exist."""


class PackageRegistry(ABC):
    """Abstract base class for installed package registries.

    A registry reads the package manager's authoritative local package
    repository at call time and returns a read-only snapshot of it.

    Example:
        >>> registry = ComposerRegistry(Path("vendor"))
        >>> for pkg in registry.list_installed():
        ...     print(f"{pkg.name}: {pkg.install_path}")
    """

    @abstractmethod
    def list_installed(self) -> list[InstalledPackage]:
        """Return all installed packages.

        Returns:
            InstalledPackage instances in registry order.

        Raises:
            RegistryReadError: If the registry cannot be read.
        """

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the registry can be read.

        Returns:
            True if the local package repository exists, False otherwise.
        """
