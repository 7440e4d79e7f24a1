"""Installed package models.

This module defines the read-only view of a package taken from the
package manager's local repository.
"""

from dataclasses import dataclass, field
from pathlib import Path


def normalize_package_name(name: str) -> str:
    """Normalize a package identifier for lookups.

    Package identifiers are case-insensitive; every registry, config and
    ledger lookup goes through this function.

    Args:
        name: Package identifier (e.g., 'Symfony/Yaml').

    Returns:
        Lower-cased identifier without surrounding whitespace.

    Raises:
        ValueError: If the identifier is empty.
    """
    normalized = name.strip().lower()
    if not normalized:
        msg = "Package name cannot be empty"
        raise ValueError(msg)
    return normalized


@dataclass(frozen=True, slots=True)
class InstalledPackage:
    """Represents a package found in the installed package registry.

    Attributes:
        name: Package identifier as reported by the registry (e.g., 'symfony/yaml').
        install_path: Absolute path of the package on disk.
        version: Installed version string (if reported).
    """

    name: str
    install_path: Path
    version: str | None = field(default=None)

    def __post_init__(self) -> None:
        """Validate package data after initialization."""
        if not self.name or not self.name.strip():
            msg = "Package name cannot be empty"
            raise ValueError(msg)

    @property
    def normalized_name(self) -> str:
        """Return the lower-cased identifier used for lookups."""
        return normalize_package_name(self.name)
