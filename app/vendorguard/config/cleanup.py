"""Merged cleanup table.

Combines the built-in cleanup table with project-level ``extend`` and
``ignore`` directives into a single lookup table keyed by normalized
package identifier.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from vendorguard.config.defaults import DEFAULT_CLEANUP_PATHS
from vendorguard.config.models import HardeningConfig, IgnoreConfig
from vendorguard.models.package import normalize_package_name

CleanupTable = dict[str, tuple[str, ...]]


def merge_cleanup_paths(
    defaults: Mapping[str, Sequence[str]],
    extend: Mapping[str, Sequence[str]],
    ignore: IgnoreConfig,
) -> CleanupTable:
    """Merge defaults, extensions and exclusions into one cleanup table.

    Extension paths are appended after the defaults of the same package,
    keeping the first occurrence of duplicates. Ignored paths are then
    removed per package, and ignored packages are dropped entirely.
    Packages left without any path are omitted from the result.

    Args:
        defaults: Built-in package to paths mapping.
        extend: Project-level additions.
        ignore: Project-level exclusions.

    Returns:
        Mapping of normalized package identifier to ordered, unique paths.
    """
    merged: dict[str, list[str]] = {}
    for table in (defaults, extend):
        for name, paths in table.items():
            bucket = merged.setdefault(normalize_package_name(name), [])
            for path in paths:
                if path not in bucket:
                    bucket.append(path)

    ignored_packages = {normalize_package_name(name) for name in ignore.packages}
    ignored_paths = {
        normalize_package_name(name): set(paths) for name, paths in ignore.paths.items()
    }

    result: CleanupTable = {}
    for name in sorted(merged):
        if name in ignored_packages:
            continue
        skip = ignored_paths.get(name, set())
        paths = tuple(p for p in merged[name] if p not in skip)
        if paths:
            result[name] = paths
    return result


class CleanupConfig:
    """Resolves the cleanup paths for installed packages.

    Example:
        >>> config = CleanupConfig.from_settings(HardeningConfig())
        >>> config.resolve_paths("Symfony/Yaml")
        ('Tests',)
    """

    def __init__(self, table: Mapping[str, Sequence[str]]) -> None:
        """Initialize with an already merged table.

        Args:
            table: Mapping of package identifier to relative paths.
        """
        self._table: CleanupTable = {
            normalize_package_name(name): tuple(paths) for name, paths in table.items()
        }

    @classmethod
    def from_settings(
        cls,
        settings: HardeningConfig,
        defaults: Mapping[str, Sequence[str]] | None = None,
    ) -> CleanupConfig:
        """Build the cleanup table from project settings.

        Args:
            settings: Validated project configuration.
            defaults: Built-in table override (defaults to DEFAULT_CLEANUP_PATHS).

        Returns:
            CleanupConfig with the merged table.
        """
        base = DEFAULT_CLEANUP_PATHS if defaults is None else defaults
        if not settings.use_defaults:
            base = {}
        return cls(merge_cleanup_paths(base, settings.extend, settings.ignore))

    def resolve_paths(self, package: str) -> tuple[str, ...]:
        """Return the relative paths to remove for a package.

        Args:
            package: Package identifier in any case.

        Returns:
            Ordered relative paths, empty if the package is not configured.
        """
        return self._table.get(normalize_package_name(package), ())

    def all_cleanup_paths(self) -> CleanupTable:
        """Return a copy of the full cleanup table."""
        return dict(self._table)

    def __contains__(self, package: object) -> bool:
        if not isinstance(package, str):
            return False
        return normalize_package_name(package) in self._table

    def __len__(self) -> int:
        return len(self._table)
