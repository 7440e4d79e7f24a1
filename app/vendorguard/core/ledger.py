"""Record of packages already processed in this invocation.

A single install or update command fires per-package events and then a
post-command event; the ledger lets the second pass skip packages the
first one already handled. It lives only as long as its orchestrator.
"""

from collections.abc import Iterator

from vendorguard.models.package import normalize_package_name


class CleanedPackagesLedger:
    """Monotonically growing set of normalized package identifiers."""

    def __init__(self) -> None:
        self._packages: set[str] = set()

    def mark(self, package: str) -> bool:
        """Record a package as cleaned.

        Args:
            package: Package identifier in any case.

        Returns:
            True if the package was newly recorded, False if already present.
        """
        name = normalize_package_name(package)
        if name in self._packages:
            return False
        self._packages.add(name)
        return True

    def __contains__(self, package: object) -> bool:
        if not isinstance(package, str):
            return False
        return normalize_package_name(package) in self._packages

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._packages))

    def __len__(self) -> int:
        return len(self._packages)
