"""Cleanup orchestration.

This module reconciles the cleanup table against the installed package
set and drives the path remover, remembering which packages have been
handled during the current invocation.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from rich.markup import escape

from vendorguard.config.cleanup import CleanupConfig
from vendorguard.core.ledger import CleanedPackagesLedger
from vendorguard.filesystem.remover import PathRemover
from vendorguard.models.outcome import CleanupOutcome, PackageCleanupResult, PathCleanupResult
from vendorguard.models.package import normalize_package_name
from vendorguard.scanners.base import PackageRegistry, RegistryReadError
from vendorguard.utils.status import StatusWriter, Verbosity

logger = logging.getLogger(__name__)

_PACKAGE_INDENT = " " * 4
_PATH_INDENT = " " * 6


class CleanupOrchestrator:
    """Cleans configured paths out of installed packages.

    One orchestrator is created per command invocation and shared by all
    lifecycle event handlers. Every package is attempted at most once
    during its lifetime, whether or not its removals succeed.

    Attributes:
        _vendor_dir: Vendor directory holding all installed packages.
        _config: Merged cleanup table.
        _registry: Source of the installed package snapshot.
        _remover: Path remover used for deletions.
        _status: Status stream for progress output.
        _ledger: Packages already processed.
    """

    def __init__(
        self,
        vendor_dir: Path,
        config: CleanupConfig,
        registry: PackageRegistry,
        remover: PathRemover | None = None,
        status: StatusWriter | None = None,
    ) -> None:
        """Initialize the CleanupOrchestrator.

        Args:
            vendor_dir: Absolute path to the vendor directory.
            config: Merged cleanup table.
            registry: Installed package registry.
            remover: Path remover (defaults to a non-dry-run PathRemover).
            status: Status stream (defaults to the shared stderr console).
        """
        self._vendor_dir = vendor_dir
        self._config = config
        self._registry = registry
        self._remover = remover or PathRemover()
        self._status = status or StatusWriter()
        self._ledger = CleanedPackagesLedger()

    @property
    def vendor_dir(self) -> Path:
        """Return the vendor directory."""
        return self._vendor_dir

    @property
    def ledger(self) -> CleanedPackagesLedger:
        """Return the ledger of packages processed so far."""
        return self._ledger

    @property
    def dry_run(self) -> bool:
        """Check if removals are only simulated."""
        return self._remover.dry_run

    @property
    def status(self) -> StatusWriter:
        """Return the status stream."""
        return self._status

    def clean_one(
        self,
        package: str,
        install_path: Path | None = None,
    ) -> PackageCleanupResult | None:
        """Clean a single package.

        This applies in the context of a package install or update event.

        Args:
            package: Package identifier in any case.
            install_path: Package root on disk. Defaults to the registry's
                install path, or <vendor>/<package> if the registry has none.

        Returns:
            PackageCleanupResult, or None if the package was already cleaned.

        Raises:
            ValueError: If the package identifier is empty.
        """
        name = normalize_package_name(package)
        if name in self._ledger:
            self._status.write(
                f"{_PACKAGE_INDENT}[info]{escape(name)}[/] already cleaned.",
                Verbosity.VERY_VERBOSE,
            )
            return None

        paths = self._config.resolve_paths(name)
        if not paths:
            self._ledger.mark(name)
            logger.debug("No cleanup paths configured for %s", name)
            root = install_path if install_path is not None else self._vendor_dir / name
            return PackageCleanupResult(package=name, install_path=str(root))

        root = install_path if install_path is not None else self._lookup_install_path(name)
        return self._clean_package(name, root, paths)

    def clean_all(self) -> list[PackageCleanupResult]:
        """Clean every configured package that is installed and not yet cleaned.

        This applies in the context of a post install or update command event.

        Returns:
            Results in ascending package order, empty if nothing was to be done.

        Raises:
            RegistryReadError: If the installed package list cannot be read.
        """
        installed = {pkg.normalized_name: pkg for pkg in self._registry.list_installed()}

        configured = self._config.all_cleanup_paths()
        pending = sorted(
            name for name in configured if name not in self._ledger and name in installed
        )

        if not pending:
            self._status.write("[info]Vendor directory already clean.[/]")
            return []

        self._status.write("[info]Cleaning vendor directory.[/]")
        return [
            self._clean_package(name, installed[name].install_path, configured[name])
            for name in pending
        ]

    def _lookup_install_path(self, name: str) -> Path:
        """Return the registry's install path for a package.

        Falls back to <vendor>/<name> when the package is not registered
        or the registry cannot be read.
        """
        try:
            installed = self._registry.list_installed()
        except RegistryReadError as e:
            logger.debug("Registry unavailable for %s, using vendor layout: %s", name, e)
            return self._vendor_dir / name

        for pkg in installed:
            if pkg.normalized_name == name:
                return pkg.install_path

        logger.debug("%s is not registered, using vendor layout", name)
        return self._vendor_dir / name

    def _clean_package(
        self,
        name: str,
        root: Path,
        paths: Sequence[str],
    ) -> PackageCleanupResult:
        """Remove the configured paths of one package.

        Args:
            name: Normalized package identifier.
            root: Package root on disk.
            paths: Relative paths to remove.

        Returns:
            PackageCleanupResult with one entry per path.
        """
        # Recorded before any removal: a failed package is not retried.
        self._ledger.mark(name)
        self._status.write(f"{_PACKAGE_INDENT}Cleaning: [info]{escape(name)}[/]")

        if not root.is_dir():
            self._status.write(
                f"{_PATH_INDENT}[comment]Package directory '{escape(str(root))}' "
                "does not exist.[/]",
                Verbosity.VERY_VERBOSE,
            )
            absent = tuple(
                PathCleanupResult(
                    path=str(root / rel),
                    outcome=CleanupOutcome.ALREADY_ABSENT,
                    relative_path=rel,
                    dry_run=self._remover.dry_run,
                )
                for rel in paths
            )
            return PackageCleanupResult(package=name, install_path=str(root), paths=absent)

        self._status.write(
            f"{_PACKAGE_INDENT}Cleaning directories in [comment]{escape(name)}[/]",
            Verbosity.VERY_VERBOSE,
        )
        results = self._remover.remove_all(root, list(paths))
        for result in results:
            self._report(name, result)

        return PackageCleanupResult(package=name, install_path=str(root), paths=tuple(results))

    def _report(self, name: str, result: PathCleanupResult) -> None:
        """Write the status line for one path result."""
        rel = escape(result.relative_path or result.path)
        if result.outcome == CleanupOutcome.ALREADY_ABSENT:
            # Dist installs often omit directories present in the source tree.
            self._status.write(
                f"{_PATH_INDENT}[comment]Directory '{escape(result.path)}' does not exist.[/]",
                Verbosity.VERY_VERBOSE,
            )
        elif result.outcome == CleanupOutcome.REMOVAL_FAILED:
            self._status.write(
                f"{_PATH_INDENT}[error]Failure removing directory '{rel}'[/] "
                f"in package [comment]{escape(name)}[/]."
            )
        elif result.dry_run:
            self._status.write(
                f"{_PACKAGE_INDENT}Would remove directory [info]'{rel}'[/]",
                Verbosity.VERBOSE,
            )
        else:
            self._status.write(
                f"{_PACKAGE_INDENT}Removing directory [info]'{rel}'[/]",
                Verbosity.VERBOSE,
            )
