"""Cleanup outcome models.

This module defines the per-path and per-package results reported by
the path remover and the cleanup orchestrator. Results are used for
reporting only and never drive control flow.
"""

from dataclasses import dataclass, field
from enum import Enum


class CleanupOutcome(str, Enum):
    """Result of attempting to remove a single path.

    Attributes:
        REMOVED: The path existed and was deleted.
        ALREADY_ABSENT: The path did not exist (not an error).
        REMOVAL_FAILED: The path exists but could not be deleted.
    """

    REMOVED = "removed"
    ALREADY_ABSENT = "already_absent"
    REMOVAL_FAILED = "removal_failed"


@dataclass(frozen=True, slots=True)
class PathCleanupResult:
    """Result of a single path removal.

    Attributes:
        path: Absolute path that was operated on.
        outcome: What happened to the path.
        relative_path: Path relative to the package root, as configured.
        error: Error message if the removal failed, None otherwise.
        dry_run: Whether this was a dry-run (no actual deletion).
    """

    path: str
    outcome: CleanupOutcome
    relative_path: str | None = None
    error: str | None = None
    dry_run: bool = False

    @property
    def failed(self) -> bool:
        """Check if the removal failed."""
        return self.outcome == CleanupOutcome.REMOVAL_FAILED


@dataclass(frozen=True, slots=True)
class PackageCleanupResult:
    """Aggregated result of cleaning one package.

    Attributes:
        package: Normalized package identifier.
        install_path: Package root the relative paths were resolved against.
        paths: Per-path results in configuration order.
    """

    package: str
    install_path: str
    paths: tuple[PathCleanupResult, ...] = field(default_factory=tuple)

    @property
    def removed_count(self) -> int:
        """Number of paths removed."""
        return sum(1 for p in self.paths if p.outcome == CleanupOutcome.REMOVED)

    @property
    def absent_count(self) -> int:
        """Number of paths that were already absent."""
        return sum(1 for p in self.paths if p.outcome == CleanupOutcome.ALREADY_ABSENT)

    @property
    def failed_count(self) -> int:
        """Number of paths that could not be removed."""
        return sum(1 for p in self.paths if p.failed)

    @property
    def success(self) -> bool:
        """Check if no path removal failed."""
        return self.failed_count == 0
