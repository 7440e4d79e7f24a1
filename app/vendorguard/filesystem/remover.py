"""Path removal operator.

Handles recursive deletion of package subdirectories with dry-run
support. Failures are reported per path and never abort a batch.
"""

import logging
import shutil
from pathlib import Path

from vendorguard.models.outcome import CleanupOutcome, PathCleanupResult

logger = logging.getLogger(__name__)


class PathRemover:
    """Deletes files and directories inside installed packages.

    Attributes:
        _dry_run: If True, report what would be removed without removing it.
    """

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the PathRemover.

        Args:
            dry_run: If True, report what would be deleted without deleting.
        """
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        """Check if this remover only simulates deletions."""
        return self._dry_run

    def remove(self, path: Path, relative_path: str | None = None) -> PathCleanupResult:
        """Remove a single path.

        Dispatches on the path type:
        - Directories: shutil.rmtree
        - Files, symlinks and dead symlinks: Path.unlink

        A failing rmtree may leave the directory partially deleted; that
        state is left as is.

        Args:
            path: Absolute path to remove.
            relative_path: Configured path relative to the package root.

        Returns:
            PathCleanupResult with REMOVED, ALREADY_ABSENT or REMOVAL_FAILED.
        """
        path_str = str(path)

        if not path.exists() and not path.is_symlink():
            return PathCleanupResult(
                path=path_str,
                outcome=CleanupOutcome.ALREADY_ABSENT,
                relative_path=relative_path,
                dry_run=self._dry_run,
            )

        if self._dry_run:
            logger.info("Dry-run: would remove %s", path_str)
            return PathCleanupResult(
                path=path_str,
                outcome=CleanupOutcome.REMOVED,
                relative_path=relative_path,
                dry_run=True,
            )

        try:
            # Directories (but not symlinks to directories)
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
            else:
                path.unlink()
        except OSError as e:
            logger.debug("Failed to remove %s: %s", path_str, e)
            return PathCleanupResult(
                path=path_str,
                outcome=CleanupOutcome.REMOVAL_FAILED,
                relative_path=relative_path,
                error=str(e),
            )

        logger.debug("Removed %s", path_str)
        return PathCleanupResult(
            path=path_str,
            outcome=CleanupOutcome.REMOVED,
            relative_path=relative_path,
        )

    def remove_all(self, root: Path, relative_paths: list[str]) -> list[PathCleanupResult]:
        """Remove several paths below a common root.

        Each path is attempted regardless of earlier failures.

        Args:
            root: Directory the relative paths are resolved against.
            relative_paths: Paths relative to root.

        Returns:
            List of PathCleanupResult, one per input path.
        """
        return [self.remove(root / rel, relative_path=rel) for rel in relative_paths]
