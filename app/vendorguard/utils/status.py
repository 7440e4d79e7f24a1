"""Verbosity-aware status stream.

The host package manager shows hook progress on stderr with three
levels of detail; StatusWriter filters Rich-markup lines by level.
"""

from __future__ import annotations

from enum import IntEnum

from rich.console import Console


class Verbosity(IntEnum):
    """Output verbosity levels.

    Attributes:
        QUIET: No status output.
        NORMAL: Start, summary and failure lines.
        VERBOSE: Adds one line per removed path.
        VERY_VERBOSE: Adds skipped paths and already-cleaned notices.
    """

    QUIET = 0
    NORMAL = 1
    VERBOSE = 2
    VERY_VERBOSE = 3

    @classmethod
    def from_flags(cls, verbose: int = 0, quiet: bool = False) -> Verbosity:
        """Map CLI flags (-q, -v, -vv) to a verbosity level."""
        if quiet:
            return cls.QUIET
        return cls(min(cls.NORMAL + max(verbose, 0), cls.VERY_VERBOSE))


class StatusWriter:
    """Writes status lines that are at or below the configured verbosity.

    Example:
        >>> status = StatusWriter(verbosity=Verbosity.VERBOSE)
        >>> status.write("[info]Cleaning vendor directory.[/]")
        >>> status.write("debug detail", Verbosity.VERY_VERBOSE)  # suppressed
    """

    def __init__(
        self,
        console: Console | None = None,
        verbosity: Verbosity = Verbosity.NORMAL,
    ) -> None:
        """Initialize the StatusWriter.

        Args:
            console: Rich console to write to. Defaults to the shared stderr console.
            verbosity: Highest level that is written.
        """
        if console is None:
            from vendorguard.utils.formatting import err_console

            console = err_console
        self._console = console
        self._verbosity = verbosity

    @property
    def verbosity(self) -> Verbosity:
        """Return the configured verbosity."""
        return self._verbosity

    def is_enabled(self, level: Verbosity) -> bool:
        """Check if lines at the given level are written."""
        return self._verbosity != Verbosity.QUIET and level <= self._verbosity

    def write(self, message: str, level: Verbosity = Verbosity.NORMAL) -> None:
        """Write a Rich-markup line if its level is enabled.

        Args:
            message: Line content with Rich markup.
            level: Verbosity level of the line.
        """
        if self.is_enabled(level):
            self._console.print(message, highlight=False, soft_wrap=True)
