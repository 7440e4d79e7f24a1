"""Lifecycle event handling.

Maps package manager lifecycle events to the hardening operations. The
mapping is a plain registration table built once per plugin instance;
the host invokes handlers synchronously through dispatch().
"""

import logging
from collections.abc import Callable
from enum import Enum

from vendorguard.core.orchestrator import CleanupOrchestrator
from vendorguard.filesystem.access import write_access_restriction_files

logger = logging.getLogger(__name__)


class HookEvent(str, Enum):
    """Composer lifecycle events handled by vendorguard."""

    POST_INSTALL_CMD = "post-install-cmd"
    POST_UPDATE_CMD = "post-update-cmd"
    POST_PACKAGE_INSTALL = "post-package-install"
    POST_PACKAGE_UPDATE = "post-package-update"
    POST_AUTOLOAD_DUMP = "post-autoload-dump"

    @property
    def is_package_event(self) -> bool:
        """Check if the event concerns a single package."""
        return self in (HookEvent.POST_PACKAGE_INSTALL, HookEvent.POST_PACKAGE_UPDATE)


EventHandler = Callable[[str | None], None]


class HardeningPlugin:
    """Subscribes the cleanup orchestrator and access writer to lifecycle events.

    All handlers share the orchestrator passed in, so packages cleaned by
    a per-package event are skipped by a later post-command sweep.

    Example:
        >>> plugin = HardeningPlugin(orchestrator)
        >>> plugin.dispatch(HookEvent.POST_PACKAGE_INSTALL, "symfony/yaml")
        >>> plugin.dispatch(HookEvent.POST_INSTALL_CMD)
    """

    def __init__(self, orchestrator: CleanupOrchestrator) -> None:
        """Initialize the plugin.

        Args:
            orchestrator: Orchestrator owning the ledger for this invocation.
        """
        self._orchestrator = orchestrator
        self._handlers: dict[HookEvent, EventHandler] = dict(self.subscribed_events())

    @property
    def orchestrator(self) -> CleanupOrchestrator:
        """Return the shared orchestrator."""
        return self._orchestrator

    def subscribed_events(self) -> list[tuple[HookEvent, EventHandler]]:
        """Return the (event, handler) registration table."""
        return [
            (HookEvent.POST_AUTOLOAD_DUMP, self.on_post_autoload_dump),
            (HookEvent.POST_UPDATE_CMD, self.on_post_cmd),
            (HookEvent.POST_INSTALL_CMD, self.on_post_cmd),
            (HookEvent.POST_PACKAGE_INSTALL, self.on_post_package_install),
            (HookEvent.POST_PACKAGE_UPDATE, self.on_post_package_update),
        ]

    def dispatch(self, event: HookEvent, package: str | None = None) -> None:
        """Invoke the handler registered for an event.

        Args:
            event: Lifecycle event that fired.
            package: Package name, required for package events.

        Raises:
            ValueError: If a package event is dispatched without a package name.
        """
        if event.is_package_event and not package:
            msg = f"Event '{event.value}' requires a package name"
            raise ValueError(msg)
        logger.debug("Dispatching %s (package=%s)", event.value, package)
        self._handlers[event](package)

    def on_post_autoload_dump(self, package: str | None = None) -> None:
        """Protect the vendor directory after the autoloader is regenerated."""
        vendor_dir = self._orchestrator.vendor_dir
        if self._orchestrator.dry_run:
            self._orchestrator.status.write(
                "[info]Dry-run: would harden vendor directory with .htaccess and web.config.[/]"
            )
            return
        self._orchestrator.status.write(
            "[info]Hardening vendor directory with .htaccess and web.config files.[/]"
        )
        written = write_access_restriction_files(vendor_dir)
        for path in written:
            logger.info("Wrote %s", path)

    def on_post_cmd(self, package: str | None = None) -> None:
        """Clean all configured packages after an install or update command."""
        self._orchestrator.clean_all()

    def on_post_package_install(self, package: str | None = None) -> None:
        """Clean a freshly installed package."""
        self._clean_package(package)

    def on_post_package_update(self, package: str | None = None) -> None:
        """Clean the target package of an update."""
        self._clean_package(package)

    def _clean_package(self, package: str | None) -> None:
        if not package:
            msg = "Package event received without a package name"
            raise ValueError(msg)
        result = self._orchestrator.clean_one(package)
        if result is not None and not result.success:
            logger.info(
                "%d path(s) could not be removed from %s",
                result.failed_count,
                result.package,
            )
