"""Hook command implementation.

Entry point for the package manager's lifecycle events, e.g. in
composer.json:

    "scripts": {
        "post-install-cmd": "vendorguard hook post-install-cmd",
        "post-autoload-dump": "vendorguard hook post-autoload-dump"
    }
"""

from typing import Annotated

import typer

from vendorguard.cli.context import build_orchestrator
from vendorguard.core.events import HardeningPlugin, HookEvent
from vendorguard.filesystem.access import AccessRestrictionError
from vendorguard.scanners.base import RegistryReadError
from vendorguard.utils.formatting import print_error


def hook(
    ctx: typer.Context,
    event: Annotated[
        HookEvent,
        typer.Argument(help="Lifecycle event that fired.", case_sensitive=False),
    ],
    packages: Annotated[
        list[str] | None,
        typer.Option(
            "--package",
            "-p",
            help="Package the event concerns (repeatable, package events only).",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be removed."),
    ] = False,
) -> None:
    """Handle a package manager lifecycle event."""
    if event.is_package_event and not packages:
        print_error(f"Event '{event.value}' requires --package.")
        raise typer.Exit(code=2)

    plugin = HardeningPlugin(build_orchestrator(ctx, dry_run=dry_run))

    try:
        if event.is_package_event:
            for name in packages or []:
                plugin.dispatch(event, name)
        else:
            plugin.dispatch(event)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(code=2) from e
    except (RegistryReadError, AccessRestrictionError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
