"""Shared helpers for CLI commands.

Turns the global options stored on the Typer context into the objects
the commands operate on.
"""

from pathlib import Path
from typing import Any

import typer

from vendorguard.config.cleanup import CleanupConfig
from vendorguard.config.loader import ConfigError, load_config
from vendorguard.core.orchestrator import CleanupOrchestrator
from vendorguard.core.paths import get_project_config_path, resolve_vendor_dir
from vendorguard.filesystem.remover import PathRemover
from vendorguard.scanners.composer import ComposerRegistry
from vendorguard.utils.formatting import print_error
from vendorguard.utils.status import StatusWriter, Verbosity


def _options(ctx: typer.Context) -> dict[str, Any]:
    root = ctx.find_root()
    if isinstance(root.obj, dict):
        return root.obj
    return {}


def get_verbosity(ctx: typer.Context) -> Verbosity:
    """Get the verbosity selected with -q / -v / -vv."""
    opts = _options(ctx)
    return Verbosity.from_flags(opts.get("verbose", 0), opts.get("quiet", False))


def get_project_dir(ctx: typer.Context) -> Path:
    """Get the project directory (defaults to the current directory)."""
    project_dir = _options(ctx).get("project_dir")
    return (project_dir or Path.cwd()).resolve()


def get_vendor_dir(ctx: typer.Context) -> Path:
    """Get the vendor directory of the project."""
    return resolve_vendor_dir(get_project_dir(ctx), _options(ctx).get("vendor_dir"))


def get_config_path(ctx: typer.Context) -> Path:
    """Get the project configuration file path."""
    config_path = _options(ctx).get("config_path")
    if config_path is not None:
        return config_path
    return get_project_config_path(get_project_dir(ctx))


def require_cleanup_config(ctx: typer.Context) -> CleanupConfig:
    """Load the merged cleanup table or exit with a helpful error message.

    Raises:
        typer.Exit: If the project configuration cannot be loaded.
    """
    path = get_config_path(ctx)
    try:
        settings = load_config(path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    return CleanupConfig.from_settings(settings)


def build_orchestrator(ctx: typer.Context, dry_run: bool = False) -> CleanupOrchestrator:
    """Create the orchestrator shared by everything run in this invocation.

    Args:
        ctx: Typer context carrying the global options.
        dry_run: If True, report removals without deleting anything.

    Returns:
        CleanupOrchestrator for the project's vendor directory.
    """
    vendor_dir = get_vendor_dir(ctx)
    return CleanupOrchestrator(
        vendor_dir=vendor_dir,
        config=require_cleanup_config(ctx),
        registry=ComposerRegistry(vendor_dir),
        remover=PathRemover(dry_run=dry_run),
        status=StatusWriter(verbosity=get_verbosity(ctx)),
    )
