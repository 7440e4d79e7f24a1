"""Configuration commands.

Provides commands to inspect the merged cleanup table and to create a
starter vendor-hardening.toml.
"""

import json
from enum import Enum
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from vendorguard.cli.context import get_config_path, require_cleanup_config
from vendorguard.config.loader import ConfigError, save_config
from vendorguard.config.models import HardeningConfig
from vendorguard.models.package import normalize_package_name
from vendorguard.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Inspect and create the cleanup configuration.",
    invoke_without_command=True,
    no_args_is_help=True,
)


class OutputFormat(str, Enum):
    """Output format options for config show."""

    TABLE = "table"
    JSON = "json"


@app.command()
def show(
    ctx: typer.Context,
    package: Annotated[
        str | None,
        typer.Option("--package", "-p", help="Show a single package."),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Show the merged cleanup table (defaults + extend - ignore)."""
    config = require_cleanup_config(ctx)

    if package is not None:
        name = normalize_package_name(package)
        paths = config.resolve_paths(name)
        table = {name: paths} if paths else {}
    else:
        table = config.all_cleanup_paths()

    if not table:
        print_info("No cleanup paths configured.")
        return

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps({name: list(paths) for name, paths in table.items()}))
        return

    rich_table = Table(
        title="Cleanup Paths",
        show_header=True,
        header_style="header",
        border_style="border",
    )
    rich_table.add_column("Package", no_wrap=True, style="package.name")
    rich_table.add_column("Paths", style="package.path")
    for name, paths in table.items():
        rich_table.add_row(escape(name), escape(", ".join(paths)))

    console.print(rich_table)
    console.print(f"\n[muted]{len(table)} package(s) configured[/]")


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing configuration file."),
    ] = False,
) -> None:
    """Create a starter vendor-hardening.toml."""
    path = get_config_path(ctx)
    if path.exists() and not force:
        print_error(f"Configuration already exists: {path}")
        print_info("Use --force to overwrite it.")
        raise typer.Exit(code=1)

    try:
        save_config(HardeningConfig(), path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Configuration written to {path}")
