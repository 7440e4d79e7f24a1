"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from pathlib import Path
from typing import Annotated

import typer

from vendorguard import __version__
from vendorguard.cli.commands import clean, config, harden, hook

# Create main Typer app
app = typer.Typer(
    name="vendorguard",
    help="Harden a Composer vendor directory.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"vendorguard version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            count=True,
            help="Increase output detail (-v per path, -vv skipped paths).",
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress status output.",
        ),
    ] = False,
    project_dir: Annotated[
        Path | None,
        typer.Option(
            "--project-dir",
            "-d",
            help="Project root holding composer.json (default: current directory).",
        ),
    ] = None,
    vendor_dir: Annotated[
        Path | None,
        typer.Option(
            "--vendor-dir",
            help="Vendor directory (default: from COMPOSER_VENDOR_DIR or composer.json).",
        ),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Cleanup configuration file (default: <project>/vendor-hardening.toml).",
        ),
    ] = None,
) -> None:
    """vendorguard - Harden a Composer vendor directory.

    Removes tests, docs and examples from installed packages and blocks
    web-server access to the vendor directory. Wire the hook command into
    the scripts section of composer.json.
    """
    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["project_dir"] = project_dir
    ctx.obj["vendor_dir"] = vendor_dir
    ctx.obj["config_path"] = config_path


# Register commands
app.command(name="clean")(clean.clean)
app.command(name="harden")(harden.harden)
app.command(name="hook")(hook.hook)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
