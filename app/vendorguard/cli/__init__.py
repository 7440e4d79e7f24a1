"""CLI package for vendorguard.

This package contains the Typer application and all subcommands.
"""

from vendorguard.cli.main import app

__all__ = ["app"]
