"""CLI commands for vendorguard.

This package contains all subcommand implementations.
"""

from vendorguard.cli.commands import clean, config, harden, hook

__all__ = ["clean", "config", "harden", "hook"]
