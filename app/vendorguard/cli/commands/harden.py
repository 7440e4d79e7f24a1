"""Harden command implementation.

Writes the web-server access restriction files into the vendor directory.
"""

import typer

from vendorguard.cli.context import get_vendor_dir
from vendorguard.filesystem.access import AccessRestrictionError, write_access_restriction_files
from vendorguard.utils.formatting import print_error, print_success


def harden(ctx: typer.Context) -> None:
    """Write .htaccess and web.config to block HTTP access to the vendor directory."""
    vendor_dir = get_vendor_dir(ctx)
    try:
        written = write_access_restriction_files(vendor_dir)
    except AccessRestrictionError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    for path in written:
        print_success(f"Wrote {path}")
