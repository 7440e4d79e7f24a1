"""Clean command implementation.

Removes configured non-runtime directories from installed packages,
either for named packages or for the whole vendor directory.
"""

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from vendorguard.cli.context import build_orchestrator, get_verbosity
from vendorguard.models.outcome import CleanupOutcome, PackageCleanupResult
from vendorguard.scanners.base import RegistryReadError
from vendorguard.utils.formatting import (
    console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from vendorguard.utils.status import Verbosity


def clean(
    ctx: typer.Context,
    packages: Annotated[
        list[str] | None,
        typer.Argument(help="Packages to clean (default: every installed package)."),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be removed."),
    ] = False,
) -> None:
    """Remove tests, docs and examples from installed packages."""
    orchestrator = build_orchestrator(ctx, dry_run=dry_run)

    results: list[PackageCleanupResult] = []
    if packages:
        for name in packages:
            try:
                result = orchestrator.clean_one(name)
            except ValueError as e:
                print_error(str(e))
                raise typer.Exit(code=2) from e
            if result is not None:
                results.append(result)
    else:
        try:
            results = orchestrator.clean_all()
        except RegistryReadError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e

    touched = [r for r in results if r.paths]
    if not touched:
        if packages:
            print_info("Nothing to clean.")
        return

    if get_verbosity(ctx) >= Verbosity.VERBOSE:
        console.print(_create_results_table(touched, dry_run))

    _print_summary(touched, dry_run)


# === Private helper functions ===


def _create_results_table(results: list[PackageCleanupResult], dry_run: bool) -> Table:
    """Create a Rich table with one row per cleaned path."""
    title = "Cleanup Results (Dry Run)" if dry_run else "Cleanup Results"
    table = Table(
        title=title,
        show_header=True,
        header_style="header",
        border_style="border",
    )
    table.add_column("Status", width=10, justify="center")
    table.add_column("Package", no_wrap=True)
    table.add_column("Path")
    table.add_column("Details", style="muted")

    for result in results:
        for path in result.paths:
            if path.outcome == CleanupOutcome.REMOVAL_FAILED:
                status = "[error]failed[/]"
            elif path.outcome == CleanupOutcome.ALREADY_ABSENT:
                status = "[absent]absent[/]"
            elif path.dry_run:
                status = "[info]dry-run[/]"
            else:
                status = "[removed]removed[/]"
            table.add_row(
                status,
                escape(result.package),
                escape(path.relative_path or path.path),
                escape(path.error or ""),
            )

    return table


def _print_summary(results: list[PackageCleanupResult], dry_run: bool) -> None:
    """Print counts of removed, absent and failed paths."""
    removed = sum(r.removed_count for r in results)
    absent = sum(r.absent_count for r in results)
    failed = sum(r.failed_count for r in results)

    if dry_run:
        print_info(f"Dry-run: {removed} path(s) in {len(results)} package(s) would be removed.")
        return

    summary = (
        f"Cleaned {len(results)} package(s): {removed} path(s) removed, {absent} already absent"
    )
    if failed:
        print_warning(f"{summary}, {failed} failed.")
    else:
        print_success(f"{summary}.")
