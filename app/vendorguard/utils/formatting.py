"""Shared Rich consoles and message helpers.

Command results go to stdout. Status lines, warnings and errors go to
stderr, which Composer passes through when it runs a script hook.
"""

from rich.console import Console
from rich.text import Text

from vendorguard.core.theme import build_rich_theme, load_theme

_theme = build_rich_theme(load_theme())

console = Console(theme=_theme)
err_console = Console(theme=_theme, stderr=True)


def print_info(message: str) -> None:
    """Print an informational line."""
    console.print(Text(message, style="info"))


def print_success(message: str) -> None:
    """Print a success line."""
    console.print(Text(message, style="success"))


def print_warning(message: str) -> None:
    """Print a warning to stderr."""
    err_console.print(Text.assemble(("Warning: ", "warning"), message))


def print_error(message: str) -> None:
    """Print an error to stderr."""
    err_console.print(Text.assemble(("Error: ", "error"), message))
