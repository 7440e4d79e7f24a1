"""Utility modules for vendorguard.

This module exports commonly used utility functions.
"""

from vendorguard.utils.formatting import (
    console,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from vendorguard.utils.status import StatusWriter, Verbosity

__all__ = [
    "StatusWriter",
    "Verbosity",
    "console",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
