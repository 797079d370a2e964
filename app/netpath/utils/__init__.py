"""Utility modules for netpath.

This module exports commonly used utility functions.
"""

from netpath.utils.formatting import (
    console,
    create_inspection_table,
    err_console,
    format_inspection_row,
    print_error,
    print_info,
    print_success,
    print_warning,
    setup_logging,
)

__all__ = [
    "console",
    "create_inspection_table",
    "err_console",
    "format_inspection_row",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "setup_logging",
]
