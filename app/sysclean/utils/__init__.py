"""Utility modules for sysclean.

This module exports commonly used utility functions.
"""

from sysclean.utils.formatting import (
    console,
    err_console,
    format_gigabytes,
    format_megabytes,
    format_size,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from sysclean.utils.shell import CommandResult, run_command

__all__ = [
    "CommandResult",
    "console",
    "err_console",
    "format_gigabytes",
    "format_megabytes",
    "format_size",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
]
