"""Utility modules for clean-repo.

This module exports commonly used utility functions.
"""

from cleanrepo.utils.formatting import (
    configure_output,
    console,
    err_console,
    print_debug,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from cleanrepo.utils.shell import CommandResult, run_command

__all__ = [
    "CommandResult",
    "configure_output",
    "console",
    "err_console",
    "print_debug",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
]
