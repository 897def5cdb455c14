"""Rich console formatting utilities.

Provides the shared consoles and message printers used by the CLI.
Informational output and warnings go to stdout and are silenced in
quiet mode; errors always go to stderr.
"""

import sys

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from cleanrepo.core.theme import get_rich_theme


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances
console = Console(theme=get_rich_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_rich_theme(), stderr=True, color_system=_detect_color_system())

_verbose = False


def configure_output(
    *,
    quiet: bool = False,
    verbose: bool = False,
    theme: Theme | None = None,
) -> None:
    """Apply output options to the shared consoles.

    Args:
        quiet: Suppress everything except errors.
        verbose: Show debug messages.
        theme: Theme to push onto both consoles.
    """
    global _verbose
    console.quiet = quiet
    _verbose = verbose and not quiet
    if theme is not None:
        console.push_theme(theme)
        err_console.push_theme(theme)


def is_verbose() -> bool:
    """Check if debug messages are shown."""
    return _verbose


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]ℹ[/] {escape(message)}", soft_wrap=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]✓[/] {escape(message)}", soft_wrap=True)


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[warning]⚠[/] {escape(message)}", soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]✗[/] {escape(message)}", soft_wrap=True)


def print_debug(message: str) -> None:
    """Print a debug message when verbose output is enabled."""
    if _verbose:
        console.print(f"[debug]DEBUG:[/] {escape(message)}", soft_wrap=True)
