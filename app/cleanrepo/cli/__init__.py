"""CLI package for clean-repo.

This package contains the Typer application and run presentation.
"""

from cleanrepo.cli.main import app

__all__ = ["app"]
