"""Main CLI application entry point.

Defines the Typer application, its options, and the mapping from
failure kinds to process exit statuses.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from cleanrepo import __version__
from cleanrepo.cleaner import Cleaner
from cleanrepo.cli.display import DeletionProgress, print_exclusions, print_json, print_summary
from cleanrepo.core.config import load_settings
from cleanrepo.core.theme import get_rich_theme, load_theme_colors
from cleanrepo.errors import CleanRepoError, FailureKind, exit_code_for
from cleanrepo.patterns import PatternMatcher
from cleanrepo.repository import GitRepository
from cleanrepo.utils.formatting import configure_output, print_debug, print_error

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="clean-repo",
    help="Delete files and directories ignored by your project's .gitignore.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog="Runs as a dry run unless -x/--execute is given.",
)


class OutputFormat(str, Enum):
    """Output format options for the run report."""

    TEXT = "text"
    JSON = "json"


class LogLevel(str, Enum):
    """Log levels accepted by --log-level."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"clean-repo version {__version__}")
        raise typer.Exit()


@app.command()
def clean(
    execute: Annotated[
        bool,
        typer.Option(
            "--execute",
            "-x",
            help="Execute deletion (default: dry run, only shows what would be deleted).",
        ),
    ] = False,
    ignore_patterns: Annotated[
        list[str] | None,
        typer.Option(
            "--ignore",
            "-i",
            metavar="PATTERN",
            help='Exclude pattern, repeatable. Examples: -i "*.log" -i node_modules',
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show detailed information."),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress all output except errors."),
    ] = False,
    directory: Annotated[
        Path | None,
        typer.Option(
            "--directory",
            "-C",
            help="Find the repository from this directory instead of the current one.",
            exists=True,
            file_okay=False,
        ),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="Settings file to use.", dir_okay=False),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format.", case_sensitive=False),
    ] = OutputFormat.TEXT,
    log_level: Annotated[
        LogLevel,
        typer.Option("--log-level", help="Diagnostic log level.", case_sensitive=False),
    ] = LogLevel.WARNING,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Delete files and directories ignored by your project's .gitignore.

    Lists everything Git ignores in the repository, skips entries matching
    an exclusion pattern, and deletes the rest only with [bold]-x[/bold].
    """
    logging.getLogger("cleanrepo").setLevel(log_level.value.upper())

    as_json = output_format == OutputFormat.JSON
    configure_output(quiet=quiet, verbose=verbose and not as_json)

    try:
        settings = load_settings(config_path)
        configure_output(
            quiet=quiet,
            verbose=verbose and not as_json,
            theme=get_rich_theme(load_theme_colors(settings.colors)),
        )

        repo = GitRepository.open(directory)
        print_debug(f"Repository root: {repo.root}")
        repo.require_ignore_policy_file()

        matcher = PatternMatcher([*settings.clean.exclude, *(ignore_patterns or [])])
        if matcher:
            print_debug(f"Exclude patterns: {', '.join(matcher.patterns)}")

        with DeletionProgress(settings.clean.progress_threshold, enabled=not as_json) as progress:
            cleaner = Cleaner(repo, matcher, dry_run=not execute, on_progress=progress)
            result = cleaner.run()
    except CleanRepoError as e:
        logger.debug("Aborting run: %s", e.kind.value)
        print_error(str(e))
        raise typer.Exit(code=e.exit_code) from e

    if as_json:
        print_json(result, repo.root)
    else:
        print_exclusions(result)
        print_summary(result, repo.root)

    if result.has_failures:
        raise typer.Exit(code=exit_code_for(FailureKind.OPERATION_FAILED))


def run() -> None:
    """Console script entry point."""
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    app()


if __name__ == "__main__":
    run()
