"""Presentation of cleanup runs.

Renders the dry-run plan, the deletion progress bar, and the final
summary. The cleaner itself never prints; this module subscribes to
its progress events and formats its RunResult.
"""

import json
from pathlib import Path
from types import TracebackType

import typer
from rich.markup import escape
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)

from cleanrepo.models import ProgressEvent, RunOutcome, RunResult
from cleanrepo.utils.formatting import (
    console,
    print_debug,
    print_error,
    print_info,
    print_success,
    print_warning,
)


def _relative(path: Path, root: Path) -> Path:
    try:
        return path.relative_to(root)
    except ValueError:
        return path


class DeletionProgress:
    """Progress bar fed by the cleaner's progress events.

    The bar is only shown when at least ``threshold`` candidates are
    processed and output is not quiet. Failures are reported as they
    happen either way.

    Example:
        >>> with DeletionProgress(threshold=10) as progress:
        ...     Cleaner(repo, matcher, dry_run=False, on_progress=progress).run()
    """

    def __init__(self, threshold: int = 10, *, enabled: bool = True) -> None:
        self._threshold = threshold
        self._enabled = enabled
        self._progress: Progress | None = None
        self._task: TaskID | None = None

    def __enter__(self) -> "DeletionProgress":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __call__(self, event: ProgressEvent) -> None:
        """Record one processed candidate."""
        if self._progress is None and self._wants_bar(event.total):
            self._start(event.total)

        if event.success:
            print_debug(f"Deleted: {event.relative_path}")
        else:
            print_error(f"Failed to delete {event.relative_path}: {event.error}")

        if self._progress is not None and self._task is not None:
            self._progress.update(
                self._task,
                advance=1,
                description=escape(str(event.relative_path)),
            )

    def close(self) -> None:
        """Stop the progress bar if one is running."""
        if self._progress is not None and self._task is not None:
            self._progress.update(self._task, description="Done")
            self._progress.stop()
        self._progress = None
        self._task = None

    def _wants_bar(self, total: int) -> bool:
        return self._enabled and not console.quiet and total >= self._threshold

    def _start(self, total: int) -> None:
        self._progress = Progress(
            SpinnerColumn(style="success"),
            TimeElapsedColumn(),
            BarColumn(complete_style="info"),
            MofNCompleteColumn(),
            TextColumn("{task.description}"),
            console=console,
            transient=False,
        )
        self._task = self._progress.add_task("", total=total)
        self._progress.start()


def print_dry_run(result: RunResult, root: Path) -> None:
    """Display what a dry run would delete.

    Args:
        result: Result of a dry run.
        root: Repository root, used to render relative paths.
    """
    print_info("DRY RUN — the following files/dirs would be removed:")
    for path in result.deleted:
        console.print(f"  [candidate]{escape(str(_relative(path, root)))}[/]", soft_wrap=True)

    if result.excluded:
        console.print()
        print_info(f"Excluded files ({len(result.excluded)}):")
        for path in result.excluded:
            console.print(f"  [excluded]{escape(str(path))}[/]", soft_wrap=True)

    console.print()
    print_warning("Run with -x to actually delete the listed files.")


def print_exclusions(result: RunResult) -> None:
    """Display each excluded path as debug output."""
    for path in result.excluded:
        print_debug(f"Excluded by pattern: {path}")


def print_summary(result: RunResult, root: Path) -> None:
    """Display the outcome of a run.

    Args:
        result: Completed run result.
        root: Repository root, used to render relative paths.
    """
    if result.outcome == RunOutcome.EMPTY_INPUT:
        print_success("No ignored files found — repository is clean.")
        return

    if result.outcome == RunOutcome.NO_CANDIDATES:
        print_success("No (non-excluded) ignored files to delete.")
        if result.excluded:
            print_info(f"Excluded {len(result.excluded)} files.")
        return

    if result.outcome == RunOutcome.DRY_RUN:
        print_dry_run(result, root)
        return

    if result.failed:
        print_warning(f"Deletion completed with {len(result.failed)} failure(s).")
        for failure in result.failed:
            print_debug(f"{_relative(failure.path, root)}: {failure.error}")
    else:
        print_success(f"Successfully deleted {len(result.deleted)} item(s).")


def print_json(result: RunResult, root: Path) -> None:
    """Write the run result as JSON to stdout.

    JSON output is written even in quiet mode.
    """
    # Plain echo rather than console.print_json: the quiet console would drop it.
    typer.echo(json.dumps(result.to_dict(root), indent=2))
