"""Selection and deletion of ignored paths.

The Cleaner partitions the ignored paths of a repository into
deletion candidates and user exclusions, then either stops there
(dry run) or deletes the candidates one at a time, recording each
failure without aborting the run.
"""

import logging
import shutil
from collections.abc import Callable, Iterable
from pathlib import Path

from cleanrepo.models import DeletionFailure, ProgressEvent, RunOutcome, RunResult
from cleanrepo.patterns import PatternMatcher
from cleanrepo.repository import IgnoredPathSource

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[ProgressEvent], None]


class Cleaner:
    """Removes ignored files and directories from a repository.

    Dry run is the default; deletion only happens when the cleaner is
    created with ``dry_run=False``. The cleaner never prints: callers
    observe deletion progress through ``on_progress``.

    Attributes:
        _repo: Source of the repository root and ignored paths.
        _matcher: Exclusion patterns sparing paths from deletion.
        _dry_run: If True, report candidates without deleting them.
        _on_progress: Called once per processed candidate.
    """

    def __init__(
        self,
        repo: IgnoredPathSource,
        matcher: PatternMatcher | None = None,
        *,
        dry_run: bool = True,
        on_progress: ProgressCallback | None = None,
    ) -> None:
        self._repo = repo
        self._matcher = matcher if matcher is not None else PatternMatcher()
        self._dry_run = dry_run
        self._on_progress = on_progress

    @property
    def dry_run(self) -> bool:
        """Whether this cleaner only reports candidates."""
        return self._dry_run

    @property
    def root(self) -> Path:
        """Repository root all relative paths are computed against."""
        return self._repo.root

    def run(self) -> RunResult:
        """Run a full cleanup.

        Returns:
            RunResult whose ``outcome`` names the terminal state reached.
            Individual deletion failures are recorded in the result and
            never raised.

        Raises:
            RepositoryError: If the ignored paths cannot be listed.
        """
        ignored = self._repo.list_ignored_paths()
        logger.debug("Ignored files found: %d", len(ignored))

        if not ignored:
            return RunResult(outcome=RunOutcome.EMPTY_INPUT, dry_run=self._dry_run)

        result = self.partition(ignored)

        if not result.deleted:
            result.outcome = RunOutcome.NO_CANDIDATES
            return result

        if self._dry_run:
            result.outcome = RunOutcome.DRY_RUN
            logger.info("Dry-run: %d path(s) would be deleted", len(result.deleted))
            return result

        self._execute(result)
        result.outcome = RunOutcome.EXECUTED
        return result

    def partition(self, paths: Iterable[Path]) -> RunResult:
        """Split ignored paths into candidates and exclusions.

        Matched paths go to ``excluded`` in their root-relative form;
        the rest go to ``deleted`` as absolute paths. Both buckets keep
        input order.

        Args:
            paths: Absolute ignored paths.

        Returns:
            RunResult with ``deleted`` holding the pending candidates.
        """
        result = RunResult(dry_run=self._dry_run)

        for path in paths:
            relative = self.relative(path)
            if self._matcher.matches(relative):
                result.excluded.append(relative)
                logger.debug("Excluded by pattern: %s", relative)
            else:
                result.deleted.append(path)

        return result

    def relative(self, path: Path) -> Path:
        """Render a path relative to the repository root.

        Paths outside the root are returned unchanged.
        """
        try:
            return path.relative_to(self._repo.root)
        except ValueError:
            return path

    def _execute(self, result: RunResult) -> None:
        """Delete every pending candidate in ``result``.

        Candidates are taken from ``result.deleted`` and moved back
        into ``deleted`` or into ``failed`` as each one is processed.
        """
        candidates = list(result.deleted)
        result.deleted.clear()
        total = len(candidates)

        for index, path in enumerate(candidates, start=1):
            relative = self.relative(path)
            error = self._delete_single(path)

            if error is None:
                result.deleted.append(path)
                logger.debug("Deleted: %s", relative)
            else:
                result.failed.append(DeletionFailure(path=path, error=error))
                logger.info("Failed to delete %s: %s", relative, error)

            if self._on_progress is not None:
                self._on_progress(
                    ProgressEvent(
                        path=path,
                        relative_path=relative,
                        index=index,
                        total=total,
                        success=error is None,
                        error=error,
                    )
                )

        if result.failed:
            logger.info("Deletion completed with %d failure(s)", len(result.failed))

    @staticmethod
    def _delete_single(path: Path) -> str | None:
        """Delete one file or directory tree.

        Args:
            path: Absolute path to delete.

        Returns:
            None on success, otherwise a description of the error.
        """
        try:
            # Directories (but not symlinks to directories)
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
                return None

            # Files, symlinks, and dead symlinks
            if path.exists() or path.is_symlink():
                path.unlink()
                return None

            return f"Path does not exist: {path}"

        except OSError as e:
            return str(e) or e.__class__.__name__
