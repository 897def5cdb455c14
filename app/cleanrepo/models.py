"""Result models for a cleanup run.

This module defines the data structures produced by the cleaner:
the per-run result buckets, per-item deletion failures, the terminal
state a run reached, and the progress events emitted while deleting.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class RunOutcome(str, Enum):
    """Terminal state reached by a cleanup run.

    Attributes:
        EMPTY_INPUT: Git reported no ignored paths at all.
        NO_CANDIDATES: Every ignored path was excluded by a pattern.
        DRY_RUN: Candidates were listed but nothing was deleted.
        EXECUTED: Deletion was attempted for every candidate.
    """

    EMPTY_INPUT = "empty_input"
    NO_CANDIDATES = "no_candidates"
    DRY_RUN = "dry_run"
    EXECUTED = "executed"


@dataclass(frozen=True, slots=True)
class DeletionFailure:
    """A candidate whose deletion was attempted and failed.

    Attributes:
        path: Absolute path of the candidate.
        error: Description of the error raised by the filesystem.
    """

    path: Path
    error: str

    def __post_init__(self) -> None:
        """Validate failure data after initialization."""
        if not self.error:
            msg = f"Failure for {self.path} must carry an error description"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class ProgressEvent:
    """Outcome of processing one deletion candidate.

    Attributes:
        path: Absolute path of the candidate.
        relative_path: Path relative to the repository root.
        index: 1-based position of the candidate in the run.
        total: Number of candidates in the run.
        success: Whether the candidate was removed.
        error: Error description if removal failed, None otherwise.
    """

    path: Path
    relative_path: Path
    index: int
    total: int
    success: bool
    error: str | None = None


@dataclass(slots=True)
class RunResult:
    """Partition of the ignored paths after a run.

    Every ignored path ends up in exactly one of the three buckets.
    In dry-run mode ``deleted`` holds the paths that would be removed
    and ``failed`` is always empty.

    Attributes:
        deleted: Absolute paths removed, or to be removed in dry-run mode.
        excluded: Paths spared by an exclusion pattern, relative to the root.
        failed: Candidates whose deletion failed.
        outcome: Terminal state of the run.
        dry_run: Whether the run was a dry run.
    """

    deleted: list[Path] = field(default_factory=list)
    excluded: list[Path] = field(default_factory=list)
    failed: list[DeletionFailure] = field(default_factory=list)
    outcome: RunOutcome = RunOutcome.EMPTY_INPUT
    dry_run: bool = True

    @property
    def has_failures(self) -> bool:
        """Check if any deletion failed."""
        return bool(self.failed)

    @property
    def total(self) -> int:
        """Number of ignored paths accounted for by this result."""
        return len(self.deleted) + len(self.excluded) + len(self.failed)

    def to_dict(self, root: Path | None = None) -> dict[str, object]:
        """Serialize the result for JSON output.

        Args:
            root: Repository root. When given, deleted and failed paths
                are rendered relative to it.

        Returns:
            Dictionary of plain JSON-compatible values.
        """

        def _show(path: Path) -> str:
            if root is not None and path.is_relative_to(root):
                return path.relative_to(root).as_posix()
            return path.as_posix()

        return {
            "outcome": self.outcome.value,
            "dry_run": self.dry_run,
            "deleted": [_show(p) for p in self.deleted],
            "excluded": [p.as_posix() for p in self.excluded],
            "failed": [{"path": _show(f.path), "error": f.error} for f in self.failed],
        }
