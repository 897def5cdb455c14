"""Unit tests for run presentation helpers."""

import json
from collections.abc import Iterator
from pathlib import Path

import pytest
from cleanrepo.cli.display import DeletionProgress, print_json, print_summary
from cleanrepo.models import DeletionFailure, ProgressEvent, RunOutcome, RunResult
from cleanrepo.utils.formatting import configure_output

ROOT = Path("/repo")


@pytest.fixture(autouse=True)
def reset_output() -> Iterator[None]:
    """Restore default output options after each test."""
    yield
    configure_output()


def _event(name: str, index: int, total: int, error: str | None = None) -> ProgressEvent:
    return ProgressEvent(
        path=ROOT / name,
        relative_path=Path(name),
        index=index,
        total=total,
        success=error is None,
        error=error,
    )


class TestPrintSummary:
    """Tests for print_summary."""

    def test_empty_input(self, capsys: pytest.CaptureFixture[str]) -> None:
        """An empty run reports a clean repository."""
        print_summary(RunResult(outcome=RunOutcome.EMPTY_INPUT), ROOT)

        assert "No ignored files found — repository is clean." in capsys.readouterr().out

    def test_no_candidates_with_exclusions(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Exclusion count is shown when everything was excluded."""
        result = RunResult(
            excluded=[Path("a.log"), Path("b.log")], outcome=RunOutcome.NO_CANDIDATES
        )

        print_summary(result, ROOT)

        out = capsys.readouterr().out
        assert "No (non-excluded) ignored files to delete." in out
        assert "Excluded 2 files." in out

    def test_dry_run(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Dry run lists candidates relative to the root and exclusions."""
        result = RunResult(
            deleted=[ROOT / "build", ROOT / "src" / "x.tmp"],
            excluded=[Path("keep.env")],
            outcome=RunOutcome.DRY_RUN,
        )

        print_summary(result, ROOT)

        captured = capsys.readouterr()
        assert "DRY RUN — the following files/dirs would be removed:" in captured.out
        assert "  build" in captured.out
        assert "  src/x.tmp" in captured.out
        assert "Excluded files (1):" in captured.out
        assert "  keep.env" in captured.out
        assert "⚠ Run with -x to actually delete the listed files." in captured.out

    def test_executed_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A clean execution reports the number deleted."""
        result = RunResult(
            deleted=[ROOT / "a", ROOT / "b"], outcome=RunOutcome.EXECUTED, dry_run=False
        )

        print_summary(result, ROOT)

        assert "Successfully deleted 2 item(s)." in capsys.readouterr().out

    def test_executed_with_failures(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Failures are summarized as a warning."""
        result = RunResult(
            deleted=[ROOT / "a"],
            failed=[DeletionFailure(path=ROOT / "b", error="denied")],
            outcome=RunOutcome.EXECUTED,
            dry_run=False,
        )

        print_summary(result, ROOT)

        assert "⚠ Deletion completed with 1 failure(s)." in capsys.readouterr().out


class TestPrintJson:
    """Tests for print_json."""

    def test_writes_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        """The result is written as JSON even in quiet mode."""
        configure_output(quiet=True)
        result = RunResult(deleted=[ROOT / "build"], outcome=RunOutcome.DRY_RUN)

        print_json(result, ROOT)

        data = json.loads(capsys.readouterr().out)
        assert data["deleted"] == ["build"]
        assert data["outcome"] == "dry_run"


class TestDeletionProgress:
    """Tests for DeletionProgress."""

    def test_reports_failures_immediately(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Each failure is printed as it happens."""
        with DeletionProgress(threshold=10) as progress:
            progress(_event("a", 1, 2))
            progress(_event("b", 2, 2, error="Permission denied"))

        assert "Failed to delete b: Permission denied" in capsys.readouterr().err

    def test_verbose_reports_deletions(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Successful deletions are shown in verbose mode."""
        configure_output(verbose=True)

        with DeletionProgress(threshold=10) as progress:
            progress(_event("a", 1, 1))

        assert "DEBUG: Deleted: a" in capsys.readouterr().out

    def test_no_bar_below_threshold(self) -> None:
        """Small runs do not start a progress bar."""
        progress = DeletionProgress(threshold=10)

        progress(_event("a", 1, 3))

        assert progress._progress is None

    def test_bar_at_threshold(self) -> None:
        """Runs at the threshold start a bar that close() stops."""
        progress = DeletionProgress(threshold=2)

        progress(_event("a", 1, 2))
        assert progress._progress is not None
        progress(_event("b", 2, 2))
        progress.close()

        assert progress._progress is None

    def test_disabled(self) -> None:
        """A disabled progress never starts a bar."""
        progress = DeletionProgress(threshold=0, enabled=False)

        progress(_event("a", 1, 1))

        assert progress._progress is None

    def test_quiet_disables_bar(self) -> None:
        """Quiet output never starts a bar."""
        configure_output(quiet=True)
        progress = DeletionProgress(threshold=0)

        progress(_event("a", 1, 1))

        assert progress._progress is None
