"""Unit tests for error classification and exit statuses."""

import pytest
from cleanrepo.errors import (
    EXIT_SUCCESS,
    CleanRepoError,
    ConfigError,
    FailureKind,
    InvalidPatternError,
    MissingIgnoreFileError,
    NotARepositoryError,
    RepositoryError,
    exit_code_for,
)


class TestExitCodes:
    """Tests for the failure kind to exit status mapping."""

    @pytest.mark.parametrize(
        ("kind", "code"),
        [
            (FailureKind.INVALID_PATTERN, 1),
            (FailureKind.INVALID_CONFIG, 1),
            (FailureKind.NO_IGNORE_FILE, 2),
            (FailureKind.NOT_A_REPOSITORY, 3),
            (FailureKind.OPERATION_FAILED, 4),
        ],
    )
    def test_mapping(self, kind: FailureKind, code: int) -> None:
        """Each failure kind has a fixed exit status."""
        assert exit_code_for(kind) == code

    def test_every_kind_mapped(self) -> None:
        """No failure kind is left without an exit status."""
        for kind in FailureKind:
            assert exit_code_for(kind) != EXIT_SUCCESS


class TestErrorKinds:
    """Tests for the kind carried by each exception."""

    @pytest.mark.parametrize(
        ("error", "kind"),
        [
            (InvalidPatternError("[", "unterminated"), FailureKind.INVALID_PATTERN),
            (ConfigError("bad"), FailureKind.INVALID_CONFIG),
            (MissingIgnoreFileError("missing"), FailureKind.NO_IGNORE_FILE),
            (NotARepositoryError("nope"), FailureKind.NOT_A_REPOSITORY),
            (RepositoryError("git failed"), FailureKind.OPERATION_FAILED),
        ],
    )
    def test_kind(self, error: CleanRepoError, kind: FailureKind) -> None:
        """Exceptions are classified by type, not by message."""
        assert error.kind == kind
        assert error.exit_code == exit_code_for(kind)
        assert isinstance(error, CleanRepoError)

    def test_invalid_pattern_message(self) -> None:
        """The offending pattern is named in the message."""
        error = InvalidPatternError("a[b", "unterminated character class at 1")

        assert error.pattern == "a[b"
        assert str(error) == "Invalid glob pattern: 'a[b' (unterminated character class at 1)"
