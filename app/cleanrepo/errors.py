"""Error classification for clean-repo.

Every failure that aborts a run before any deletion is raised as a
CleanRepoError subclass tagged with a FailureKind. The CLI maps the
kind to a process exit status without inspecting error messages.
"""

from enum import Enum


class FailureKind(str, Enum):
    """Category of a failure that stops or degrades a run.

    Attributes:
        INVALID_PATTERN: An exclusion pattern is not valid glob syntax.
        INVALID_CONFIG: The settings file cannot be read or validated.
        NO_IGNORE_FILE: The repository root has no .gitignore.
        NOT_A_REPOSITORY: No Git work tree could be found.
        OPERATION_FAILED: Listing or deleting ignored paths failed.
    """

    INVALID_PATTERN = "invalid_pattern"
    INVALID_CONFIG = "invalid_config"
    NO_IGNORE_FILE = "no_ignore_file"
    NOT_A_REPOSITORY = "not_a_repository"
    OPERATION_FAILED = "operation_failed"


EXIT_SUCCESS = 0

_EXIT_CODES: dict[FailureKind, int] = {
    FailureKind.INVALID_PATTERN: 1,
    FailureKind.INVALID_CONFIG: 1,
    FailureKind.NO_IGNORE_FILE: 2,
    FailureKind.NOT_A_REPOSITORY: 3,
    FailureKind.OPERATION_FAILED: 4,
}


def exit_code_for(kind: FailureKind) -> int:
    """Return the process exit status for a failure kind."""
    return _EXIT_CODES[kind]


class CleanRepoError(Exception):
    """Base class for all clean-repo errors."""

    kind: FailureKind = FailureKind.OPERATION_FAILED

    @property
    def exit_code(self) -> int:
        """Process exit status associated with this error."""
        return exit_code_for(self.kind)


class InvalidPatternError(CleanRepoError):
    """An exclusion pattern could not be compiled.

    Attributes:
        pattern: The offending pattern string.
        reason: Short description of what is wrong with it.
    """

    kind = FailureKind.INVALID_PATTERN

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid glob pattern: '{pattern}' ({reason})")


class ConfigError(CleanRepoError):
    """The settings file is unreadable or invalid."""

    kind = FailureKind.INVALID_CONFIG


class NotARepositoryError(CleanRepoError):
    """No Git work tree contains the starting directory."""

    kind = FailureKind.NOT_A_REPOSITORY


class MissingIgnoreFileError(CleanRepoError):
    """The repository root has no .gitignore file."""

    kind = FailureKind.NO_IGNORE_FILE


class RepositoryError(CleanRepoError):
    """Git failed while enumerating ignored paths."""

    kind = FailureKind.OPERATION_FAILED
