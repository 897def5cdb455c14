"""Git repository access.

Discovers the work tree root and enumerates the paths Git ignores,
using the git command line through run_command. The root is always
passed explicitly as the working directory of each git call; the
process working directory is never changed.
"""

import logging
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

from cleanrepo.errors import MissingIgnoreFileError, NotARepositoryError, RepositoryError
from cleanrepo.utils.shell import run_command

logger = logging.getLogger(__name__)

IGNORE_FILE_NAME = ".gitignore"

_LIST_IGNORED_ARGS: list[str] = [
    "ls-files",
    "--others",
    "--ignored",
    "--exclude-standard",
    "-z",
]


class IgnoredPathSource(ABC):
    """Source of ignored paths for a cleanup run.

    The cleaner only needs the repository root and the list of ignored
    paths; implementations decide how to obtain them.
    """

    @property
    @abstractmethod
    def root(self) -> Path:
        """Absolute path of the repository root."""

    @abstractmethod
    def list_ignored_paths(self) -> list[Path]:
        """List ignored files and directories as absolute paths."""


class GitRepository(IgnoredPathSource):
    """A Git work tree.

    Use :meth:`open` to discover the repository containing a directory.

    Attributes:
        _root: Absolute path of the work tree root.
    """

    def __init__(self, root: Path) -> None:
        self._root = root

    @classmethod
    def open(cls, start: Path | None = None) -> "GitRepository":
        """Discover the repository containing ``start``.

        Git honours GIT_DIR and GIT_WORK_TREE from the environment, so
        those take precedence over the starting directory.

        Args:
            start: Directory to start discovery from. Defaults to the
                current directory.

        Returns:
            GitRepository for the enclosing work tree.

        Raises:
            NotARepositoryError: If no work tree encloses ``start``, the
                repository is bare, or git is not installed.
        """
        try:
            result = run_command(["git", "rev-parse", "--show-toplevel"], cwd=start)
        except FileNotFoundError as e:
            msg = "Not inside a Git repository (git executable not found)"
            raise NotARepositoryError(msg) from e
        except (OSError, subprocess.TimeoutExpired) as e:
            msg = f"Not inside a Git repository ({e})"
            raise NotARepositoryError(msg) from e

        toplevel = result.stdout.strip()
        if not result.success or not toplevel:
            detail = result.stderr.strip() or "no work tree found"
            msg = f"Not inside a Git repository ({detail})"
            raise NotARepositoryError(msg)

        root = Path(toplevel)
        logger.debug("Repository root: %s", root)
        return cls(root)

    @property
    def root(self) -> Path:
        """Absolute path of the work tree root."""
        return self._root

    @property
    def ignore_file(self) -> Path:
        """Path of the .gitignore file in the repository root."""
        return self._root / IGNORE_FILE_NAME

    def has_ignore_policy_file(self) -> bool:
        """Check if .gitignore exists in the repository root."""
        return self.ignore_file.exists()

    def require_ignore_policy_file(self) -> None:
        """Ensure the repository root has a .gitignore.

        Raises:
            MissingIgnoreFileError: If the file does not exist.
        """
        if not self.has_ignore_policy_file():
            msg = f"{IGNORE_FILE_NAME} not found in repository root ({self._root})"
            raise MissingIgnoreFileError(msg)

    def list_ignored_paths(self) -> list[Path]:
        """List every ignored file in the work tree.

        Untracked files matched by Git's exclude rules are reported one
        by one, including every file inside an ignored directory; tracked
        files never are. Directories themselves are not listed, so an
        exclusion pattern always decides for each file on its own.

        Returns:
            Absolute paths in the order git reports them.

        Raises:
            RepositoryError: If git fails.
        """
        try:
            result = run_command(["git", *_LIST_IGNORED_ARGS], cwd=self._root, timeout=300.0)
        except (OSError, subprocess.TimeoutExpired) as e:
            msg = f"Failed to get ignored files: {e}"
            raise RepositoryError(msg) from e

        if not result.success:
            msg = f"Failed to get ignored files: {result.stderr.strip() or 'git ls-files failed'}"
            raise RepositoryError(msg)

        paths: list[Path] = []
        for entry in result.stdout.split("\0"):
            entry = entry.rstrip("/")
            if entry:
                paths.append(self._root / entry)

        logger.debug("Ignored paths found: %d", len(paths))
        return paths
