"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest
from cleanrepo.repository import IgnoredPathSource


class FakeRepository(IgnoredPathSource):
    """In-memory ignored path source rooted at a real directory."""

    def __init__(self, root: Path, ignored: list[Path]) -> None:
        self._root = root
        self._ignored = ignored

    @property
    def root(self) -> Path:
        return self._root

    def list_ignored_paths(self) -> list[Path]:
        return list(self._ignored)


@pytest.fixture(autouse=True)
def isolated_config(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory for every test."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.delenv("CLEAN_REPO_CONFIG", raising=False)
    return config_home


@pytest.fixture
def make_repo(tmp_path: Path) -> Callable[..., FakeRepository]:
    """Create files under tmp_path and a FakeRepository listing them.

    Names ending in "/" are created as directories containing one file.
    """

    def _make(*names: str) -> FakeRepository:
        ignored: list[Path] = []
        for name in names:
            path = tmp_path / name.rstrip("/")
            if name.endswith("/"):
                path.mkdir(parents=True, exist_ok=True)
                (path / "content.txt").write_text("content")
            else:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text("content")
            ignored.append(path)
        return FakeRepository(tmp_path, ignored)

    return _make


def _git(cwd: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=cwd, check=True, capture_output=True)


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Initialize a real Git repository with tracked and ignored content.

    Layout:
        .gitignore        ignores *.log, build/, node_modules/
        src/main.py       tracked
        src/debug.log     ignored
        app.log           ignored
        build/out.bin     ignored directory
        node_modules/x/   ignored directory
        notes.txt         untracked, not ignored
    """
    root = tmp_path / "repo"
    root.mkdir()
    _git(root, "init", "-q")
    _git(root, "config", "user.email", "test@example.com")
    _git(root, "config", "user.name", "Test")

    (root / ".gitignore").write_text("*.log\nbuild/\nnode_modules/\n")
    (root / "src").mkdir()
    (root / "src" / "main.py").write_text("print('hi')\n")
    _git(root, "add", ".gitignore", "src/main.py")
    _git(root, "commit", "-q", "-m", "initial")

    (root / "src" / "debug.log").write_text("debug")
    (root / "app.log").write_text("log")
    (root / "build").mkdir()
    (root / "build" / "out.bin").write_bytes(b"\x00\x01")
    (root / "node_modules" / "x").mkdir(parents=True)
    (root / "node_modules" / "x" / "index.js").write_text("module.exports = 1\n")
    (root / "notes.txt").write_text("keep me")

    return root.resolve()
