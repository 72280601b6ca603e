"""Shared fixtures for building throwaway git repositories."""

from pathlib import Path
from typing import Callable, Dict, Optional

import pytest
from git import Actor, Repo


@pytest.fixture(autouse=True)
def isolated_git_config(tmp_path_factory, monkeypatch):
    """Keep the user's global and system git config out of the tests."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(home / ".gitconfig"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    # Commit identity for helpers; `git config user.name` does not read these.
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@test.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@test.com")
    # setenv first so values a test loads from a .env file are removed afterwards
    for name in ("BRANCHDIFF_BASE", "BRANCHDIFF_REPO_PATH", "BRANCHDIFF_AUTHOR", "BRANCHDIFF_MINE"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def temp_git_repo(tmp_path) -> Repo:
    """Create a repository holding a single empty initial commit."""
    repo_path = tmp_path / "repo"
    repo_path.mkdir()
    repo = Repo.init(repo_path)
    repo.git.commit("--allow-empty", "-m", "init")
    return repo


@pytest.fixture
def make_commit() -> Callable:
    """Return a helper that writes files and commits them, optionally as a given author."""

    def _make_commit(repo: Repo, files: Dict[str, str], message: str, author: Optional[Actor] = None):
        paths = []
        for relative, content in files.items():
            path = Path(repo.working_dir) / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
            paths.append(str(path))
        repo.index.add(paths)
        return repo.index.commit(message, author=author, committer=author)

    return _make_commit
