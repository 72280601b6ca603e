"""Thin wrapper around the git command line used by every branchdiff query."""

import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from git import Git
from git.exc import GitCommandNotFound
from loguru import logger

FATAL_PREFIX = "fatal:"

# Exit status reported when git could not be started at all.
NOT_FOUND_STATUS = 127


@dataclass
class GitOutput:
    """Outcome of a single git invocation."""

    status: int
    lines: List[str] = field(default_factory=list)
    stderr: str = ""

    @property
    def failed(self) -> bool:
        """Check exit status first, then fall back to the fatal-line heuristic."""
        if self.status != 0:
            return True
        return bool(self.lines) and is_fatal_line(self.lines[0])

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def is_fatal_line(line: str) -> bool:
    """Return True if the line carries git's conventional fatal-error prefix."""
    return line.startswith(FATAL_PREFIX)


def format_command(args: Sequence[str], repo_path: Optional[str] = None) -> str:
    """Render an invocation as a shell-quoted command line."""
    command = ["git"]
    if repo_path is not None:
        command += ["-C", str(repo_path)]
    return shlex.join(command + list(args))


def run_git(args: Sequence[str], repo_path: Optional[str] = None) -> GitOutput:
    """Run one git command and capture its exit status and output.

    Arguments are handed to git as a vector, so user supplied values never
    pass through a shell. Failures are reported through the returned
    GitOutput instead of being raised.
    """
    command_line = format_command(args, repo_path)

    if repo_path is not None and not Path(repo_path).is_dir():
        logger.debug(f"Not running {command_line}: {repo_path} is not a directory")
        return GitOutput(status=128, stderr=f"fatal: cannot change to '{repo_path}'")

    try:
        status, stdout, stderr = Git(repo_path).execute(
            [Git.GIT_PYTHON_GIT_EXECUTABLE or "git", *args],
            with_extended_output=True,
            with_exceptions=False,
        )
    except GitCommandNotFound as e:
        logger.debug(f"Could not run {command_line}: {e}")
        return GitOutput(status=NOT_FOUND_STATUS, stderr=str(e))

    logger.debug(f"{command_line} exited with status {status}")
    return GitOutput(status=status, lines=stdout.splitlines(), stderr=stderr)
