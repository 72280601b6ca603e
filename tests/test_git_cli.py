"""Tests for the git command wrapper."""

import pytest
from unittest.mock import MagicMock, patch

from git.exc import GitCommandNotFound

from branchdiff.git_cli import GitOutput, format_command, is_fatal_line, run_git


def test_format_command_scopes_to_repo():
    assert format_command(["diff", "--name-only", "origin/main"], "/my/repo") == (
        "git -C /my/repo diff --name-only origin/main"
    )


def test_format_command_omits_repo_when_none():
    assert format_command(["config", "user.name"]) == "git config user.name"


def test_format_command_escapes_author():
    """Free-form author names must be shell quoted in the rendered command."""
    rendered = format_command(["log", "--author=O'Brien; rm -rf /"])

    assert rendered == "git log '--author=O'\"'\"'Brien; rm -rf /'"


@pytest.mark.parametrize(
    "output,expected",
    [
        (GitOutput(status=0, lines=["file.py"]), False),
        (GitOutput(status=0, lines=[]), False),
        (GitOutput(status=128, lines=[]), True),
        (GitOutput(status=0, lines=["fatal: bad revision 'origin/main'"]), True),
        (GitOutput(status=0, lines=["file.py", "fatal.txt"]), False),
        (GitOutput(status=0, lines=["fatal.py"]), False),
    ],
)
def test_git_output_failed(output, expected):
    """Exit status wins; the fatal prefix is only checked on the first line."""
    assert output.failed is expected


def test_is_fatal_line():
    assert is_fatal_line("fatal: not a git repository")
    assert not is_fatal_line("src/fatal.py")
    assert not is_fatal_line("fatal.py")
    assert not is_fatal_line("fatal_errors.md")


def test_run_git_in_real_repo(temp_git_repo):
    result = run_git(["rev-parse", "--is-inside-work-tree"], repo_path=temp_git_repo.working_dir)

    assert result.status == 0
    assert result.lines == ["true"]
    assert not result.failed


def test_run_git_reports_non_zero_status(temp_git_repo):
    result = run_git(["rev-parse", "--verify", "no-such-branch"], repo_path=temp_git_repo.working_dir)

    assert result.status != 0
    assert result.failed


def test_run_git_missing_directory(tmp_path):
    result = run_git(["status"], repo_path=str(tmp_path / "missing"))

    assert result.status == 128
    assert result.failed
    assert result.stderr.startswith("fatal")


def test_run_git_without_git_executable():
    """A missing git binary is reported as a failed result, not raised."""
    fake_git = MagicMock()
    fake_git.execute.side_effect = GitCommandNotFound("git", OSError("No such file or directory"))

    with patch("branchdiff.git_cli.Git", return_value=fake_git):
        result = run_git(["status"])

    assert result.status == 127
    assert result.failed
