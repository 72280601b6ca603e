"""
Diff files node: computes the files changed relative to a base reference.

Two modes are supported. Without an author the working tree is diffed
against the base. With an author only the files touched by that author's
non-merge commits in base..HEAD are returned.
"""

from typing import List, Optional

from loguru import logger

from branchdiff.git_cli import is_fatal_line, run_git
from branchdiff.models.config import DEFAULT_BASE
from branchdiff.models.state import PickerState

# Added, copied, modified and renamed files; deletions have nothing to open.
AUTHOR_DIFF_FILTER = "ACMR"


def _collect_log_files(lines: List[str]) -> Optional[List[str]]:
    """Flatten per-commit file lists from git log into unique paths."""
    seen = set()
    files = []
    for line in lines:
        if is_fatal_line(line):
            logger.debug(f"git log reported an error: {line}")
            return None
        if not line or line in seen:
            continue
        seen.add(line)
        files.append(line)
    return files or None


def _get_author_files(base: str, repo_path: Optional[str], author: str) -> Optional[List[str]]:
    """Files changed by the author's commits in base..HEAD, in first-seen order."""
    result = run_git(
        [
            "log",
            f"--author={author}",
            "--no-merges",
            f"--diff-filter={AUTHOR_DIFF_FILTER}",
            "--name-only",
            "--pretty=format:",
            "--end-of-options",
            f"{base}..HEAD",
            "--",
        ],
        repo_path=repo_path,
    )
    if result.status != 0:
        return None
    return _collect_log_files(result.lines)


def get_diff_files(
    base: str, repo_path: Optional[str] = None, author: Optional[str] = None
) -> Optional[List[str]]:
    """Return the files changed against base, or None when there are none.

    An empty list is never returned. A base git cannot resolve is reported
    the same way as no changes.
    """
    if author:
        return _get_author_files(base, repo_path, author)

    result = run_git(["diff", "--name-only", "--end-of-options", base, "--"], repo_path=repo_path)
    if result.failed or not result.lines:
        return None
    return result.lines


def get_file_diff(base: str, path: str, repo_path: Optional[str] = None) -> Optional[str]:
    """Return the patch for a single file against base, for preview panes."""
    result = run_git(["--no-pager", "diff", "--end-of-options", base, "--", path], repo_path=repo_path)
    if result.failed or not result.lines:
        return None
    return result.text


def diff_files_node(state: PickerState) -> PickerState:
    """Resolve the changed files for the picker."""
    logger.info("Executing Diff Files Node")

    base = state.get("base") or DEFAULT_BASE
    files = get_diff_files(base, state.get("repo_path"), state.get("author"))

    if files is None:
        return {"files": None, "notice": f"No diff against {base}"}

    logger.info(f"Found {len(files)} changed files against {base}")
    return {"files": files}
