"""
Toplevel node: locates the root of the git repository enclosing a directory.
"""

from typing import Optional

from loguru import logger

from branchdiff.git_cli import run_git
from branchdiff.models.state import PickerState


def get_toplevel(start_path: Optional[str] = None) -> Optional[str]:
    """Return the absolute repository root containing start_path.

    start_path defaults to the process working directory. Returns None when
    the directory is not inside a repository.
    """
    result = run_git(["rev-parse", "--show-toplevel"], repo_path=start_path)
    if result.failed or not result.lines:
        logger.debug(f"No repository found from {start_path or 'working directory'}")
        return None
    return result.lines[0]


def toplevel_node(state: PickerState) -> PickerState:
    """Resolve the repository root unless the caller already supplied one."""
    logger.info("Executing Toplevel Node")

    if state.get("repo_path"):
        return {"repo_path": state["repo_path"]}

    repo_path = get_toplevel(state.get("cwd"))
    if repo_path is None:
        return {"repo_path": None, "notice": "Not inside a git repository"}

    logger.info(f"Repository root: {repo_path}")
    return {"repo_path": repo_path}
