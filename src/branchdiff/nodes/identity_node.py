"""Identity node for reading the git user a picker run is filtered on."""

from typing import Optional

from loguru import logger

from branchdiff.git_cli import run_git
from branchdiff.models.state import PickerState


def get_git_user(repo_path: Optional[str] = None) -> Optional[str]:
    """Return the configured user.name, or None when it is unset."""
    result = run_git(["config", "user.name"], repo_path=repo_path)
    if result.status != 0:
        return None

    user = result.text.strip()
    return user or None


def identity_node(state: PickerState) -> PickerState:
    """Fill in the author filter from the repository identity when requested."""
    logger.info("Executing Identity Node")

    author = state.get("author")
    if author or not state.get("mine"):
        return {"author": author}

    author = get_git_user(state.get("repo_path"))
    if author is None:
        return {"author": None, "notice": "No git user.name configured"}

    logger.info(f"Filtering on commits by {author}")
    return {"author": author}
