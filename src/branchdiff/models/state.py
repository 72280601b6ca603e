"""
Picker workflow state shared between the branchdiff nodes.
"""

from typing import List, Optional, TypedDict


class PickerState(TypedDict, total=False):
    """Values passed between the toplevel, identity and diff files nodes.

    Every key may be missing; each node returns only the keys it sets.
    """

    # Inputs
    cwd: Optional[str]  # Directory to resolve the repository from
    base: str  # Base reference the diff is computed against
    mine: bool  # Restrict results to the current user's commits
    author: Optional[str]  # Explicit author filter, overrides `mine`

    # Toplevel Node Output
    repo_path: Optional[str]  # Absolute repository root

    # Diff Files Node Output
    files: Optional[List[str]]  # Changed files, None when there is nothing to show

    # Message for the user when the workflow produced no files
    notice: Optional[str]
