"""branchdiff picker workflow using LangGraph for orchestration."""

import argparse
import os
import sys
from typing import List, Optional

from langgraph.graph import END, StateGraph
from loguru import logger
from pydantic import ValidationError

from branchdiff.models.config import PickerConfig, load_config
from branchdiff.models.state import PickerState
from branchdiff.nodes.diff_files_node import diff_files_node, get_file_diff
from branchdiff.nodes.identity_node import identity_node
from branchdiff.nodes.toplevel_node import get_toplevel, toplevel_node


def _route_after_toplevel(state: PickerState) -> str:
    return "identity_node" if state.get("repo_path") else END


def _route_after_identity(state: PickerState) -> str:
    if state.get("mine") and not state.get("author"):
        return END
    return "diff_files_node"


def create_workflow():
    """Create the picker workflow graph."""
    workflow = StateGraph(PickerState)

    # Add nodes
    workflow.add_node("toplevel_node", toplevel_node)
    workflow.add_node("identity_node", identity_node)
    workflow.add_node("diff_files_node", diff_files_node)

    workflow.set_entry_point("toplevel_node")

    # Define edges
    workflow.add_conditional_edges(
        "toplevel_node", _route_after_toplevel, {"identity_node": "identity_node", END: END}
    )
    workflow.add_conditional_edges(
        "identity_node", _route_after_identity, {"diff_files_node": "diff_files_node", END: END}
    )
    workflow.add_edge("diff_files_node", END)

    return workflow.compile()


def run_workflow(config: PickerConfig, cwd: Optional[str] = None) -> PickerState:
    """Run the picker workflow and return the final state."""
    initial_state: PickerState = {
        "cwd": cwd or os.getcwd(),
        "repo_path": config.repo_path,
        "base": config.base,
        "mine": config.mine,
        "author": config.author,
        "files": None,
        "notice": None,
    }

    app = create_workflow()
    return app.invoke(initial_state)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="branchdiff", description="List files changed against a base reference"
    )
    parser.add_argument("--repo-path", type=str, help="Path to the Git repository (default: enclosing repository)")
    parser.add_argument("--base", type=str, help="Base reference to diff against (default: origin/main)")
    parser.add_argument(
        "--mine",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Only list files changed by your own commits in base..HEAD (--no-mine overrides BRANCHDIFF_MINE)",
    )
    parser.add_argument("--author", type=str, help="Only list files changed by commits from this author")
    parser.add_argument("--show", type=str, metavar="FILE", help="Print the diff of FILE against the base")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    if not args.verbose:
        logger.remove()
        logger.add(sys.stderr, level="INFO")

    try:
        config = load_config(base=args.base, repo_path=args.repo_path, author=args.author, mine=args.mine)
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    if args.show:
        repo_path = config.repo_path or get_toplevel()
        patch = get_file_diff(config.base, args.show, repo_path)
        if patch is None:
            logger.info(f"No diff for {args.show} against {config.base}")
            return 0
        print(patch)
        return 0

    final_state = run_workflow(config)

    if not final_state.get("files"):
        logger.info(final_state.get("notice") or f"No diff against {config.base}")
        return 0

    for path in final_state["files"]:
        print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
