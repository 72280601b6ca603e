#!/usr/bin/env python3
"""
examples/picker_demo.py

Demonstrates the branchdiff queries a file picker is built on: resolve the
repository, read the current user, list the changed files and preview the
diff of the first one.
"""

import argparse
import os
import sys

from branchdiff.nodes.diff_files_node import get_diff_files, get_file_diff
from branchdiff.nodes.identity_node import get_git_user
from branchdiff.nodes.toplevel_node import get_toplevel


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Demonstrate branchdiff's repository queries")
    parser.add_argument(
        "--cwd",
        type=str,
        default=os.getcwd(),
        help="Directory inside a Git repository (default: current directory)",
    )
    parser.add_argument(
        "--base",
        type=str,
        default="origin/main",
        help="Base reference to compare against (default: origin/main)",
    )
    parser.add_argument("--mine", action="store_true", help="Only show files from your own commits")
    return parser.parse_args()


def main():
    """Run the picker demo."""
    args = parse_args()

    toplevel = get_toplevel(args.cwd)
    if toplevel is None:
        print(f"{args.cwd} is not inside a git repository", file=sys.stderr)
        return 1
    print(f"Repository: {toplevel}")

    author = None
    if args.mine:
        author = get_git_user(toplevel)
        print(f"Author filter: {author or 'none (user.name not set)'}")

    files = get_diff_files(args.base, toplevel, author)
    if files is None:
        print(f"No diff against {args.base}")
        return 0

    print(f"\n{len(files)} files changed against {args.base}:")
    for path in files:
        print(f"  - {path}")

    preview = get_file_diff(args.base, files[0], toplevel)
    print(f"\nPreview of {files[0]}:\n{'=' * 80}")
    print(preview or "(no diff)")

    return 0


if __name__ == "__main__":
    sys.exit(main())
