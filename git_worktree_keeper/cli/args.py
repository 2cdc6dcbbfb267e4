"""Command-line argument parsing for git-worktree-keeper."""

import argparse
from typing import Optional, Sequence

from git_worktree_keeper.__version__ import __version__
from git_worktree_keeper.constants import DEFAULT_BRANCH_PREFIX


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per operation."""
    parser = argparse.ArgumentParser(
        prog="git-worktree-keeper",
        description="Create, list, remove and switch between git worktrees",
        epilog="switch prints a directory-change directive line for host shells to act on.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("--version", action="version", version=f"git-worktree-keeper {__version__}")
    parser.add_argument(
        "--repo",
        metavar="PATH",
        default=None,
        help="Repository to operate on (default: the one containing the current directory)",
    )
    parser.add_argument(
        "--branch-prefix",
        default=DEFAULT_BRANCH_PREFIX,
        help=f"Namespace for created branches (default: {DEFAULT_BRANCH_PREFIX})",
    )
    parser.add_argument(
        "--strict-listing",
        action="store_true",
        help="Report 'git worktree list' failures instead of treating them as no worktrees",
    )
    parser.add_argument("--log-file", metavar="PATH", default=None, help="Also write logs to PATH")

    subparsers = parser.add_subparsers(dest="operation", metavar="OPERATION")
    subparsers.required = True

    subparsers.add_parser("list", help="List all worktrees")

    create = subparsers.add_parser("create", help="Create a worktree on a new branch")
    create.add_argument("branch", help="Branch name (prefixed with the branch namespace)")
    create.add_argument("--base", default=None, help="Base branch or commit (default: HEAD)")
    create.add_argument(
        "--path",
        default=None,
        help="Target directory, absolute or relative to the repository's parent directory",
    )

    remove = subparsers.add_parser("remove", help="Remove a worktree by index or path")
    remove.add_argument("target", help="Index from 'list', or a path / path suffix")
    remove.add_argument(
        "-f", "--force", action="store_true", help="Remove even with uncommitted changes"
    )

    switch = subparsers.add_parser("switch", help="Switch to a worktree by index or path")
    switch.add_argument("target", help="Index from 'list', or a path / path suffix")

    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    return build_parser().parse_args(argv)
