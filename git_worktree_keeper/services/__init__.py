"""Services for git-worktree-keeper."""

from .resolver import parse_reference, resolve_reference, resolve_target
from .worktree_manager import WorktreeManager, normalize_branch_name, resolve_target_path

__all__ = [
    "parse_reference",
    "resolve_reference",
    "resolve_target",
    "WorktreeManager",
    "normalize_branch_name",
    "resolve_target_path",
]
