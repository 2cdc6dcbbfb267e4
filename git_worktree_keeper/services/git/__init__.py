"""Git-related services for git-worktree-keeper."""

from .runner import GitRunner, ProcessResult, ProcessRunner
from .repository import is_git_repository, find_repository_root
from .worktrees import WorktreeService, parse_worktree_porcelain

__all__ = [
    "GitRunner",
    "ProcessResult",
    "ProcessRunner",
    "is_git_repository",
    "find_repository_root",
    "WorktreeService",
    "parse_worktree_porcelain",
]
