"""Data models for git-worktree-keeper."""

from .worktree import WorktreeEntry, ByIndex, ByPath, WorktreeRef
from .result import ErrorKind, OperationResult

__all__ = [
    "WorktreeEntry",
    "ByIndex",
    "ByPath",
    "WorktreeRef",
    "ErrorKind",
    "OperationResult",
]
