"""Worktree data models."""

from dataclasses import dataclass
from typing import Optional, Union

from git_worktree_keeper.constants import DETACHED_LABEL, MAIN_MARKER


@dataclass(frozen=True)
class WorktreeEntry:
    """A worktree as reported by `git worktree list --porcelain`."""

    path: str
    branch: Optional[str] = None  # Short name, None for a detached HEAD
    commit: Optional[str] = None
    is_bare: bool = False
    is_main: bool = False  # First entry of the list

    @property
    def is_detached(self) -> bool:
        return self.branch is None and not self.is_bare

    @property
    def display_branch(self) -> str:
        return self.branch or DETACHED_LABEL

    def __str__(self) -> str:
        main_marker = MAIN_MARKER if self.is_main else ""
        return f"[{self.display_branch}]{main_marker} {self.path}"


@dataclass(frozen=True)
class ByIndex:
    """Reference to a worktree by its 1-based position in the list."""

    index: int
    raw: str  # Original text, used for path matching when out of range


@dataclass(frozen=True)
class ByPath:
    """Reference to a worktree by full path or path suffix."""

    fragment: str


WorktreeRef = Union[ByIndex, ByPath]
