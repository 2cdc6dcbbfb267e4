"""Operation result model and error kinds"""
from enum import Enum
from dataclasses import dataclass
from typing import Optional


class ErrorKind(Enum):
    """Why an operation failed."""
    NOT_A_REPOSITORY = "not-a-repository"
    INVALID_ARGUMENT = "invalid-argument"
    UNKNOWN_OPERATION = "unknown-operation"
    BRANCH_EXISTS = "branch-exists"
    PATH_EXISTS = "path-exists"
    NOT_FOUND = "not-found"
    MAIN_WORKTREE_PROTECTED = "main-worktree-protected"
    DIRTY_WORKTREE = "dirty-worktree"  # Retry with force
    PATH_MISSING = "path-missing"
    GIT_FAILED = "git-failed"


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a worktree operation.

    ``message`` is the human-readable text. ``cd_path`` is set only by a
    successful switch and is rendered as a directory-change directive.
    """
    ok: bool
    message: str
    error_kind: Optional[ErrorKind] = None
    cd_path: Optional[str] = None

    @classmethod
    def success(cls, message: str, cd_path: Optional[str] = None) -> "OperationResult":
        return cls(ok=True, message=message, cd_path=cd_path)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "OperationResult":
        return cls(ok=False, message=message, error_kind=kind)
