"""Custom exceptions for git-worktree-keeper"""

from typing import Optional


class WorktreeKeeperError(Exception):
    """Base exception for all git-worktree-keeper errors."""
    pass


class GitOperationError(WorktreeKeeperError):
    """Exception raised when a git command exits non-zero."""

    def __init__(self, operation: str, message: Optional[str] = None):
        self.operation = operation
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class WorktreeNotFoundError(WorktreeKeeperError):
    """Exception raised when a reference matches no worktree."""

    def __init__(self, target: str):
        self.target = target
        super().__init__(
            f"Worktree '{target}' not found. Use list to see available worktrees."
        )
