"""Worktree operations: list, create, remove and switch"""

import os
from typing import List, Optional, Union

from git_worktree_keeper.config import Config
from git_worktree_keeper.constants import DEFAULT_BRANCH_PREFIX, DIRTY_MARKERS
from git_worktree_keeper.exceptions import GitOperationError, WorktreeNotFoundError
from git_worktree_keeper.models.result import ErrorKind, OperationResult
from git_worktree_keeper.models.worktree import WorktreeEntry
from git_worktree_keeper.services.git.repository import is_git_repository
from git_worktree_keeper.services.git.runner import GitRunner, PathLike, ProcessRunner
from git_worktree_keeper.services.git.worktrees import WorktreeService
from git_worktree_keeper.services.resolver import resolve_target
from git_worktree_keeper.logging_config import get_logger

logger = get_logger(__name__)

NOT_A_REPOSITORY = "Error: Not a git repository"
NO_WORKTREES = "No worktrees found"


def normalize_branch_name(branch: str, prefix: str = DEFAULT_BRANCH_PREFIX) -> str:
    """Prefix ``branch`` with the tool's namespace unless it already has it."""
    if branch.startswith(prefix):
        return branch
    return f"{prefix}{branch}"


def resolve_target_path(repo_root: PathLike, branch: str, path: Optional[str] = None) -> str:
    """Compute where a new worktree goes.

    An absolute ``path`` is used as-is, a relative one is taken from the
    directory containing the repository root. Without ``path`` the worktree
    is placed beside the repository, named after ``branch``.
    """
    parent = os.path.dirname(os.path.abspath(repo_root))
    if path:
        if os.path.isabs(path):
            return path
        return os.path.normpath(os.path.join(parent, path))
    return os.path.normpath(os.path.join(parent, branch))


def is_dirty_error(message: str) -> bool:
    """Check whether a removal error means the worktree has local changes.

    Only stderr is inspected; git writes the refusal there.
    """
    return any(marker in message for marker in DIRTY_MARKERS)


class WorktreeManager:
    """Handlers for the worktree operations of one repository.

    Every handler re-reads git's worktree metadata; nothing is cached.
    Handlers return OperationResult and never raise for expected failures.
    Only a failure to spawn git propagates.
    """

    def __init__(
        self,
        repo_root: PathLike,
        runner: Optional[ProcessRunner] = None,
        config: Union[Config, dict, None] = None,
    ):
        """Initialize the manager.

        Args:
            repo_root: Root of the repository the operations act on
            runner: Process runner; defaults to a GitPython-backed runner
            config: Config object or dictionary
        """
        if config is None:
            config = Config()
        elif isinstance(config, dict):
            config = Config.from_dict(config)
        self.config = config
        self.repo_root = os.fspath(repo_root)
        self.runner = runner or GitRunner(config.git_executable)
        self.worktrees = WorktreeService(self.repo_root, self.runner)

    def _is_repository(self) -> bool:
        return is_git_repository(self.runner, self.repo_root)

    def _load_entries(self) -> List[WorktreeEntry]:
        return self.worktrees.list_worktrees(strict=self.config.strict_listing)

    def list(self) -> OperationResult:
        """List all worktrees, numbered from 1."""
        if not self._is_repository():
            return OperationResult.failure(ErrorKind.NOT_A_REPOSITORY, NOT_A_REPOSITORY)

        try:
            entries = self._load_entries()
        except GitOperationError as e:
            return OperationResult.failure(
                ErrorKind.GIT_FAILED, f"Error listing worktrees: {e.message}"
            )

        if not entries:
            return OperationResult.success(NO_WORKTREES)

        lines = ["Worktrees:"]
        lines.extend(f"{i}. {entry}" for i, entry in enumerate(entries, start=1))
        return OperationResult.success("\n".join(lines))

    def create(
        self,
        branch: str,
        base: Optional[str] = None,
        path: Optional[str] = None,
    ) -> OperationResult:
        """Create a worktree on a new, namespaced branch.

        Args:
            branch: Branch name; prefixed with the configured namespace
            base: Branch or commit to start from (defaults to HEAD)
            path: Target directory, absolute or relative to the
                repository's parent directory
        """
        if not self._is_repository():
            return OperationResult.failure(ErrorKind.NOT_A_REPOSITORY, NOT_A_REPOSITORY)
        if not branch:
            return OperationResult.failure(
                ErrorKind.INVALID_ARGUMENT, "Error: branch is required for create operation"
            )

        branch_name = normalize_branch_name(branch, self.config.branch_prefix)
        base = base or self.config.default_base

        if self.worktrees.branch_exists(branch_name):
            return OperationResult.failure(
                ErrorKind.BRANCH_EXISTS, f"Error: Branch '{branch_name}' already exists"
            )

        target = resolve_target_path(self.repo_root, branch, path)
        if os.path.lexists(target):
            return OperationResult.failure(
                ErrorKind.PATH_EXISTS, f"Error: Path '{target}' already exists"
            )

        result = self.worktrees.add_worktree(target, branch_name, base)
        if not result.ok:
            return OperationResult.failure(
                ErrorKind.GIT_FAILED, f"Error creating worktree: {result.error_output}"
            )

        return OperationResult.success(
            f"Created worktree at: {target}\nBranch: {branch_name}\nBase: {base}"
        )

    def _resolve(self, target: str, operation: str):
        """Shared lookup for remove and switch.

        Returns the entry, or an OperationResult describing why there is none.
        """
        if not self._is_repository():
            return OperationResult.failure(ErrorKind.NOT_A_REPOSITORY, NOT_A_REPOSITORY)
        if not target:
            return OperationResult.failure(
                ErrorKind.INVALID_ARGUMENT, f"Error: target is required for {operation} operation"
            )

        try:
            entries = self._load_entries()
        except GitOperationError as e:
            return OperationResult.failure(
                ErrorKind.GIT_FAILED, f"Error listing worktrees: {e.message}"
            )
        if not entries:
            return OperationResult.failure(ErrorKind.NOT_FOUND, NO_WORKTREES)

        try:
            return resolve_target(entries, target)
        except WorktreeNotFoundError as e:
            return OperationResult.failure(ErrorKind.NOT_FOUND, f"Error: {e}")

    def remove(self, target: str, force: bool = False) -> OperationResult:
        """Remove a worktree and, best effort, its branch.

        Args:
            target: 1-based index from ``list`` or a path / path suffix
            force: Remove even with uncommitted changes
        """
        entry = self._resolve(target, "remove")
        if isinstance(entry, OperationResult):
            return entry

        if entry.is_main:
            return OperationResult.failure(
                ErrorKind.MAIN_WORKTREE_PROTECTED, "Error: Cannot remove the main worktree"
            )

        result = self.worktrees.remove_worktree(entry.path, force=force)
        if not result.ok:
            if not force and is_dirty_error(result.stderr):
                return OperationResult.failure(
                    ErrorKind.DIRTY_WORKTREE,
                    "Error: Worktree has uncommitted changes. Use force=true to remove anyway.",
                )
            return OperationResult.failure(
                ErrorKind.GIT_FAILED, f"Error removing worktree: {result.error_output}"
            )

        # The worktree is gone; a failed branch delete does not change that
        if entry.branch:
            self.worktrees.delete_branch(entry.branch)

        return OperationResult.success(f"Removed worktree: {entry.path}")

    def switch(self, target: str) -> OperationResult:
        """Resolve a worktree and ask the host to change into it.

        The returned result carries ``cd_path``; the host reads the rendered
        directive because this process cannot change its caller's directory.
        """
        entry = self._resolve(target, "switch")
        if isinstance(entry, OperationResult):
            return entry

        if not os.path.exists(entry.path):
            return OperationResult.failure(
                ErrorKind.PATH_MISSING, f"Error: Worktree path '{entry.path}' does not exist"
            )

        logger.info(f"Switching to worktree {entry.path}")
        return OperationResult.success(f"Switching to worktree: {entry.path}", cd_path=entry.path)
