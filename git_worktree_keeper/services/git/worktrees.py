"""Worktree listing and mutation service for git-worktree-keeper."""

from dataclasses import replace
from typing import Any, Dict, List, Optional

from git_worktree_keeper.exceptions import GitOperationError
from git_worktree_keeper.constants import (
    HEADS_PREFIX,
    PORCELAIN_BARE,
    PORCELAIN_BRANCH,
    PORCELAIN_HEAD,
    PORCELAIN_WORKTREE,
)
from git_worktree_keeper.models.worktree import WorktreeEntry
from git_worktree_keeper.services.git.runner import PathLike, ProcessResult, ProcessRunner
from git_worktree_keeper.logging_config import get_logger

logger = get_logger(__name__)


def _build_entry(fields: Dict[str, Any]) -> WorktreeEntry:
    return WorktreeEntry(
        path=fields["path"],
        branch=fields.get("branch"),
        commit=fields.get("commit"),
        is_bare=fields.get("is_bare", False),
    )


def parse_worktree_porcelain(output: str) -> List[WorktreeEntry]:
    """Parse `git worktree list --porcelain` output.

    Format (one block per worktree, blocks separated by blank lines):
        worktree /path/to/worktree
        HEAD <commit sha>
        branch refs/heads/<name>      (or "detached")
        bare                          (bare repository record only)

    Unknown lines such as ``locked`` or ``prunable`` are ignored. Entries
    keep the order git printed them in and the first one is the main
    worktree.

    Args:
        output: Raw porcelain text

    Returns:
        List of WorktreeEntry objects
    """
    entries: List[WorktreeEntry] = []
    current: Dict[str, Any] = {}

    for line in output.splitlines():
        if line.startswith(PORCELAIN_WORKTREE):
            if current.get("path"):
                entries.append(_build_entry(current))
            current = {"path": line[len(PORCELAIN_WORKTREE):].strip()}
        elif line.startswith(PORCELAIN_BRANCH):
            branch_ref = line[len(PORCELAIN_BRANCH):].strip()
            if branch_ref.startswith(HEADS_PREFIX):
                branch_ref = branch_ref[len(HEADS_PREFIX):]
            current["branch"] = branch_ref
        elif line.startswith(PORCELAIN_HEAD):
            current["commit"] = line[len(PORCELAIN_HEAD):].strip()
        elif line.strip() == PORCELAIN_BARE:
            current["is_bare"] = True
        elif not line.strip():
            # Blank line ends the block
            if current.get("path"):
                entries.append(_build_entry(current))
            current = {}

    # Porcelain output may end without a trailing blank line
    if current.get("path"):
        entries.append(_build_entry(current))

    if entries:
        entries[0] = replace(entries[0], is_main=True)

    return entries


class WorktreeService:
    """Service for reading and changing the worktrees of one repository.

    Every call goes to git; nothing is cached between calls.
    """

    def __init__(self, repo_path: PathLike, runner: ProcessRunner):
        """Initialize the worktree service.

        Args:
            repo_path: Root of the repository's main or current worktree
            runner: Process runner used for every git invocation
        """
        self.repo_path = repo_path
        self.runner = runner

    def _git(self, *args: str) -> ProcessResult:
        return self.runner.run(list(args), self.repo_path)

    def list_worktrees(self, strict: bool = False) -> List[WorktreeEntry]:
        """Get all worktrees of the repository.

        Args:
            strict: Raise instead of returning an empty list when git fails

        Returns:
            List of WorktreeEntry objects, main worktree first

        Raises:
            GitOperationError: If ``strict`` and the list command failed
        """
        result = self._git("worktree", "list", "--porcelain")
        if not result.ok:
            logger.warning(f"Could not list worktrees: {result.error_output}")
            if strict:
                raise GitOperationError("worktree list", result.error_output)
            return []

        entries = parse_worktree_porcelain(result.stdout)
        logger.debug(f"Found {len(entries)} worktrees")
        for entry in entries:
            logger.debug(f"  {entry}")
        return entries

    def branch_exists(self, branch_name: str) -> bool:
        """Check whether a local branch exists."""
        result = self._git("show-ref", "--verify", "--quiet", f"{HEADS_PREFIX}{branch_name}")
        return result.ok

    def add_worktree(self, path: str, branch_name: str, base: str) -> ProcessResult:
        """Create a worktree at ``path`` on a new branch started from ``base``."""
        result = self._git("worktree", "add", "-b", branch_name, path, base)
        if result.ok:
            logger.info(f"Created worktree at {path} on {branch_name} from {base}")
        else:
            logger.error(f"Failed to create worktree at {path}: {result.error_output}")
        return result

    def remove_worktree(self, path: str, force: bool = False) -> ProcessResult:
        """Remove the worktree at ``path``.

        Args:
            path: Path to the worktree directory
            force: Remove even if the worktree has local changes
        """
        args = ["worktree", "remove"]
        if force:
            args.append("--force")
        args.append(path)

        result = self._git(*args)
        if result.ok:
            logger.info(f"Removed worktree at {path}")
        else:
            logger.warning(f"Failed to remove worktree at {path}: {result.error_output}")
        return result

    def delete_branch(self, branch_name: str) -> bool:
        """Force-delete a local branch. Returns True on success."""
        result = self._git("branch", "-D", branch_name)
        if not result.ok:
            logger.debug(f"Could not delete branch {branch_name}: {result.error_output}")
            return False
        logger.info(f"Deleted branch {branch_name}")
        return True
