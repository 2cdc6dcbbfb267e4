"""Single entry point routing an operation name to its handler"""

from typing import Optional

from git_worktree_keeper.constants import OPERATIONS
from git_worktree_keeper.formatters import render_result
from git_worktree_keeper.models.result import ErrorKind, OperationResult
from git_worktree_keeper.services.worktree_manager import WorktreeManager
from git_worktree_keeper.logging_config import get_logger

logger = get_logger(__name__)

# Arguments each operation cannot run without
REQUIRED_ARGUMENTS = {
    "list": (),
    "create": ("branch",),
    "remove": ("target",),
    "switch": ("target",),
}


def dispatch_result(
    manager: WorktreeManager,
    operation: str,
    branch: Optional[str] = None,
    target: Optional[str] = None,
    base: Optional[str] = None,
    path: Optional[str] = None,
    force: Optional[bool] = False,
) -> OperationResult:
    """Validate arguments for ``operation`` and run its handler.

    Only a real ``True`` forces a removal; loosely typed values such as
    the string "false" do not.
    """
    if operation not in OPERATIONS:
        return OperationResult.failure(
            ErrorKind.UNKNOWN_OPERATION, f"Unknown operation: {operation}"
        )

    supplied = {"branch": branch, "target": target}
    for name in REQUIRED_ARGUMENTS[operation]:
        if not supplied[name]:
            return OperationResult.failure(
                ErrorKind.INVALID_ARGUMENT, f"Error: {name} is required for {operation} operation"
            )

    logger.debug(f"Dispatching {operation}")
    if operation == "list":
        return manager.list()
    if operation == "create":
        return manager.create(branch, base=base, path=path)
    if operation == "remove":
        return manager.remove(target, force=force is True)
    return manager.switch(target)


def dispatch(
    manager: WorktreeManager,
    operation: str,
    branch: Optional[str] = None,
    target: Optional[str] = None,
    base: Optional[str] = None,
    path: Optional[str] = None,
    force: Optional[bool] = False,
) -> str:
    """Run ``operation`` and render its result as a string.

    Missing arguments and unknown operations come back as error strings;
    only a failure to spawn git raises.
    """
    result = dispatch_result(
        manager, operation, branch=branch, target=target, base=base, path=path, force=force
    )
    return render_result(result, manager.config.cd_directive)
