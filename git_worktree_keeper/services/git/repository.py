"""Repository detection"""

import os

from git_worktree_keeper.services.git.runner import PathLike, ProcessRunner
from git_worktree_keeper.logging_config import get_logger

logger = get_logger(__name__)


def is_git_repository(runner: ProcessRunner, path: PathLike) -> bool:
    """Check whether ``path`` is inside a git repository.

    A path that is not an existing directory is never a repository; no
    process is spawned for it.
    """
    if not os.path.isdir(path):
        logger.debug(f"{path} is not a directory")
        return False
    result = runner.run(["rev-parse", "--git-dir"], path)
    return result.ok


def find_repository_root(runner: ProcessRunner, path: PathLike) -> str:
    """Return the top level of the working tree containing ``path``.

    Falls back to ``path`` itself when git cannot tell (not a repository,
    or a bare repository without a working tree).
    """
    fallback = os.path.abspath(path)
    if not os.path.isdir(path):
        return fallback
    result = runner.run(["rev-parse", "--show-toplevel"], path)
    if result.ok and result.stdout:
        return result.stdout
    return fallback
