"""Git process runner"""

import os
from dataclasses import dataclass
from typing import Protocol, Sequence, Union

import git

from git_worktree_keeper.logging_config import get_logger

logger = get_logger(__name__)

PathLike = Union[str, os.PathLike]


@dataclass(frozen=True)
class ProcessResult:
    """Captured output of a finished git command."""

    stdout: str
    stderr: str
    exit_code: int

    @property
    def ok(self) -> bool:
        return self.exit_code == 0

    @property
    def error_output(self) -> str:
        """Stderr, falling back to stdout when git wrote nothing there."""
        return self.stderr or self.stdout


class ProcessRunner(Protocol):
    """Runs a git subcommand in a working directory.

    Implementations return a ProcessResult for any exit status and raise
    only when the process cannot be started at all.
    """

    def run(self, args: Sequence[str], cwd: PathLike) -> ProcessResult:
        ...


class GitRunner:
    """ProcessRunner backed by GitPython's command executor."""

    def __init__(self, git_executable: str = "git"):
        self.git_executable = git_executable

    def run(self, args: Sequence[str], cwd: PathLike) -> ProcessResult:
        """Run ``git <args>`` in ``cwd``.

        Args:
            args: Git arguments, without the executable
            cwd: Working directory for the command

        Returns:
            ProcessResult with trimmed stdout/stderr and the exit code

        Raises:
            git.exc.GitCommandNotFound: If git cannot be spawned (missing
                binary or working directory)
        """
        command = [self.git_executable, *args]
        logger.debug(f"Running {' '.join(command)} in {cwd}")
        status, stdout, stderr = git.Git(os.fspath(cwd)).execute(
            command,
            with_extended_output=True,
            with_exceptions=False,
        )
        result = ProcessResult(stdout=stdout.strip(), stderr=stderr.strip(), exit_code=status)
        if not result.ok:
            logger.debug(f"git {args[0] if args else ''} exited {status}: {result.error_output}")
        return result
