"""Pytest fixtures for git-worktree-keeper tests"""
import tempfile
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

import pytest
import git

from git_worktree_keeper.config import Config
from git_worktree_keeper.services.git.runner import ProcessResult
from git_worktree_keeper.services.worktree_manager import WorktreeManager


class FakeRunner:
    """Scripted ProcessRunner that records every call.

    Commands without a scripted response succeed with empty output.
    """

    def __init__(self):
        self.responses: Dict[Tuple[str, ...], ProcessResult] = {}
        self.calls: List[Tuple[str, ...]] = []

    def set(self, args: Sequence[str], stdout: str = "", stderr: str = "", exit_code: int = 0):
        self.responses[tuple(args)] = ProcessResult(stdout=stdout, stderr=stderr, exit_code=exit_code)

    def set_worktrees(self, porcelain: str):
        self.set(["worktree", "list", "--porcelain"], stdout=porcelain)

    def run(self, args, cwd):
        key = tuple(args)
        self.calls.append(key)
        return self.responses.get(key, ProcessResult(stdout="", stderr="", exit_code=0))

    def called(self, *prefix: str) -> bool:
        """True if any recorded call starts with ``prefix``."""
        return any(call[:len(prefix)] == prefix for call in self.calls)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        # git reports resolved paths, so compare against resolved ones
        yield Path(tmpdir).resolve()


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def repo_dir(temp_dir):
    """An existing directory standing in for a repository root."""
    path = temp_dir / "repo"
    path.mkdir()
    return path


@pytest.fixture
def fake_manager(repo_dir, fake_runner):
    """WorktreeManager wired to the scripted runner."""
    return WorktreeManager(repo_dir, runner=fake_runner, config=Config())


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository for testing."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    repo.git.branch('-M', 'main')

    yield repo

    repo.close()


@pytest.fixture
def real_manager(git_repo):
    """WorktreeManager on the real test repository."""
    return WorktreeManager(git_repo.working_dir)
