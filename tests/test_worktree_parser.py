"""Tests for porcelain parsing and WorktreeService listing"""
import pytest

from git_worktree_keeper.exceptions import GitOperationError
from git_worktree_keeper.models.worktree import WorktreeEntry
from git_worktree_keeper.services.git.worktrees import WorktreeService, parse_worktree_porcelain


FULL_PORCELAIN = """worktree /home/dev/repo
HEAD 1111111111111111111111111111111111111111
branch refs/heads/main

worktree /home/dev/feat
HEAD 2222222222222222222222222222222222222222
branch refs/heads/worktree/feat
locked reason here

worktree /home/dev/detached
HEAD 3333333333333333333333333333333333333333
detached
prunable gitdir file points to non-existent location
"""


class TestParseWorktreePorcelain:
    """Test parsing of `git worktree list --porcelain` output."""

    def test_two_blocks(self):
        """A main worktree without branch and a linked one on a branch."""
        entries = parse_worktree_porcelain(
            "worktree /repo\n\nworktree /repo-feat\nbranch refs/heads/feat\n\n"
        )

        assert entries == [
            WorktreeEntry(path="/repo", branch=None, is_main=True),
            WorktreeEntry(path="/repo-feat", branch="feat", is_main=False),
        ]

    def test_full_output(self):
        entries = parse_worktree_porcelain(FULL_PORCELAIN)

        assert [e.path for e in entries] == [
            "/home/dev/repo",
            "/home/dev/feat",
            "/home/dev/detached",
        ]
        assert entries[0].branch == "main"
        assert entries[0].commit == "1" * 40
        assert entries[1].branch == "worktree/feat"
        assert entries[2].branch is None
        assert entries[2].is_detached
        assert entries[2].display_branch == "detached"
        assert entries[2].commit == "3" * 40

    def test_exactly_one_main_and_it_is_first(self):
        entries = parse_worktree_porcelain(FULL_PORCELAIN)
        assert [e.is_main for e in entries] == [True, False, False]

    def test_no_trailing_blank_line(self):
        """The last block is flushed even without a terminating blank line."""
        entries = parse_worktree_porcelain(
            "worktree /a\nbranch refs/heads/a\n\nworktree /b\nbranch refs/heads/b"
        )
        assert [e.path for e in entries] == ["/a", "/b"]
        assert entries[1].branch == "b"

    def test_consecutive_worktree_lines_flush_previous(self):
        entries = parse_worktree_porcelain("worktree /a\nworktree /b\n")
        assert [e.path for e in entries] == ["/a", "/b"]

    def test_bare_entry(self):
        entries = parse_worktree_porcelain(
            "worktree /srv/repo.git\nbare\n\nworktree /srv/wt\nHEAD abc\nbranch refs/heads/x\n"
        )
        assert entries[0].is_bare is True
        assert entries[0].is_main is True
        assert entries[0].is_detached is False
        assert entries[1].is_bare is False

    def test_branch_without_heads_prefix_kept(self):
        entries = parse_worktree_porcelain("worktree /a\nbranch refs/remotes/origin/x\n")
        assert entries[0].branch == "refs/remotes/origin/x"

    def test_unknown_lines_ignored(self):
        entries = parse_worktree_porcelain(
            "worktree /a\nsomething-new value\nlocked\nbranch refs/heads/a\n"
        )
        assert entries == [WorktreeEntry(path="/a", branch="a", is_main=True)]

    def test_crlf_line_endings(self):
        entries = parse_worktree_porcelain("worktree /a\r\nbranch refs/heads/a\r\n\r\nworktree /b\r\n")
        assert [e.path for e in entries] == ["/a", "/b"]
        assert entries[0].branch == "a"

    def test_empty_output(self):
        assert parse_worktree_porcelain("") == []

    def test_parsing_is_idempotent(self):
        assert parse_worktree_porcelain(FULL_PORCELAIN) == parse_worktree_porcelain(FULL_PORCELAIN)

    def test_entry_string(self):
        entries = parse_worktree_porcelain(FULL_PORCELAIN)
        assert str(entries[0]) == "[main] (main) /home/dev/repo"
        assert str(entries[2]) == "[detached] /home/dev/detached"


class TestWorktreeServiceListing:
    """Test WorktreeService.list_worktrees against a scripted runner."""

    def test_list_parses_runner_output(self, repo_dir, fake_runner):
        fake_runner.set_worktrees(FULL_PORCELAIN)
        service = WorktreeService(str(repo_dir), fake_runner)

        entries = service.list_worktrees()

        assert len(entries) == 3
        assert fake_runner.calls == [("worktree", "list", "--porcelain")]

    def test_list_failure_returns_empty(self, repo_dir, fake_runner):
        fake_runner.set(["worktree", "list", "--porcelain"], stderr="fatal: boom", exit_code=128)
        service = WorktreeService(str(repo_dir), fake_runner)

        assert service.list_worktrees() == []

    def test_list_failure_strict_raises(self, repo_dir, fake_runner):
        fake_runner.set(["worktree", "list", "--porcelain"], stderr="fatal: boom", exit_code=128)
        service = WorktreeService(str(repo_dir), fake_runner)

        with pytest.raises(GitOperationError, match="fatal: boom"):
            service.list_worktrees(strict=True)

    def test_every_call_reads_fresh_state(self, repo_dir, fake_runner):
        service = WorktreeService(str(repo_dir), fake_runner)
        fake_runner.set_worktrees("worktree /a\n")
        assert len(service.list_worktrees()) == 1

        fake_runner.set_worktrees("worktree /a\n\nworktree /b\n")
        assert len(service.list_worktrees()) == 2

    def test_branch_exists_uses_show_ref(self, repo_dir, fake_runner):
        fake_runner.set(
            ["show-ref", "--verify", "--quiet", "refs/heads/worktree/x"], exit_code=1
        )
        service = WorktreeService(str(repo_dir), fake_runner)

        assert service.branch_exists("worktree/x") is False
        assert service.branch_exists("main") is True
