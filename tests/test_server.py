"""Tests for the MCP tool server"""
import asyncio
from unittest.mock import patch

import pytest
from git.exc import GitCommandNotFound

from git_worktree_keeper import server
from git_worktree_keeper.services.worktree_manager import WorktreeManager


@pytest.fixture
def repo_server(git_repo):
    """Point the server at the test repository."""
    with patch.object(server, "build_manager", lambda: WorktreeManager(git_repo.working_dir)):
        yield


class TestTools:
    def test_tool_names(self):
        tools = asyncio.run(server.list_tools())
        assert [tool.name for tool in tools] == [
            "worktree",
            "worktree_list",
            "worktree_create",
            "worktree_remove",
            "worktree_switch",
        ]

    def test_dispatcher_tool_requires_operation(self):
        tool = next(t for t in server.TOOLS if t.name == "worktree")
        assert tool.inputSchema["required"] == ["operation"]
        assert tool.inputSchema["properties"]["operation"]["enum"] == ["list", "create", "remove", "switch"]


class TestRunTool:
    def test_unknown_tool(self):
        assert server.run_tool("worktree_rename", {}) == "Error: Unknown tool: worktree_rename"

    def test_list_tool(self, repo_server, git_repo):
        assert server.run_tool("worktree_list", {}).startswith("Worktrees:\n1. [main] (main)")

    def test_dispatcher_tool_missing_argument(self, repo_server):
        assert server.run_tool("worktree", {"operation": "create"}) == (
            "Error: branch is required for create operation"
        )

    def test_create_tool_with_path(self, repo_server, temp_dir):
        result = server.run_tool("worktree_create", {"branch": "srv", "path": "custom-dir"})
        assert result.startswith(f"Created worktree at: {temp_dir / 'custom-dir'}")


class TestCallTool:
    def test_returns_text_content(self, repo_server):
        content = asyncio.run(server.call_tool("worktree", {"operation": "switch", "target": "1"}))

        assert len(content) == 1
        assert content[0].type == "text"
        assert "__OPENCODE_CD__:" in content[0].text

    def test_exception_becomes_error_text(self):
        with patch.object(server, "run_tool", side_effect=RuntimeError("boom")):
            content = asyncio.run(server.call_tool("worktree_list", {}))

        assert content[0].text == "Error: boom"

    def test_missing_git_propagates(self):
        missing = GitCommandNotFound("git", OSError("No such file or directory"))
        with patch.object(server, "run_tool", side_effect=missing):
            with pytest.raises(GitCommandNotFound):
                asyncio.run(server.call_tool("worktree_list", {}))
