#!/usr/bin/env python3
"""
git-worktree-keeper MCP Server

Exposes the worktree operations as MCP tools so a coding agent can list,
create, remove and switch between the worktrees of the repository the
server was started in.

Results are plain text. A successful switch ends with a directory-change
directive line that the host is expected to act on.
"""

import asyncio
import os
from typing import Any, Optional

from git.exc import GitCommandNotFound
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from .config import Config
from .dispatcher import dispatch
from .services.git.repository import find_repository_root
from .services.git.runner import GitRunner
from .services.worktree_manager import WorktreeManager
from .logging_config import setup_logging, get_logger

logger = get_logger(__name__)

server = Server("git-worktree-keeper")

TARGET_DESCRIPTION = "Path to the worktree or its index number from the list"

TOOLS = [
    Tool(
        name="worktree",
        description=(
            "Manage git worktrees - create, list, delete, or switch between worktrees.\n\n"
            "Available operations:\n"
            "- list: Show all worktrees with their branches\n"
            "- create: Create a new worktree with a branch\n"
            "- remove: Remove a worktree by path or index\n"
            "- switch: Switch to a different worktree directory"
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "operation": {
                    "type": "string",
                    "description": "Operation to perform",
                    "enum": ["list", "create", "remove", "switch"]
                },
                "branch": {
                    "type": "string",
                    "description": "Branch name for create operation"
                },
                "target": {
                    "type": "string",
                    "description": "Target path or index for remove/switch operations"
                },
                "base": {
                    "type": "string",
                    "description": "Base branch for create operation"
                },
                "path": {
                    "type": "string",
                    "description": "Custom path for create operation"
                },
                "force": {
                    "type": "boolean",
                    "description": "Force flag for remove operation"
                }
            },
            "required": ["operation"]
        }
    ),
    Tool(
        name="worktree_list",
        description="List all git worktrees for the current project",
        inputSchema={
            "type": "object",
            "properties": {},
            "required": []
        }
    ),
    Tool(
        name="worktree_create",
        description="Create a new git worktree with the specified branch name",
        inputSchema={
            "type": "object",
            "properties": {
                "branch": {
                    "type": "string",
                    "description": "Branch name to create (auto-prefixed with worktree/)"
                },
                "base": {
                    "type": "string",
                    "description": "Base branch or commit (defaults to HEAD)"
                },
                "path": {
                    "type": "string",
                    "description": "Custom path for the worktree"
                }
            },
            "required": ["branch"]
        }
    ),
    Tool(
        name="worktree_remove",
        description="Remove a git worktree by its path or index from the list",
        inputSchema={
            "type": "object",
            "properties": {
                "target": {
                    "type": "string",
                    "description": TARGET_DESCRIPTION
                },
                "force": {
                    "type": "boolean",
                    "description": "Force removal even with uncommitted changes",
                    "default": False
                }
            },
            "required": ["target"]
        }
    ),
    Tool(
        name="worktree_switch",
        description="Switch to a different worktree by changing the working directory",
        inputSchema={
            "type": "object",
            "properties": {
                "target": {
                    "type": "string",
                    "description": TARGET_DESCRIPTION
                }
            },
            "required": ["target"]
        }
    ),
]

# Tool name -> operation for the single-operation tools
TOOL_OPERATIONS = {
    "worktree_list": "list",
    "worktree_create": "create",
    "worktree_remove": "remove",
    "worktree_switch": "switch",
}


def build_manager(config: Optional[Config] = None) -> WorktreeManager:
    """Create a manager for the repository containing the working directory."""
    config = config or Config()
    runner = GitRunner(config.git_executable)
    repo_root = find_repository_root(runner, os.getcwd())
    return WorktreeManager(repo_root, runner=runner, config=config)


def run_tool(name: str, arguments: dict[str, Any]) -> str:
    """Run a tool call synchronously and return its text result."""
    if name == "worktree":
        operation = arguments.get("operation", "")
    elif name in TOOL_OPERATIONS:
        operation = TOOL_OPERATIONS[name]
    else:
        return f"Error: Unknown tool: {name}"

    return dispatch(
        build_manager(),
        operation,
        branch=arguments.get("branch"),
        target=arguments.get("target"),
        base=arguments.get("base"),
        path=arguments.get("path"),
        force=arguments.get("force", False),
    )


@server.list_tools()
async def list_tools() -> list[Tool]:
    return TOOLS


@server.call_tool()
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    try:
        # git calls block; keep them off the event loop
        text = await asyncio.to_thread(run_tool, name, arguments or {})
    except GitCommandNotFound:
        # the framework reports this call as failed rather than as a result
        logger.exception(f"Cannot run git for tool {name}")
        raise
    except Exception as e:
        logger.exception(f"Error executing tool {name}")
        text = f"Error: {e}"
    return [TextContent(type="text", text=text)]


async def async_main():
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options()
        )


def main():
    """Entry point for the MCP server."""
    setup_logging(verbose=True)
    asyncio.run(async_main())


if __name__ == "__main__":
    main()
