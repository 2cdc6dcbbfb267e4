"""Command-line interface for git-worktree-keeper"""

import os
import sys
from typing import Optional, Sequence

from rich.console import Console

from git_worktree_keeper.cli.args import parse_args
from git_worktree_keeper.config import Config
from git_worktree_keeper.dispatcher import dispatch_result
from git_worktree_keeper.formatters import render_result
from git_worktree_keeper.logging_config import setup_logging, get_logger
from git_worktree_keeper.services.git.repository import find_repository_root
from git_worktree_keeper.services.git.runner import GitRunner
from git_worktree_keeper.services.worktree_manager import WorktreeManager

console = Console()
logger = get_logger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)
    try:
        setup_logging(
            verbose=parsed_args.verbose, debug=parsed_args.debug, log_file=parsed_args.log_file
        )

        config = Config(
            branch_prefix=parsed_args.branch_prefix,
            strict_listing=parsed_args.strict_listing,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )
        if parsed_args.debug:
            logger.debug(f"Configuration: {config.to_dict()}")

        runner = GitRunner(config.git_executable)
        repo_root = find_repository_root(runner, parsed_args.repo or os.getcwd())
        manager = WorktreeManager(repo_root, runner=runner, config=config)

        result = dispatch_result(
            manager,
            parsed_args.operation,
            branch=getattr(parsed_args, "branch", None),
            target=getattr(parsed_args, "target", None),
            base=getattr(parsed_args, "base", None),
            path=getattr(parsed_args, "path", None),
            force=getattr(parsed_args, "force", False),
        )

        # Plain output: paths must not be wrapped or styled, hosts parse them
        output = render_result(result, config.cd_directive)
        console.print(
            output,
            style=None if result.ok else "red",
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
        return 0 if result.ok else 1
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        console.print(f"Error: {e}", style="red", markup=False, highlight=False, soft_wrap=True)
        if parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
