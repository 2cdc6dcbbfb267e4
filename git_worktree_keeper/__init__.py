"""
git-worktree-keeper - Git worktree management for coding agents
"""

from .__version__ import __version__
from .config import Config
from .dispatcher import dispatch
from .services.worktree_manager import WorktreeManager

__all__ = ["Config", "WorktreeManager", "dispatch", "__version__"]
