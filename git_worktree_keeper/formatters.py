"""Rendering of operation results for text-oriented hosts"""

from git_worktree_keeper.constants import DEFAULT_CD_DIRECTIVE
from git_worktree_keeper.models.result import OperationResult


def format_cd_directive(path: str, directive: str = DEFAULT_CD_DIRECTIVE) -> str:
    """Build the line a host shell parses to change its working directory."""
    return f"{directive}{path}"


def render_result(result: OperationResult, directive: str = DEFAULT_CD_DIRECTIVE) -> str:
    """Render a result as the plain string returned to the host.

    A successful switch gets the directory-change directive appended on its
    own line.
    """
    if result.ok and result.cd_path:
        return f"{result.message}\n{format_cd_directive(result.cd_path, directive)}"
    return result.message
