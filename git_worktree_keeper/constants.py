"""Shared constants for git-worktree-keeper."""

# Namespace for branches created by this tool, kept apart from user branches
DEFAULT_BRANCH_PREFIX = "worktree/"
DEFAULT_BASE = "HEAD"

# Prefix of the output line that tells the host to change directory
DEFAULT_CD_DIRECTIVE = "__OPENCODE_CD__:"

HEADS_PREFIX = "refs/heads/"

# Porcelain markers from `git worktree list --porcelain`
PORCELAIN_WORKTREE = "worktree "
PORCELAIN_HEAD = "HEAD "
PORCELAIN_BRANCH = "branch "
PORCELAIN_BARE = "bare"

DETACHED_LABEL = "detached"
MAIN_MARKER = " (main)"

# Substrings of `git worktree remove` errors that mean the tree has local changes.
# The English message relies on GitPython running git with LC_ALL=C.
DIRTY_MARKERS = (
    "dirty",
    "contains modified or untracked files",
)

OPERATIONS = ("list", "create", "remove", "switch")
