"""Configuration handling for git-worktree-keeper"""

from dataclasses import dataclass

from git_worktree_keeper.constants import (
    DEFAULT_BASE,
    DEFAULT_BRANCH_PREFIX,
    DEFAULT_CD_DIRECTIVE,
)


@dataclass
class Config:
    """Configuration for git-worktree-keeper with validation."""

    # Branch naming
    branch_prefix: str = DEFAULT_BRANCH_PREFIX
    default_base: str = DEFAULT_BASE

    # Git invocation
    git_executable: str = "git"
    strict_listing: bool = False  # Report `worktree list` failures instead of an empty list

    # Host integration
    cd_directive: str = DEFAULT_CD_DIRECTIVE

    # Output
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_branch_prefix()
        self._validate_default_base()
        self._validate_git_executable()
        self._validate_cd_directive()

    def _validate_branch_prefix(self):
        """Validate branch_prefix is a non-empty ref namespace."""
        if not self.branch_prefix or not self.branch_prefix.strip():
            raise ValueError("branch_prefix cannot be empty")
        self.branch_prefix = self.branch_prefix.strip()
        if not self.branch_prefix.endswith("/"):
            raise ValueError(f"branch_prefix must end with '/', got '{self.branch_prefix}'")
        if self.branch_prefix.startswith("/"):
            raise ValueError(f"branch_prefix cannot start with '/', got '{self.branch_prefix}'")

    def _validate_default_base(self):
        """Validate default_base is not empty."""
        if not self.default_base or not self.default_base.strip():
            raise ValueError("default_base cannot be empty")
        self.default_base = self.default_base.strip()

    def _validate_git_executable(self):
        """Validate git_executable is not empty."""
        if not self.git_executable or not self.git_executable.strip():
            raise ValueError("git_executable cannot be empty")

    def _validate_cd_directive(self):
        """Validate cd_directive fits on a single output line."""
        if not self.cd_directive:
            raise ValueError("cd_directive cannot be empty")
        if "\n" in self.cd_directive or "\r" in self.cd_directive:
            raise ValueError("cd_directive must be a single line")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "branch_prefix": self.branch_prefix,
            "default_base": self.default_base,
            "git_executable": self.git_executable,
            "strict_listing": self.strict_listing,
            "cd_directive": self.cd_directive,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        known_fields = {
            "branch_prefix",
            "default_base",
            "git_executable",
            "strict_listing",
            "cd_directive",
            "verbose",
            "debug",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
