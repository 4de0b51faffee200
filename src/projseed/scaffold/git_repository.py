"""GitRepositoryInitializer: wraps GitPython to create the project's repository.

Provides an injectable interface for version-control setup, enabling
FakeGitInitializer in tests.
"""

import os

from git import Repo
from git.exc import GitCommandError, GitCommandNotFound, InvalidGitRepositoryError, NoSuchPathError

from projseed.scaffold.errors import ToolInvocationFailed, ToolUnavailable


class GitRepositoryInitializer:
    """Initializes a git repository at a project root, once."""

    def is_repository(self, path: str) -> bool:
        """Return True if path is the working tree root of a git repository."""
        try:
            repo = Repo(path)
        except (InvalidGitRepositoryError, NoSuchPathError):
            return False
        return os.path.realpath(repo.working_tree_dir) == os.path.realpath(path)

    def ensure_repository(self, path: str) -> bool:
        """Initialize a repository at path unless one is already there.

        Returns:
            True if a repository was created, False if one already existed

        Raises:
            ToolUnavailable: If the git binary cannot be found
            ToolInvocationFailed: If `git init` fails
        """
        if self.is_repository(path):
            return False
        try:
            Repo.init(path)
        except GitCommandNotFound as e:
            raise ToolUnavailable("git") from e
        except GitCommandError as e:
            raise ToolInvocationFailed("git init", e.status, str(e.stderr or "")) from e
        return True
