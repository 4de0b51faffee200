"""FakeGitInitializer: test double for GitRepositoryInitializer."""

import os


class FakeGitInitializer:
    """Creates an empty .git directory instead of running git.

    Usage:
        fake = FakeGitInitializer(error=ToolUnavailable("git"))
        fake.ensure_repository("/tmp/project")  # raises
    """

    def __init__(self, error=None):
        self.error = error
        self.calls = []

    def ensure_repository(self, path):
        self.calls.append(path)
        if self.error is not None:
            raise self.error
        git_dir = os.path.join(path, ".git")
        if os.path.isdir(git_dir):
            return False
        os.makedirs(git_dir)
        return True
