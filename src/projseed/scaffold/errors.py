"""Exception hierarchy for scaffolding runs.

Every error raised by the scaffold package derives from ScaffoldError so the
command boundary can turn any of them into a single message and exit code 1.
"""


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""


class InvalidBasePath(ScaffoldError):
    """The base directory does not exist or is not a directory."""


class InvalidProjectName(ScaffoldError):
    """The project name cannot be used as a directory name."""


class PathEscapesProject(ScaffoldError):
    """An entry's relative path is absolute or climbs out of the project root."""


class DependencyUnavailable(ScaffoldError):
    """A required external tool is missing and could not be installed."""


class FilesystemError(ScaffoldError):
    """A directory could not be created."""


class FileWriteError(FilesystemError):
    """A file's content could not be written."""


class ToolError(ScaffoldError):
    """Base class for failures talking to an external binary."""


class ToolUnavailable(ToolError):
    """The binary could not be found or launched."""

    def __init__(self, command, reason=None):
        if reason:
            super().__init__(f"Cannot run {command}: {reason}")
        else:
            super().__init__(f"Command not found: {command}")
        self.command = command
        self.reason = reason


class ToolInvocationFailed(ToolError):
    """The binary ran but exited with a non-zero status."""

    def __init__(self, command, returncode, stderr=""):
        message = f"{command} exited with status {returncode}"
        if stderr.strip():
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr


class ToolInvocationTimedOut(ToolError):
    """The binary did not finish within the configured timeout."""

    def __init__(self, command, timeout):
        super().__init__(f"{command} timed out after {timeout} seconds")
        self.command = command
        self.timeout = timeout
