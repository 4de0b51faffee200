"""ToolAdapter: wraps every external binary call made during scaffolding.

All subprocess calls go through invoke(), which returns a ToolResult or
raises one of ToolUnavailable, ToolInvocationFailed or ToolInvocationTimedOut.
The executable search path comes from a ToolEnvironment owned by the current
run rather than from the process-wide PATH, so installing a tool mid-run
never leaks into the caller's environment.
"""

import os
import re
import shutil
import subprocess
from typing import Iterable

from projseed.scaffold.errors import (
    ToolInvocationFailed,
    ToolInvocationTimedOut,
    ToolUnavailable,
)
from projseed.scaffold.model import ToolResult

_VERSION_PATTERN = re.compile(r"(\d+)\.(\d+)")


class ToolEnvironment:
    """Executable search path for one scaffolding run."""

    def __init__(self, search_path: Iterable[str] | None = None):
        if search_path is None:
            search_path = os.environ.get("PATH", "").split(os.pathsep)
        self._search_path: list[str] = [p for p in search_path if p]

    @classmethod
    def from_process(cls, extra_paths: Iterable[str] = ()) -> "ToolEnvironment":
        """Start from the current $PATH with extra_paths searched first."""
        env = cls()
        for path in reversed(list(extra_paths)):
            env.prepend(path)
        return env

    @property
    def search_path(self) -> list[str]:
        return list(self._search_path)

    @property
    def path_string(self) -> str:
        return os.pathsep.join(self._search_path)

    def append(self, directory: str) -> None:
        if directory and directory not in self._search_path:
            self._search_path.append(directory)

    def prepend(self, directory: str) -> None:
        if directory and directory not in self._search_path:
            self._search_path.insert(0, directory)

    def which(self, command: str) -> str | None:
        return shutil.which(command, path=self.path_string)

    def env(self) -> dict:
        """Process environment for child processes, with this search path."""
        env = dict(os.environ)
        env["PATH"] = self.path_string
        return env


class ToolAdapter:
    """Runs external binaries with a defined success/failure contract."""

    def __init__(self, environment: ToolEnvironment | None = None, timeout: float | None = None):
        self.environment = environment or ToolEnvironment()
        self.timeout = timeout

    def invoke(self, command: str, arguments=(), cwd: str | None = None) -> ToolResult:
        """Run command with arguments in cwd and capture its output.

        Raises:
            ToolUnavailable: If the binary is not on the search path or cannot be launched
            ToolInvocationFailed: If the binary exits non-zero
            ToolInvocationTimedOut: If the binary exceeds the timeout
        """
        executable = self.environment.which(command)
        if executable is None:
            raise ToolUnavailable(command)

        try:
            completed = subprocess.run(
                [executable] + list(arguments),
                cwd=cwd,
                capture_output=True,
                text=True,
                env=self.environment.env(),
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise ToolUnavailable(command) from e
        except OSError as e:
            # Exec format errors and permission problems.
            raise ToolUnavailable(command, e.strerror or str(e)) from e
        except subprocess.TimeoutExpired as e:
            raise ToolInvocationTimedOut(command, self.timeout) from e

        result = ToolResult(completed.returncode, completed.stdout or "", completed.stderr or "")
        if result.returncode != 0:
            raise ToolInvocationFailed(command, result.returncode, result.stderr)
        return result

    def probe_available(self, tool: str) -> bool:
        """Return True if `tool --version` runs successfully."""
        try:
            self.invoke(tool, ["--version"])
        except (ToolUnavailable, ToolInvocationFailed, ToolInvocationTimedOut):
            return False
        return True

    def probe_installable(self, module: str, runtime: str) -> bool:
        """Return True if runtime can import module."""
        try:
            self.invoke(runtime, ["-c", f"import {module}"])
        except (ToolUnavailable, ToolInvocationFailed, ToolInvocationTimedOut):
            return False
        return True

    def runtime_version(self, runtime: str) -> tuple[int, int]:
        """Return (major, minor) reported by `runtime --version`.

        Raises:
            ToolInvocationFailed: If the output carries no version number
        """
        result = self.invoke(runtime, ["--version"])
        # Older interpreters print the version on stderr.
        match = _VERSION_PATTERN.search(result.stdout) or _VERSION_PATTERN.search(result.stderr)
        if match is None:
            raise ToolInvocationFailed(runtime, result.returncode, "no version in output")
        return int(match.group(1)), int(match.group(2))

    def user_bin_directory(self, runtime: str) -> str:
        """Return the directory `pip install --user` puts scripts in."""
        # `-m site --user-base` exits non-zero when user site-packages are disabled.
        result = self.invoke(runtime, ["-c", "import site; print(site.getuserbase())"])
        return os.path.join(result.stdout.strip(), "bin")
