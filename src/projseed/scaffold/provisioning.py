"""Provisioner: makes sure the runtime and package manager are usable.

A missing package manager gets exactly one install attempt followed by one
re-probe. If it is still missing the run fails with DependencyUnavailable;
there is no retry loop.
"""

import sys

from projseed.scaffold.errors import DependencyUnavailable, ToolError

MIN_PYTHON = (3, 9)
PACKAGE_MANAGER = "poetry"


class Provisioner:
    """Validates the runtime and installs the package manager when needed.

    Args:
        tool_adapter: ToolAdapter used for every probe and install.
        runtime: Interpreter executable used for probes and pip.
        package_manager: Binary that manages the project's manifest.
    """

    def __init__(self, tool_adapter, runtime: str = "python3", package_manager: str = PACKAGE_MANAGER, out=None):
        self._tools = tool_adapter
        self.runtime = runtime
        self.package_manager = package_manager
        self._out = out

    def validate_runtime(self) -> tuple[int, int]:
        """Return the runtime's (major, minor) version.

        Raises:
            DependencyUnavailable: If the runtime is missing or too old
        """
        try:
            version = self._tools.runtime_version(self.runtime)
        except ToolError as e:
            raise DependencyUnavailable(f"Python runtime '{self.runtime}' is not usable: {e}") from e
        if version < MIN_PYTHON:
            raise DependencyUnavailable(
                f"Python {_dotted(version)} is too old; "
                f"projseed needs Python {_dotted(MIN_PYTHON)} or newer"
            )
        return version

    def ensure_package_manager(self) -> bool:
        """Make the package manager available on the run's search path.

        Returns:
            True if it had to be installed, False if it was already present

        Raises:
            DependencyUnavailable: If it is missing and installing it failed
        """
        if self._tools.probe_available(self.package_manager):
            return False

        if not self._tools.probe_installable("pip", self.runtime):
            raise DependencyUnavailable(
                f"{self.package_manager} is not installed and pip is not available "
                f"in {self.runtime} to install it"
            )

        self._print(f"{self.package_manager} not found. Installing it with pip...")
        try:
            self._tools.invoke(
                self.runtime, ["-m", "pip", "install", "--user", self.package_manager],
            )
        except ToolError as e:
            raise DependencyUnavailable(f"Could not install {self.package_manager}: {e}") from e

        try:
            self._tools.environment.append(self._tools.user_bin_directory(self.runtime))
        except ToolError as e:
            self._print(f"Warning: could not locate the pip user bin directory: {e}", err=True)

        if not self._tools.probe_available(self.package_manager):
            raise DependencyUnavailable(
                f"{self.package_manager} is still unavailable after installing it"
            )
        return True

    def _print(self, message, err=False):
        stream = sys.stderr if err else (self._out or sys.stdout)
        print(message, file=stream)


def _dotted(version) -> str:
    return ".".join(str(part) for part in version)
