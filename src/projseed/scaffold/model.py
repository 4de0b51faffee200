"""Declarative description of a scaffold and the outcome of applying it."""

from dataclasses import dataclass, field
from enum import Enum

from projseed.scaffold.paths import check_relative_path


class OverwritePolicy(Enum):
    NEVER_OVERWRITE = "never"
    ALWAYS_OVERWRITE = "always"


class OnFailure(Enum):
    FATAL = "fatal"
    WARN_AND_CONTINUE = "warn"


class ScaffoldState(Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class DirEntry:
    """A directory inside the project; parents are implied."""

    relative_path: str

    def __post_init__(self):
        check_relative_path(self.relative_path)


@dataclass(frozen=True)
class FileEntry:
    """A file inside the project rendered from a template body."""

    relative_path: str
    template_body: str
    overwrite_policy: OverwritePolicy = OverwritePolicy.NEVER_OVERWRITE

    def __post_init__(self):
        check_relative_path(self.relative_path)


Entry = FileEntry | DirEntry


@dataclass(frozen=True)
class ToolInvocation:
    """One call to an external binary, run from the project directory.

    When skip_if_exists names a project-relative path that already exists,
    the invocation is skipped.
    """

    name: str
    command: str
    arguments: tuple[str, ...] = ()
    on_failure: OnFailure = OnFailure.FATAL
    skip_if_exists: str | None = None

    @property
    def command_line(self) -> str:
        return " ".join((self.command,) + tuple(self.arguments))


@dataclass(frozen=True)
class ToolResult:
    """Captured outcome of a finished process."""

    returncode: int
    stdout: str = ""
    stderr: str = ""


@dataclass(frozen=True)
class ScaffoldSpec:
    """The desired end state of one scaffolding run."""

    project_name: str
    base_path: str
    entries: tuple[Entry, ...] = ()
    tool_steps: tuple[ToolInvocation, ...] = ()
    bindings: tuple[tuple[str, str], ...] = ()

    def bindings_dict(self) -> dict[str, str]:
        return dict(self.bindings)


@dataclass
class ScaffoldResult:
    """Accumulated outcome of a run, owned by the orchestrator."""

    project_path: str | None = None
    created: list[str] = field(default_factory=list)
    refreshed: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed_entries: list[str] = field(default_factory=list)
    failed_tools: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    state: ScaffoldState = ScaffoldState.SUCCEEDED
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.state is ScaffoldState.SUCCEEDED

    def fail(self, message: str) -> None:
        self.state = ScaffoldState.FAILED
        self.error = message
