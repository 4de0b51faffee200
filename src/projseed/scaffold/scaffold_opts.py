"""Options dataclass for the new command."""

import re
from dataclasses import dataclass, field

DEFAULT_ENV_URL_KEY = "OPENAI_URL"


@dataclass
class ScaffoldOpts:
    """All options for the new command."""

    project_name: str
    base_path: str
    notebook: bool = False
    dotenv: bool = True
    dev_tooling: bool = True
    env_url_key: str = DEFAULT_ENV_URL_KEY
    python: str = "python3"
    python_version: str | None = None
    tool_timeout: float | None = None
    strict_vcs: bool = False
    dry_run: bool = False
    extra_paths: list[str] = field(default_factory=list)

    @property
    def package_name(self):
        """The project name as an importable identifier."""
        name = re.sub(r"\W", "_", self.project_name.strip().lower())
        if name and name[0].isdigit():
            name = f"_{name}"
        return name


def parse_yes(value) -> bool:
    """Interpret a y/n answer: `y` or `yes` (any case) is True, anything else False."""
    if isinstance(value, bool):
        return value
    return str(value or "").strip().lower() in ("y", "yes")
