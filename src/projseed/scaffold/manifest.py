"""The project manifest: which entries and tool steps make up a new project.

One base slice is always included. Each enabled feature flag appends its own
slice of entries and tool steps, so every combination of features goes through
the same pipeline.
"""

from dataclasses import dataclass

from projseed.scaffold.model import (
    DirEntry,
    FileEntry,
    OnFailure,
    OverwritePolicy,
    ScaffoldSpec,
    ToolInvocation,
)
from projseed.scaffold.provisioning import PACKAGE_MANAGER
from projseed.template_renderer import load_template

NEVER = OverwritePolicy.NEVER_OVERWRITE
ALWAYS = OverwritePolicy.ALWAYS_OVERWRITE

MANIFEST_FILE = "pyproject.toml"


@dataclass(frozen=True)
class Features:
    """Optional slices layered on top of the base project."""

    dotenv: bool = True
    notebook: bool = False
    dev_tooling: bool = True

    @classmethod
    def from_opts(cls, opts) -> "Features":
        return cls(dotenv=opts.dotenv, notebook=opts.notebook, dev_tooling=opts.dev_tooling)


@dataclass(frozen=True)
class Slice:
    directories: tuple = ()
    files: tuple = ()
    dependencies: tuple = ()


def _file(relative_path, template_name, policy=NEVER):
    return FileEntry(relative_path, load_template(template_name), policy)


def base_slice() -> Slice:
    return Slice(
        directories=(
            DirEntry("src"),
            DirEntry("tests"),
            DirEntry("docs"),
            DirEntry("scripts"),
            DirEntry(".github/workflows"),
        ),
        files=(
            _file(".gitignore", "gitignore.tmpl", ALWAYS),
            _file("src/__init__.py", "package_init.py.tmpl"),
            _file("docs/index.md", "docs_index.md.tmpl"),
            FileEntry("tests/__init__.py", ""),
            _file("tests/test_sample.py", "test_sample.py.tmpl"),
            _file("scripts/tree.py", "tree.py.tmpl"),
            _file(".github/workflows/ci.yml", "ci.yml.tmpl", ALWAYS),
            _file(".vscode/settings.json", "vscode_settings.json.tmpl", ALWAYS),
            _file(".pre-commit-config.yaml", "pre-commit-config.yaml.tmpl", ALWAYS),
        ),
        dependencies=(
            ("add-pytest", ("--group", "dev", "pytest")),
        ),
    )


def dotenv_slice() -> Slice:
    return Slice(
        files=(
            _file("src/env_utils.py", "env_utils.py.tmpl"),
            _file(".env", "env.tmpl"),
            _file(".env.example", "env_example.tmpl", ALWAYS),
        ),
        dependencies=(
            ("add-python-dotenv", ("python-dotenv",)),
        ),
    )


def dev_tooling_slice() -> Slice:
    return Slice(
        files=(
            _file("src/main.py", "main.py.tmpl"),
            _file("src/logging_config.py", "logging_config.py.tmpl"),
        ),
        dependencies=(
            ("add-dev-tooling", ("--group", "dev", "ruff", "pre-commit")),
        ),
    )


def notebook_slice() -> Slice:
    return Slice(
        dependencies=(
            ("add-notebook", ("--group", "dev", "jupyter", "ipykernel")),
        ),
    )


def selected_slices(features: Features) -> list[Slice]:
    slices = [base_slice()]
    if features.dotenv:
        slices.append(dotenv_slice())
    if features.dev_tooling:
        slices.append(dev_tooling_slice())
    if features.notebook:
        slices.append(notebook_slice())
    return slices


# Deterministic materialization order; files not listed keep slice order after these.
_FILE_ORDER = (
    ".gitignore",
    "src/__init__.py",
    "src/env_utils.py",
    ".env",
    ".env.example",
    "docs/index.md",
    "tests/__init__.py",
    "tests/test_sample.py",
    "scripts/tree.py",
    "src/main.py",
    "src/logging_config.py",
    ".github/workflows/ci.yml",
    ".vscode/settings.json",
    ".pre-commit-config.yaml",
)


def _file_sort_key(entry):
    try:
        return _FILE_ORDER.index(entry.relative_path)
    except ValueError:
        return len(_FILE_ORDER)


def build_tool_steps(slices, python: str, package_manager: str = PACKAGE_MANAGER) -> tuple:
    steps = [
        ToolInvocation(
            "init-manifest", package_manager,
            ("init", "--no-interaction", "--name", "$PROJECT_NAME", "--python", "^$PYTHON_VERSION"),
            OnFailure.FATAL, skip_if_exists=MANIFEST_FILE,
        ),
        ToolInvocation("use-runtime", package_manager, ("env", "use", python), OnFailure.FATAL),
    ]
    for s in slices:
        for name, args in s.dependencies:
            steps.append(
                ToolInvocation(name, package_manager, ("add",) + args, OnFailure.WARN_AND_CONTINUE)
            )
    steps.append(ToolInvocation("lock", package_manager, ("lock",), OnFailure.WARN_AND_CONTINUE))
    steps.append(
        ToolInvocation("install", package_manager, ("install", "--no-root"), OnFailure.WARN_AND_CONTINUE)
    )
    return tuple(steps)


def build_scaffold_spec(opts) -> ScaffoldSpec:
    """Assemble the ScaffoldSpec for opts from the base and feature slices."""
    slices = selected_slices(Features.from_opts(opts))

    directories = tuple(d for s in slices for d in s.directories)
    files = sorted((f for s in slices for f in s.files), key=_file_sort_key)

    bindings = {
        "PROJECT_NAME": opts.project_name,
        "PACKAGE_NAME": opts.package_name,
        "ENV_URL_KEY": opts.env_url_key,
    }
    if opts.python_version:
        bindings["PYTHON_VERSION"] = opts.python_version

    return ScaffoldSpec(
        project_name=opts.project_name,
        base_path=opts.base_path,
        entries=directories + tuple(files),
        tool_steps=build_tool_steps(slices, opts.python),
        bindings=tuple(sorted(bindings.items())),
    )
