"""Click command for creating a new project."""

import sys

import click

from projseed.scaffold.scaffold_command import ScaffoldCommand
from projseed.scaffold.scaffold_opts import DEFAULT_ENV_URL_KEY, ScaffoldOpts, parse_yes


@click.command("new")
@click.argument("project_name", required=False)
@click.argument("base_path", required=False)
@click.option("--notebook", metavar="y/n",
              help="Add Jupyter notebook support ('y' enables it; prompted if omitted)")
@click.option("--dotenv/--no-dotenv", default=True, show_default=True,
              help="Generate .env files and an environment helper module")
@click.option("--dev-tooling/--no-dev-tooling", default=True, show_default=True,
              help="Generate main/logging modules and add ruff and pre-commit")
@click.option("--env-url-key", default=DEFAULT_ENV_URL_KEY, show_default=True,
              envvar="PROJSEED_ENV_URL_KEY",
              help="Environment variable the generated env helper reads")
@click.option("--python", default="python3", show_default=True, envvar="PROJSEED_PYTHON",
              help="Python interpreter the project environment should use")
@click.option("--python-version", metavar="X.Y",
              help="Python version for the manifest and CI (default: detected)")
@click.option("--tool-timeout", type=float, metavar="SECONDS",
              help="Timeout for each external tool invocation")
@click.option("--strict-vcs", is_flag=True,
              help="Fail the run if the git repository cannot be initialized")
@click.option("--dry-run", is_flag=True,
              help="Print the entries and tool steps without touching the filesystem")
@click.pass_context
def new_cmd(ctx, project_name, base_path, notebook, **kwargs):
    """Create a new Python project in BASE_PATH/PROJECT_NAME."""
    if not project_name:
        project_name = click.prompt("Project name")
    if not base_path:
        base_path = click.prompt("Base directory", default=".")
    if notebook is None:
        notebook = click.prompt("Add Jupyter notebook support? (y/n)", default="n")

    opts = ScaffoldOpts(
        project_name=project_name,
        base_path=base_path,
        notebook=parse_yes(notebook),
        extra_paths=list((ctx.obj or {}).get("extra_paths", ())),
        **kwargs,
    )
    sys.exit(ScaffoldCommand(opts).execute())
