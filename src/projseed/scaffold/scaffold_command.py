"""ScaffoldCommand encapsulates the new-project workflow logic."""

import sys

from projseed.scaffold.errors import ScaffoldError
from projseed.scaffold.git_repository import GitRepositoryInitializer
from projseed.scaffold.manifest import build_scaffold_spec
from projseed.scaffold.orchestrator import ScaffoldOrchestrator
from projseed.scaffold.paths import resolve_project_path
from projseed.scaffold.provisioning import Provisioner
from projseed.scaffold.tool_adapter import ToolAdapter, ToolEnvironment
from projseed.templates.template_renderer import render_template


class ScaffoldCommand:
    """Builds the scaffold for a new project and reports the outcome."""

    def __init__(self, opts, orchestrator=None, out=None):
        self.opts = opts
        self.orchestrator = orchestrator or _default_orchestrator(opts, out)
        self.out = out

    def execute(self) -> int:
        """Run the scaffold; return the process exit code."""
        spec = build_scaffold_spec(self.opts)

        if self.opts.dry_run:
            return self._print_plan(spec)

        result = self.orchestrator.run(spec, strict_vcs=self.opts.strict_vcs)
        self._print(render_template("report.j2", result=result, project_name=spec.project_name))

        if not result.succeeded:
            print(f"Error: {result.error}", file=sys.stderr)
            return 1
        return 0

    def _print_plan(self, spec) -> int:
        try:
            project_path = resolve_project_path(spec.base_path, spec.project_name)
        except ScaffoldError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        self._print(render_template("plan.j2", spec=spec, project_path=project_path))
        return 0

    def _print(self, text):
        print(text.rstrip("\n"), file=self.out or sys.stdout)


def _default_orchestrator(opts, out):
    environment = ToolEnvironment.from_process(opts.extra_paths)
    tool_adapter = ToolAdapter(environment, timeout=opts.tool_timeout)
    return ScaffoldOrchestrator(
        tool_adapter=tool_adapter,
        provisioner=Provisioner(tool_adapter, runtime=opts.python, out=out),
        git_initializer=GitRepositoryInitializer(),
        out=out,
    )
