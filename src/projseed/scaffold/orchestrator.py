"""ScaffoldOrchestrator: applies a ScaffoldSpec to disk as a fixed pipeline.

Stages run strictly in order. A fatal stage that fails aborts the rest of the
pipeline and leaves the result in the FAILED state; an advisory failure is
reported as a warning and the run carries on. Nothing is rolled back, so a
failed or interrupted run can simply be repeated.
"""

import os
import sys

from projseed.scaffold.errors import FileWriteError, ScaffoldError, ToolError
from projseed.scaffold.materializer import FileOutcome, ensure_directory, ensure_file
from projseed.scaffold.model import DirEntry, OnFailure, ScaffoldResult
from projseed.scaffold.paths import resolve_project_path
from projseed.template_renderer import render


class ScaffoldOrchestrator:
    """Runs the scaffolding pipeline using injected collaborators.

    Args:
        tool_adapter: ToolAdapter for package-manager invocations.
        provisioner: Provisioner that validates the runtime and package manager.
        git_initializer: Object with ensure_repository(path) -> bool.
        out: Stream for progress lines. Defaults to stdout.
    """

    def __init__(self, tool_adapter, provisioner, git_initializer, out=None):
        self._tools = tool_adapter
        self._provisioner = provisioner
        self._git = git_initializer
        self._out = out

    def run(self, spec, strict_vcs: bool = False) -> ScaffoldResult:
        """Apply spec and return the accumulated ScaffoldResult."""
        result = ScaffoldResult()
        bindings = spec.bindings_dict()
        try:
            project_path = resolve_project_path(spec.base_path, spec.project_name)
            result.project_path = project_path
            self._ensure_project_directory(project_path, result)
            self._provision_tools(bindings)
            self._bootstrap_manifest(spec, project_path, bindings, result)
            self._materialize_entries(spec, project_path, bindings, result)
            self._init_version_control(project_path, strict_vcs, result)
        except ScaffoldError as e:
            result.fail(str(e))
        return result

    def _ensure_project_directory(self, project_path, result):
        if ensure_directory(project_path):
            self._progress(f"Created project directory {project_path}")
        else:
            self._progress(f"Using existing project directory {project_path}")

    def _provision_tools(self, bindings):
        major, minor = self._provisioner.validate_runtime()
        bindings.setdefault("PYTHON_VERSION", f"{major}.{minor}")
        self._provisioner.ensure_package_manager()

    def _bootstrap_manifest(self, spec, project_path, bindings, result):
        for step in spec.tool_steps:
            if step.skip_if_exists and os.path.exists(os.path.join(project_path, step.skip_if_exists)):
                self._progress(f"  skipped: {step.name} ({step.skip_if_exists} exists)")
                continue
            arguments = [render(arg, bindings) for arg in step.arguments]
            try:
                self._tools.invoke(step.command, arguments, cwd=project_path)
            except ToolError as e:
                if step.on_failure is OnFailure.FATAL:
                    raise
                result.failed_tools.append(step.name)
                self._warn(result, f"{step.name} failed: {e}")
                continue
            self._progress(f"  ran: {step.name}")

    def _materialize_entries(self, spec, project_path, bindings, result):
        for entry in spec.entries:
            path = os.path.join(project_path, entry.relative_path)
            if isinstance(entry, DirEntry):
                if ensure_directory(path):
                    self._record(result.created, "created", entry.relative_path)
                else:
                    result.skipped.append(entry.relative_path)
                continue

            content = render(entry.template_body, bindings)
            try:
                outcome = ensure_file(path, content, entry.overwrite_policy)
            except FileWriteError as e:
                result.failed_entries.append(entry.relative_path)
                self._warn(result, str(e))
                continue

            if outcome is FileOutcome.CREATED:
                self._record(result.created, "created", entry.relative_path)
            elif outcome is FileOutcome.REFRESHED:
                self._record(result.refreshed, "refreshed", entry.relative_path)
            else:
                self._record(result.skipped, "kept", entry.relative_path)

    def _init_version_control(self, project_path, strict_vcs, result):
        try:
            created = self._git.ensure_repository(project_path)
        except ToolError as e:
            if strict_vcs:
                raise
            result.failed_tools.append("init-vcs")
            self._warn(result, f"git repository not initialized: {e}")
            return
        if created:
            self._progress("Initialized git repository")
        else:
            self._progress("git repository already present")

    def _record(self, bucket, verb, relative_path):
        bucket.append(relative_path)
        self._progress(f"  {verb}: {relative_path}")

    def _progress(self, message):
        print(message, file=self._out or sys.stdout)

    def _warn(self, result, message):
        result.warnings.append(message)
        print(f"Warning: {message}", file=sys.stderr)
