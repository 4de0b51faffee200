"""Tests for the Jinja2 renderer used for run reports and dry-run plans."""

import pytest

from projseed.scaffold.model import DirEntry, FileEntry, OnFailure, OverwritePolicy, ScaffoldResult, ScaffoldSpec, ToolInvocation
from projseed.templates.template_renderer import render_template


@pytest.mark.unit
class TestReportTemplate:

    def test_success_report_names_project_path(self):
        result = ScaffoldResult(project_path="/tmp/work/demo", created=["src", ".env"])

        text = render_template("report.j2", result=result, project_name="demo")

        assert "Project 'demo' ready at: /tmp/work/demo" in text
        assert "created:   2" in text

    def test_failure_report_includes_error(self):
        result = ScaffoldResult()
        result.fail("Base directory not found: /nope")

        text = render_template("report.j2", result=result, project_name="demo")

        assert "failed: Base directory not found: /nope" in text

    def test_report_lists_failed_tool_steps(self):
        result = ScaffoldResult(project_path="/p", failed_tools=["add-notebook"], warnings=["x"])

        text = render_template("report.j2", result=result, project_name="demo")

        assert "- add-notebook" in text
        assert "warnings: 1" in text

    def test_report_omits_empty_sections(self):
        text = render_template("report.j2", result=ScaffoldResult(project_path="/p"), project_name="demo")

        assert "failed tool steps" not in text
        assert "failed files" not in text


@pytest.mark.unit
class TestPlanTemplate:

    def test_lists_entries_and_tool_steps(self):
        spec = ScaffoldSpec(
            "demo", "/tmp",
            entries=(
                DirEntry("src"),
                FileEntry(".gitignore", "", OverwritePolicy.ALWAYS_OVERWRITE),
            ),
            tool_steps=(
                ToolInvocation("init-manifest", "poetry", ("init",), skip_if_exists="pyproject.toml"),
                ToolInvocation("lock", "poetry", ("lock",), OnFailure.WARN_AND_CONTINUE),
            ),
        )

        text = render_template("plan.j2", spec=spec, project_path="/tmp/demo")

        assert "dir  src/" in text
        assert "file .gitignore (always overwrite)" in text
        assert "[fatal] poetry init (skipped if pyproject.toml exists)" in text
        assert "[advisory] poetry lock" in text

    def test_missing_template_raises(self):
        with pytest.raises(FileNotFoundError):
            render_template("nonexistent.j2")
