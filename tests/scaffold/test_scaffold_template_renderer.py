"""Tests for template_renderer: substitutes $VARIABLE placeholders in scaffold templates."""

import pytest

from projseed.template_renderer import load_template, render


@pytest.mark.unit
class TestRender:

    def test_substitutes_bound_tokens(self):
        assert render("# $PROJECT_NAME\n", {"PROJECT_NAME": "demo"}) == "# demo\n"

    def test_substitutes_braced_tokens(self):
        assert render("${PACKAGE_NAME}_cli", {"PACKAGE_NAME": "demo"}) == "demo_cli"

    def test_unknown_tokens_are_left_verbatim(self):
        assert render("$PROJECT_NAME uses $UNKNOWN", {"PROJECT_NAME": "demo"}) == "demo uses $UNKNOWN"

    def test_github_expressions_are_preserved(self):
        template = "python-version: ${{ matrix.python-version }}"
        assert render(template, {"PYTHON_VERSION": "3.12"}) == template

    def test_template_without_tokens_is_unchanged(self):
        assert render("plain text\n", {"PROJECT_NAME": "demo"}) == "plain text\n"


@pytest.mark.unit
class TestLoadTemplate:

    def test_loads_bundled_template(self):
        body = load_template("ci.yml.tmpl")

        assert "$PYTHON_VERSION" in body
        assert "${{ matrix.python-version }}" in body

    def test_env_template_uses_url_key_token(self):
        assert "$ENV_URL_KEY=" in load_template("env.tmpl")

    def test_rendered_ci_workflow_pins_python_version(self):
        rendered = render(load_template("ci.yml.tmpl"), {"PYTHON_VERSION": "3.11"})

        assert '"3.11"' in rendered
        assert "${{ matrix.python-version }}" in rendered

    def test_raises_on_missing_template(self):
        with pytest.raises(FileNotFoundError):
            load_template("nonexistent.tmpl")
