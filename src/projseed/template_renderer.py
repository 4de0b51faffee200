"""Template renderer: loads scaffold templates and substitutes $VARIABLE placeholders."""

import importlib.resources
from string import Template


_TEMPLATES_PACKAGE = "projseed.templates.scaffold"


def render(template: str, bindings: dict[str, str]) -> str:
    """Substitute $NAME and ${NAME} placeholders in template.

    Placeholders without a binding are left verbatim, as is any `$` that does
    not start a placeholder (for example `${{ matrix.python-version }}` in a
    CI workflow).
    """
    return Template(template).safe_substitute(bindings)


def load_template(template_name: str) -> str:
    """Read a bundled scaffold template body.

    Args:
        template_name: Filename within src/projseed/templates/scaffold/

    Raises:
        FileNotFoundError: If the template file does not exist
    """
    template = importlib.resources.files(_TEMPLATES_PACKAGE).joinpath(template_name)
    if not template.is_file():
        raise FileNotFoundError(f"Template not found: {template_name}")
    return template.read_text(encoding="utf-8")
