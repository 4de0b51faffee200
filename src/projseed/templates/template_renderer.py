"""Load and render Jinja2 templates bundled with projseed."""

import importlib.resources

import jinja2


def render_template(template_name: str, *, package: str = __package__, **kwargs) -> str:
    """Load a Jinja2 template by name and render it with the given arguments.

    Args:
        template_name: Template filename (e.g. "report.j2")
        package: Package the template is loaded from. Defaults to
            projseed.templates.
        **kwargs: Template variables.

    Returns:
        The rendered template string.
    """
    source = importlib.resources.files(package).joinpath(template_name).read_text(encoding="utf-8")
    template = jinja2.Template(source, trim_blocks=True, lstrip_blocks=True)
    return template.render(**kwargs)
