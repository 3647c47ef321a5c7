"""Template rendering for the generated HTML pages."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

# Template directory
TEMPLATES_DIR = Path(__file__).parent / "templates"


def get_jinja_env() -> Environment:
    """Get configured Jinja2 environment.

    Autoescaping is off: the templates receive already-rendered HTML.
    """
    return Environment(
        loader=FileSystemLoader(TEMPLATES_DIR),
        autoescape=select_autoescape(default=False),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def render_template(name: str, **context) -> str:
    """Render a template from the package's templates directory."""
    env = get_jinja_env()
    template = env.get_template(name)
    return template.render(**context)  # type: ignore[no-any-return]
