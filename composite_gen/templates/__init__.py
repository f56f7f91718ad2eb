from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, select_autoescape

from composite_gen.errors import TemplateRenderError

TEMPLATES_DIR = Path(__file__).parent / "composite"


def _pyrepr(value) -> str:
    """Render a Python literal."""
    return repr(value)


def build_environment(templates_dir: Path = TEMPLATES_DIR) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=select_autoescape(disabled_extensions=("jinja",)),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    env.filters["pyrepr"] = _pyrepr
    return env


env = build_environment()


def render(template_name: str, **context) -> str:
    """Render one template, turning any Jinja failure into TemplateRenderError."""
    try:
        return env.get_template(template_name).render(**context)
    except TemplateError as exc:
        raise TemplateRenderError(f"{template_name}: {exc}") from exc
