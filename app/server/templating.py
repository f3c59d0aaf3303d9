"""Page rendering with Jinja2 templates."""

from pathlib import Path
from typing import Any, Mapping, Union

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from infrastructure.logging import get_module_logger

logger = get_module_logger()

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


class PageRenderError(Exception):
    """Raised when a page template cannot be rendered."""

    def __init__(self, template_name: str, reason: str):
        self.template_name = template_name
        self.reason = reason
        super().__init__(f"Could not render {template_name}: {reason}")


class PageRenderer:
    """Renders HTML pages from a generic string-keyed context."""

    def __init__(self, templates_dir: Union[str, Path] = TEMPLATES_DIR):
        self.templates_dir = Path(templates_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
        )

    def render(self, template_name: str, context: Mapping[str, Any]) -> str:
        """Render template_name with context.

        Raises:
            PageRenderError: If the template is missing or fails to render.
        """
        try:
            template = self.env.get_template(template_name)
            return template.render(dict(context))
        except TemplateError as e:
            logger.error("page_render_failed", template=template_name, error=str(e))
            raise PageRenderError(template_name, str(e)) from e
