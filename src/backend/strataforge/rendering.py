"""Error page rendering.

TemplateRenderer is the collaborator the ErrorResponder renders through.
Jinja2Renderer is the production implementation on top of Starlette's
Jinja2 integration. fallback_body() is the static page sent when no
renderer is configured or rendering fails.
"""

from html import escape
from typing import Any, Protocol

from starlette.templating import Jinja2Templates


class TemplateRenderer(Protocol):
    def render(self, template_name: str, context: dict[str, Any]) -> str: ...


class Jinja2Renderer:
    """Renders templates from a directory. Raises jinja2.TemplateNotFound for
    missing templates and jinja2.TemplateError for broken ones."""

    def __init__(self, directory: str) -> None:
        self.directory = directory
        self._templates = Jinja2Templates(directory=directory)

    def render(self, template_name: str, context: dict[str, Any]) -> str:
        return self._templates.get_template(template_name).render(context)


def fallback_body(status_code: int, title: str, message: str) -> str:
    return (
        "<!DOCTYPE html>\n"
        f"<html><head><title>{status_code} {escape(title)}</title></head>"
        f"<body><h1>{status_code} {escape(title)}</h1>"
        f"<p>{escape(message)}</p></body></html>\n"
    )
