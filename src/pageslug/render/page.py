"""Page Template Renderer — Jinja2 rendering bound to a manifest lookup.

Templates see exactly three names besides Jinja2's own globals:

  • page_base_name          — logical name of the page being rendered
  • file_name(*parts)       — fingerprinted file name for a logical key, or ""
  • file_exists(*parts)     — whether the manifest holds the logical key

Example:
    {% if file_exists(page_base_name, ".css") %}
    <link rel="stylesheet" href="{{ file_name(page_base_name, '.css') }}">
    {% endif %}
"""

from __future__ import annotations

import logging
import os
from importlib import resources

import jinja2
from jinja2 import meta

from pageslug.config import get_config
from pageslug.errors import RenderError, TemplateError
from pageslug.manifest.lookup import ManifestLookup

logger = logging.getLogger(__name__)

DEFAULT_PAGE_TEMPLATE: str = (
    resources.files("pageslug.render")
    .joinpath("templates/default-page.html")
    .read_text(encoding="utf-8")
)


def page_base_name_for(template_path: str | os.PathLike | None) -> str:
    """Logical page name for a template path.

    "somepath/about.tmpl" -> "about"; without a path the configured default
    ("index") is used. Only the last extension is removed, and a name that is
    all extension (".page") yields "".
    """
    if not template_path:
        return get_config().render.default_page_base_name
    base = os.path.basename(os.fspath(template_path))
    stem, dot, _ = base.rpartition(".")
    return stem if dot else base


class PageRenderer:
    """Renders page templates against a ``ManifestLookup``."""

    def __init__(self, lookup: ManifestLookup, page_base_name: str | None = None):
        config = get_config().render
        self.lookup = lookup
        self.page_base_name = (
            page_base_name if page_base_name is not None else config.default_page_base_name
        )
        self.env = jinja2.Environment(
            autoescape=config.autoescape,
            undefined=jinja2.StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.globals.update(self.bindings())

    def bindings(self) -> dict:
        """Names injected into every template."""
        return {
            "page_base_name": self.page_base_name,
            "file_name": self.lookup.resolve_name,
            "file_exists": self.lookup.exists,
        }

    def compile(self, source: str, name: str = "page") -> jinja2.Template:
        """Parse a template and reject references to unbound names."""
        try:
            ast = self.env.parse(source, name=name)
        except jinja2.TemplateSyntaxError as e:
            raise TemplateError(f"Invalid template syntax in {name!r}: {e.message}", e.lineno) from e

        unbound = meta.find_undeclared_variables(ast) - set(self.env.globals)
        if unbound:
            raise TemplateError(
                f"Template {name!r} references unbound names: {', '.join(sorted(unbound))}"
            )
        return self.env.from_string(ast)

    def render(self, source: str, name: str = "page") -> str:
        """Compile and execute a template, returning the rendered text."""
        template = self.compile(source, name)
        try:
            return template.render()
        except Exception as e:
            raise RenderError(f"Error rendering template {name!r}: {type(e).__name__}: {e}") from e

    def render_default(self) -> str:
        logger.info("No --in template specified, using default")
        return self.render(DEFAULT_PAGE_TEMPLATE, name="default-page")
