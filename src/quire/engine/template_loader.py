"""Jinja2 template loader for page and layout rendering.

Wires the filtering tag, the sitemap helper and the text filters into one
environment.
"""

from pathlib import Path
from typing import Any

from jinja2 import BaseLoader, Environment, FileSystemLoader, Template, pass_context
from jinja2.runtime import Context
from markupsafe import Markup

from quire.core.context import RenderingContext
from quire.core.utils import slugify, truncate_words
from quire.engine.extensions import CONTEXT_VARIABLE, FilteringExtension
from quire.engine.filters import FilterRegistry, default_registry
from quire.helpers.xml_sitemap import xml_sitemap


@pass_context
def _xml_sitemap_global(template_context: Context, items=None, rep_select=None) -> Markup:
    context = template_context.get(CONTEXT_VARIABLE) or RenderingContext()
    return Markup(xml_sitemap(context, items=items, rep_select=rep_select))


class TemplateLoader:
    """Loads and renders Jinja2 templates with Quire's helpers available.

    Supports:
    - ``{% filter_block %}`` for running registered content filters
    - ``xml_sitemap()`` as a template global
    - ``slugify`` and ``truncate_words`` as Jinja2 filters
    """

    def __init__(
        self,
        template_dir: Path | None = None,
        *,
        loader: BaseLoader | None = None,
        registry: FilterRegistry | None = None,
    ) -> None:
        """Initialize TemplateLoader.

        Args:
            template_dir: Directory to load templates from. Defaults to the current working directory.
            loader: Jinja2 loader to use instead of a filesystem loader
            registry: Registry ``{% filter_block %}`` resolves names in

        """
        self.template_dir = template_dir if template_dir is not None else Path.cwd()

        self.env = Environment(
            loader=loader or FileSystemLoader(self.template_dir),
            autoescape=False,
            extensions=[FilteringExtension],
            keep_trailing_newline=True,
        )
        self.env.quire_filter_registry = registry or default_registry  # type: ignore[attr-defined]

        self._register_helpers()

    def _register_helpers(self) -> None:
        self.env.filters["slugify"] = slugify
        self.env.filters["truncate_words"] = truncate_words
        self.env.globals["xml_sitemap"] = _xml_sitemap_global

    def load_template(self, template_name: str) -> Template:
        """Load a template by name.

        Raises:
            TemplateNotFound: If template does not exist

        """
        return self.env.get_template(template_name)

    def render_template(self, template_name: str, context: RenderingContext, **variables: Any) -> str:
        """Load and render a template for the page described by ``context``."""
        template = self.load_template(template_name)
        return template.render({CONTEXT_VARIABLE: context, **variables})

    def render_string(self, source: str, context: RenderingContext, **variables: Any) -> str:
        return self.env.from_string(source).render({CONTEXT_VARIABLE: context, **variables})
