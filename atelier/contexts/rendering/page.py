"""
HTML projection of a session.

Renders the card table as static markup: each section through its kind's
template, hidden cards with the ``hidden`` class. The projection reads state
and never mutates it.
"""

import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

from atelier.contexts.rendering.exceptions import TemplateRenderError
from atelier.contexts.rendering.logger import _log_debug
from atelier.contexts.rendering.sections import SectionView

load_dotenv()
DEFAULT_TEMPLATES_PATH = Path(__file__).resolve().parent / "templates"
TEMPLATES_PATH = Path(os.getenv("ATELIER_TEMPLATES_PATH", str(DEFAULT_TEMPLATES_PATH)))


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for HTML generation.

    Section templates are stored in templates/{kind}/template.html.jinja;
    the page shell is templates/page.html.jinja.
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Base path for templates. Defaults to
                ATELIER_TEMPLATES_PATH from environment, else the packaged templates
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = templates_path
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def get_template(self, kind: str) -> Template:
        """
        Get a section template by kind, loading and caching it if necessary.

        Args:
            kind: Section kind value (e.g., 'gallery')

        Raises:
            TemplateNotFound: If template file doesn't exist
        """
        if kind in self._cache:
            return self._cache[kind]

        template_path = f"{kind}/template.html.jinja"

        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for kind '{kind}' at {self.templates_path / template_path}"
            ) from e

        self._cache[kind] = template
        return template

    def get_template_path(self, kind: str) -> Path:
        return self.templates_path / kind / "template.html.jinja"

    def page_template(self) -> Template:
        return self.env.get_template("page.html.jinja")

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, kind: str) -> bool:
        return kind in self._cache


def render_section_html(view: SectionView, session, registry: TemplateRegistry) -> str:
    """
    Render one section through its kind's template.

    Raises:
        TemplateRenderError: If the template fails on this section's data
    """
    kind = view.kind.value
    template = registry.get_template(kind)
    try:
        return template.render(view=view, session=session)
    except Exception as e:
        raise TemplateRenderError(
            f"Failed to render section '{view.key}'",
            kind=kind,
            template_path=registry.get_template_path(kind),
            original_error=e,
        ) from e


def render_page(session, registry: TemplateRegistry = None) -> str:
    """
    Render the full page for a started session.

    Args:
        session: PortfolioSession after ``start``/``build``
        registry: Template registry (defaults to the packaged templates)

    Returns:
        HTML document
    """
    registry = registry or TemplateRegistry()
    sections = []
    for view in session.views:
        sections.append({"view": view, "html": render_section_html(view, session, registry)})
        _log_debug(f"Projected section {view.key}")

    return registry.page_template().render(
        site=session.document.site,
        theme=session.theme,
        search=session.search,
        sections=sections,
    )
