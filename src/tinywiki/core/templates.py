"""Template registry for page rendering.

Templates are parsed once when the registry is built and never change
afterwards, so a single registry is shared by all requests.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
    select_autoescape,
)

from tinywiki.assets import get_templates_dir
from tinywiki.core.page import Page
from tinywiki.errors import RenderError

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATES = ("view", "edit")


class TemplateRegistry:
    """Immutable set of named, pre-parsed HTML templates."""

    def __init__(self, templates: Mapping[str, Template]) -> None:
        """Initialize registry.

        Args:
            templates: Parsed templates keyed by name (e.g., "view")
        """
        self._templates = MappingProxyType(dict(templates))

    @classmethod
    def load(
        cls,
        templates_dir: Path | None = None,
        names: Iterable[str] = DEFAULT_TEMPLATES,
    ) -> TemplateRegistry:
        """Parse `<name>.html` for each name from a directory.

        Args:
            templates_dir: Directory containing the templates.
                           If None, the bundled templates are used.
            names: Template names to load

        Returns:
            Registry holding the parsed templates

        Raises:
            jinja2.TemplateError: If a template is missing or fails to parse
        """
        directory = templates_dir if templates_dir is not None else get_templates_dir()
        env = Environment(
            loader=FileSystemLoader(directory),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
        )
        templates = {name: env.get_template(f"{name}.html") for name in names}
        logger.debug(f"Loaded templates {sorted(templates)} from {directory}")
        return cls(templates)

    @property
    def names(self) -> frozenset[str]:
        """Names of the registered templates."""
        return frozenset(self._templates)

    def render(self, name: str, page: Page) -> str:
        """Merge a page into the named template.

        Args:
            name: Template name (e.g., "view")
            page: Page to render

        Returns:
            Rendered HTML

        Raises:
            RenderError: If the template is unknown or fails to execute
        """
        template = self._templates.get(name)
        if template is None:
            raise RenderError(f"template {name!r} is not registered")

        try:
            return template.render(page=page)
        except TemplateError as e:
            raise RenderError(f"template {name!r}: {e}") from e
