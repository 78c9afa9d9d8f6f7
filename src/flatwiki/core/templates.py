"""HTML presentation via Jinja2 templates.

Templates are bundled in the flatwiki package; a configured directory takes
precedence over the bundled one.
"""

from collections.abc import Sequence
from pathlib import Path

from jinja2 import (
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    TemplateError,
    select_autoescape,
)

from flatwiki.core.titles import ACTIONS
from flatwiki.core.types import Page, PageEntry
from flatwiki.errors import RenderError

RenderData = Page | Sequence[PageEntry] | None


class TemplateRenderer:
    """Renders pages and listings into HTML response bodies."""

    def __init__(
        self,
        templates_dir: Path | None = None,
        *,
        actions: Sequence[str] = ACTIONS,
    ) -> None:
        """Initialize renderer.

        Args:
            templates_dir: Directory with override templates. Names missing
                           there fall back to the bundled templates.
            actions: Enabled route actions; templates only link to these
        """
        self._templates_dir = templates_dir
        loaders: list[FileSystemLoader | PackageLoader] = []
        if templates_dir is not None:
            loaders.append(FileSystemLoader(str(templates_dir)))
        loaders.append(PackageLoader("flatwiki", "templates"))
        self._env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(["html"]),
        )
        self._env.globals["actions"] = tuple(actions)

    @property
    def templates_dir(self) -> Path | None:
        return self._templates_dir

    def render(self, template_name: str, data: RenderData, **context: object) -> str:
        """Render a template.

        Args:
            template_name: Template name without extension (e.g., "view")
            data: Page, sequence of page entries, or None for the blank form
            **context: Extra template variables (e.g., an error message)

        Returns:
            Rendered HTML

        Raises:
            RenderError: If the template is missing or fails to render
        """
        try:
            template = self._env.get_template(f"{template_name}.html")
            return template.render(data=data, **context)
        except TemplateError as e:
            raise RenderError(f"render {template_name}: {e}") from e
