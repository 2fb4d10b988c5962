"""Build the route table lazily loading every generated page."""

from __future__ import annotations

import typing as typ

from ngscaffold import naming

from .models import Artifact, RouteEntry
from .renderer import TemplateRenderer

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from ngscaffold.config import PageConfig

ROUTES_TEMPLATE = "app.routes.ts.jinja"
ROUTES_FILE = "app.routes.ts"


class RouteTableBuilder:
    """Render ``app.routes.ts`` with one entry per page, in input order.

    Entries are not deduplicated or reordered; when two pages share a path
    the consuming router decides which one wins.
    """

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        *,
        generated_dir: str = "generated",
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.generated_dir = generated_dir

    def entries(self, pages: cabc.Sequence[PageConfig]) -> list[RouteEntry]:
        """Return the route entries for ``pages``."""
        return [
            RouteEntry(
                path=page.route,
                import_path=naming.page_import_path(page.route, self.generated_dir),
                class_name=naming.page_class(page.route),
            )
            for page in pages
        ]

    def build(self, pages: cabc.Sequence[PageConfig]) -> str:
        """Return the source of the route table."""
        return self.renderer.render(ROUTES_TEMPLATE, entries=self.entries(pages))

    def artifact(self, app_dir: Path, pages: cabc.Sequence[PageConfig]) -> Artifact:
        """Return the route table file without writing it."""
        return Artifact(path=app_dir / ROUTES_FILE, text=self.build(pages))

    def write(self, app_dir: Path, pages: cabc.Sequence[PageConfig]) -> Path:
        """Write the route table into ``app_dir`` and return its path."""
        return self.artifact(app_dir, pages).write()


__all__ = ["ROUTES_FILE", "RouteTableBuilder"]
