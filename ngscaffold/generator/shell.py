"""Build the root shell component with site navigation."""

from __future__ import annotations

import typing as typ

from ngscaffold._constants import BRAND_LABEL

from .models import Artifact, NavLink
from .renderer import TemplateRenderer

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from ngscaffold.config import PageConfig

SHELL_TEMPLATE = "app.component.ts.jinja"
SHELL_FILE = "app.component.ts"


class ShellBuilder:
    """Render ``app.component.ts``: brand link, page links, router outlet."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    @staticmethod
    def links(pages: cabc.Sequence[PageConfig]) -> list[NavLink]:
        """Return one navigation link per page, in input order."""
        return [NavLink(label=page.nav_label, href=page.route) for page in pages]

    def build(self, pages: cabc.Sequence[PageConfig]) -> str:
        """Return the source of the root shell component."""
        return self.renderer.render(
            SHELL_TEMPLATE, brand_label=BRAND_LABEL, links=self.links(pages)
        )

    def artifact(self, app_dir: Path, pages: cabc.Sequence[PageConfig]) -> Artifact:
        """Return the shell file without writing it."""
        return Artifact(path=app_dir / SHELL_FILE, text=self.build(pages))

    def write(self, app_dir: Path, pages: cabc.Sequence[PageConfig]) -> Path:
        """Write the shell into ``app_dir`` and return its path."""
        return self.artifact(app_dir, pages).write()


__all__ = ["SHELL_FILE", "ShellBuilder"]
