"""Global stylesheet shared by the shell and pages."""

from __future__ import annotations

import typing as typ

from .models import Artifact
from .renderer import TemplateRenderer

if typ.TYPE_CHECKING:
    from pathlib import Path

STYLES_TEMPLATE = "styles.css.jinja"


class StylesheetWriter:
    """Render the fixed global stylesheet."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    def artifact(self, path: Path) -> Artifact:
        """Return the stylesheet destined for ``path`` without writing it."""
        return Artifact(path=path, text=self.renderer.render(STYLES_TEMPLATE))

    def write(self, path: Path) -> Path:
        """Write the stylesheet to ``path`` and return it."""
        return self.artifact(path).write()


__all__ = ["StylesheetWriter"]
