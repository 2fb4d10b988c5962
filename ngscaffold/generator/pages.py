"""Assemble page components from ordered sections and an optional footer.

A page file imports every component it uses exactly once, in order of first
use, and exposes one read-only field per section holding that section's
props. Fields are named ``S1``..``Sn`` in source order with the footer last,
and the page template instantiates each component bound to its field:

>>> from ngscaffold.config import PageConfig, SectionConfig
>>> page = PageConfig(
...     route="",
...     sections=(SectionConfig("Hero Banner", {"headline": "Hi"}),),
... )
>>> model = build_page_model(page)
>>> model.class_name, [field.identifier for field in model.fields]
('PageHomeComponent', ['S1'])
>>> model.fields[0].markup
'<app-hero-banner [props]="S1"></app-hero-banner>'
"""

from __future__ import annotations

import typing as typ

from ngscaffold import naming

from .models import Artifact, ComponentReference, PageField, PageModel
from .renderer import TemplateRenderer, props_literal

if typ.TYPE_CHECKING:
    from pathlib import Path

    from ngscaffold.config import PageConfig

PAGE_TEMPLATE = "page.component.ts.jinja"
FIELD_PREFIX = "S"


def build_page_model(page: PageConfig) -> PageModel:
    """Return the template model of ``page``."""
    placements = page.placements()
    used = dict.fromkeys(placement.component for placement in placements)
    references = tuple(
        ComponentReference(
            name=name,
            class_name=naming.component_class(name),
            module=naming.component_module(name),
        )
        for name in used
    )
    fields = tuple(
        PageField(
            identifier=f"{FIELD_PREFIX}{ordinal}",
            selector=naming.component_selector(placement.component),
            literal=props_literal(placement.props),
        )
        for ordinal, placement in enumerate(placements, start=1)
    )
    return PageModel(
        class_name=naming.page_class(page.route),
        selector=naming.page_selector(page.route),
        title=page.title,
        references=references,
        fields=fields,
    )


class PageAssembler:
    """Render page components and write them to the generated dir."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    def render(self, page: PageConfig) -> str:
        """Return the full source of the page component for ``page``."""
        return self.renderer.render(PAGE_TEMPLATE, page=build_page_model(page))

    def artifact(self, output_dir: Path, page: PageConfig) -> Artifact:
        """Return the page file for ``page`` without writing it."""
        return Artifact(
            path=output_dir / naming.page_file(page.route),
            text=self.render(page),
        )

    def assemble(self, output_dir: Path, page: PageConfig) -> Path:
        """Write ``<output_dir>/page-<slug>.component.ts`` and return its path."""
        return self.artifact(output_dir, page).write()


__all__ = ["FIELD_PREFIX", "PageAssembler", "build_page_model"]
