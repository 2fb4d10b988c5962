"""Typed dataclasses describing a scaffold site description."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .._constants import HOME_LABEL


class SiteConfigError(ValueError):
    """Raised when the site description is invalid or incomplete."""


@dc.dataclass(slots=True)
class LayoutConfig:
    """Output paths, relative to the generated project root."""

    app_dir: str = "src/app"
    generated_dir: str = "generated"
    stylesheet: str = "src/styles.css"


@dc.dataclass(slots=True, frozen=True)
class ComponentConfig:
    """A reusable UI component and the preset used to synthesize it."""

    name: str
    preset: str | None = None


@dc.dataclass(slots=True, frozen=True)
class SectionConfig:
    """One instantiation of a component within a page."""

    component: str
    props: typ.Any = dc.field(default_factory=dict)


@dc.dataclass(slots=True, frozen=True)
class PageConfig:
    """A routed page composed of ordered sections and an optional footer."""

    route: str = ""
    title: str | None = None
    menu_label: str | None = None
    sections: tuple[SectionConfig, ...] = ()
    footer: SectionConfig | None = None

    @property
    def nav_label(self) -> str:
        """Return the navigation label: menu label, title, route, then Home."""
        return self.menu_label or self.title or self.route or HOME_LABEL

    def placements(self) -> tuple[SectionConfig, ...]:
        """Return the sections followed by the footer, in rendering order."""
        if self.footer is None:
            return self.sections
        return (*self.sections, self.footer)


@dc.dataclass(slots=True)
class SiteConfig:
    """The full site description driving one scaffold run."""

    project_name: str
    components: list[ComponentConfig] = dc.field(default_factory=list)
    pages: list[PageConfig] = dc.field(default_factory=list)
    layout: LayoutConfig = dc.field(default_factory=LayoutConfig)

    def component_names(self) -> set[str]:
        """Return the names of every declared component."""
        return {component.name for component in self.components}


__all__ = [
    "ComponentConfig",
    "LayoutConfig",
    "PageConfig",
    "SectionConfig",
    "SiteConfig",
    "SiteConfigError",
]
