"""Load a site description into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import _coerce_props, _merge_layout, _optional_str, _require_list
from .models import (
    ComponentConfig,
    LayoutConfig,
    PageConfig,
    SectionConfig,
    SiteConfig,
    SiteConfigError,
)


def load_site_config(path: Path) -> SiteConfig:
    """Load the description of components and pages to scaffold.

    Parameters
    ----------
    path : Path
        Filesystem path to the site description (for example,
        ``mapping.json``). JSON is read through the YAML 1.2 loader, so YAML
        descriptions are accepted as well.

    Returns
    -------
    SiteConfig
        Parsed site description with components and pages in input order.

    Raises
    ------
    FileNotFoundError
        If the description file does not exist at ``path``.
    TypeError
        If the top-level structure is not a mapping.
    SiteConfigError
        If required fields are missing or have the wrong shape.
    YAMLError
        If the content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from ngscaffold.config import load_site_config
    >>> site = load_site_config(Path("mapping.json"))  # doctest: +SKIP
    >>> site.project_name  # doctest: +SKIP
    'my-site'
    """
    if not path.exists():
        msg = f"Site description '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level site description must be a mapping."
        raise TypeError(msg)
    return build_site_config(loaded)


def build_site_config(raw: typ.Mapping[str, typ.Any]) -> SiteConfig:
    """Build a SiteConfig from an already parsed mapping."""
    project_name = _optional_str(raw.get("projectName"))
    if not project_name:
        msg = "Site description requires a 'projectName'."
        raise SiteConfigError(msg)

    components = [
        _build_component_config(entry, index=index)
        for index, entry in enumerate(
            _require_list(raw.get("components"), where="components"), start=1
        )
    ]
    pages = [
        _build_page_config(entry, index=index)
        for index, entry in enumerate(
            _require_list(raw.get("pages"), where="pages"), start=1
        )
    ]
    layout = _merge_layout(LayoutConfig(), raw.get("layout"))

    return SiteConfig(
        project_name=project_name,
        components=components,
        pages=pages,
        layout=layout,
    )


def _build_component_config(entry: object, *, index: int) -> ComponentConfig:
    """Build a ComponentConfig for a single component entry."""
    match entry:
        case {"name": name, **rest} if _optional_str(name):
            pass
        case _:
            msg = f"Component #{index} requires a 'name'."
            raise SiteConfigError(msg)
    return ComponentConfig(name=str(name), preset=_optional_str(rest.get("preset")))


def _build_page_config(entry: object, *, index: int) -> PageConfig:
    """Build a PageConfig for a single page entry."""
    if not isinstance(entry, dict):
        msg = f"Page #{index} must be a mapping."
        raise SiteConfigError(msg)
    route = entry.get("route")
    where = f"pages[{index}].sections"
    sections = tuple(
        _build_section_config(section, where=f"{where}[{position}]")
        for position, section in enumerate(
            _require_list(entry.get("sections"), where=where), start=1
        )
    )
    return PageConfig(
        route="" if route is None else str(route),
        title=_optional_str(entry.get("title")),
        menu_label=_optional_str(entry.get("menuLabel")),
        sections=sections,
        footer=_build_footer_config(entry.get("footer")),
    )


def _build_section_config(entry: object, *, where: str) -> SectionConfig:
    """Build a SectionConfig, requiring a component reference."""
    match entry:
        case {"component": component, **rest} if _optional_str(component):
            pass
        case _:
            msg = f"'{where}' requires a 'component'."
            raise SiteConfigError(msg)
    return SectionConfig(component=str(component), props=_coerce_props(rest.get("props")))


def _build_footer_config(entry: object) -> SectionConfig | None:
    """Build the optional footer; a footer without a component is absent."""
    match entry:
        case {"component": component, **rest} if _optional_str(component):
            return SectionConfig(
                component=str(component), props=_coerce_props(rest.get("props"))
            )
        case _:
            return None


__all__ = ["build_site_config", "load_site_config"]
