"""Load and validate the site description driving a scaffold run.

This subpackage parses the project's ``mapping.json`` (or an equivalent YAML
file), turns component and page entries into typed dataclasses
(:class:`SiteConfig`, :class:`PageConfig`, etc.), and checks that pages only
reference declared components. The primary entry point is
:func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from ngscaffold.config import load_site_config
>>> site = load_site_config(Path("mapping.json"))  # doctest: +SKIP
>>> [page.route for page in site.pages]  # doctest: +SKIP
['', 'about']
"""

from .loader import build_site_config, load_site_config
from .models import (
    ComponentConfig,
    LayoutConfig,
    PageConfig,
    SectionConfig,
    SiteConfig,
    SiteConfigError,
)
from .validation import ReferenceIssue, SiteReferenceError, ensure_valid, validate_site

__all__ = [
    "ComponentConfig",
    "LayoutConfig",
    "PageConfig",
    "ReferenceIssue",
    "SectionConfig",
    "SiteConfig",
    "SiteConfigError",
    "SiteReferenceError",
    "build_site_config",
    "ensure_valid",
    "load_site_config",
    "validate_site",
]
