"""Derive file, selector, and type names from human-readable names.

Every generated file refers to its neighbours by derived names: a page
imports ``./hero-banner.component`` and instantiates ``<app-hero-banner>``
while the component file declares ``HeroBannerComponent``. These references
only line up because all of them are produced here, so no other module
re-implements any of this logic.

Examples
--------
>>> hyphenated("Hero Banner")
'hero-banner'
>>> capitalized("Hero Banner")
'HeroBanner'
>>> page_class("")
'PageHomeComponent'
"""

from __future__ import annotations

import re

from ._constants import (
    CLASS_SUFFIX,
    COMPONENT_SUFFIX,
    HOME_SLUG,
    PAGE_CLASS_QUALIFIER,
    PAGE_PREFIX,
    SELECTOR_PREFIX,
    SOURCE_EXTENSION,
)

CASE_BOUNDARY_PATTERN = re.compile(r"([a-z0-9])([A-Z])")
GAP_PATTERN = re.compile(r"[\s_]+")
SEPARATOR_PATTERN = re.compile(r"[-_\s]+")
ROUTE_SEPARATOR_PATTERN = re.compile(r"/+")


def hyphenated(name: str) -> str:
    """Return the lowercase, hyphen-separated slug for ``name``.

    A hyphen is inserted at every lowercase/digit to uppercase boundary and
    each run of whitespace or underscores becomes a single hyphen. Applying
    the function to its own output returns it unchanged.
    """
    split = CASE_BOUNDARY_PATTERN.sub(r"\1-\2", name)
    return GAP_PATTERN.sub("-", split).lower()


def capitalized(name: str) -> str:
    """Return ``name`` as a type-name fragment with separators removed.

    The first character and the first character after every run of hyphens,
    underscores, or whitespace are uppercased; the rest is left untouched.
    """
    parts = SEPARATOR_PATTERN.split(name)
    return "".join(part[:1].upper() + part[1:] for part in parts if part)


def component_class(name: str) -> str:
    """Return the exported class name of the component called ``name``."""
    return f"{capitalized(name)}{CLASS_SUFFIX}"


def component_selector(name: str) -> str:
    """Return the element selector of the component called ``name``."""
    return f"{SELECTOR_PREFIX}-{hyphenated(name)}"


def component_module(name: str) -> str:
    """Return the extension-less module name of a component file."""
    return f"{hyphenated(name)}{COMPONENT_SUFFIX}"


def component_file(name: str) -> str:
    """Return the file name of the component called ``name``."""
    return f"{component_module(name)}{SOURCE_EXTENSION}"


def page_slug(route: str) -> str:
    """Return the slug naming the page served at ``route``.

    Nested routes have their ``/`` separators folded into hyphens so the page
    lands in the flat generated directory; the empty route is ``home``.
    """
    folded = ROUTE_SEPARATOR_PATTERN.sub("-", route.strip("/"))
    return hyphenated(folded) if folded else HOME_SLUG


def page_name(route: str) -> str:
    """Return the component-style name (``page-<slug>``) of a page."""
    return f"{PAGE_PREFIX}-{page_slug(route)}"


def page_class(route: str) -> str:
    """Return the exported class name of the page served at ``route``."""
    return f"{PAGE_CLASS_QUALIFIER}{capitalized(page_slug(route))}{CLASS_SUFFIX}"


def page_selector(route: str) -> str:
    """Return the element selector of the page served at ``route``."""
    return component_selector(page_name(route))


def page_module(route: str) -> str:
    """Return the extension-less module name of a page file."""
    return component_module(page_name(route))


def page_file(route: str) -> str:
    """Return the file name of the page served at ``route``."""
    return component_file(page_name(route))


def page_import_path(route: str, generated_dir: str = "generated") -> str:
    """Return the import specifier used by the route table for a page."""
    return f"./{generated_dir}/{page_module(route)}"


__all__ = [
    "capitalized",
    "component_class",
    "component_file",
    "component_module",
    "component_selector",
    "hyphenated",
    "page_class",
    "page_file",
    "page_import_path",
    "page_module",
    "page_name",
    "page_selector",
    "page_slug",
]
