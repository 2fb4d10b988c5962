"""Unit tests for the route table and the navigation shell."""

from __future__ import annotations

import re
import typing as typ

from ngscaffold.config import PageConfig
from ngscaffold.generator import RouteTableBuilder, ShellBuilder

if typ.TYPE_CHECKING:
    from pathlib import Path

ROUTE_PATTERN = re.compile(
    r"\{ path: '(.*?)', loadComponent: \(\) => import\('(.*?)'\)\.then\(m => m\.(\w+)\) \}"
)
LINK_PATTERN = re.compile(r"""<a \[routerLink\]="'/(.*?)'".*?>(.*?)</a>""")

PAGES = [
    PageConfig(route="about", title="About"),
    PageConfig(route="", title="Welcome"),
    PageConfig(route="contact", menu_label="Say hi"),
    PageConfig(route="pricing"),
]


def test_route_entries_preserve_order_and_count() -> None:
    """One entry per page, in input order, pointing at the page modules."""
    text = RouteTableBuilder().build(PAGES)
    assert ROUTE_PATTERN.findall(text) == [
        ("about", "./generated/page-about.component", "PageAboutComponent"),
        ("", "./generated/page-home.component", "PageHomeComponent"),
        ("contact", "./generated/page-contact.component", "PageContactComponent"),
        ("pricing", "./generated/page-pricing.component", "PagePricingComponent"),
    ]
    assert text.count("},\n") == len(PAGES) - 1, "entries should be comma-separated"


def test_duplicate_routes_are_kept() -> None:
    """Route order and duplicates are left to the consuming router."""
    pages = [PageConfig(route="a"), PageConfig(route="a")]
    assert len(RouteTableBuilder().entries(pages)) == 2


def test_route_paths_are_escaped() -> None:
    """Quotes in routes cannot break out of the string literal."""
    text = RouteTableBuilder().build([PageConfig(route="it's")])
    assert "path: 'it\\'s'" in text


def test_empty_route_table() -> None:
    """No pages yields an empty route array."""
    text = RouteTableBuilder().build([])
    assert "export const routes: Routes = [\n];" in text


def test_shell_links_follow_pages(tmp_path: Path) -> None:
    """The shell has a brand link, one link per page, and one outlet."""
    path = ShellBuilder().write(tmp_path, PAGES)
    text = path.read_text(encoding="utf-8")

    assert path.name == "app.component.ts"
    assert LINK_PATTERN.findall(text) == [
        ("", "Logo"),
        ("about", "About"),
        ("", "Welcome"),
        ("contact", "Say hi"),
        ("pricing", "pricing"),
    ]
    assert text.count("<router-outlet></router-outlet>") == 1


def test_shell_defaults_home_label() -> None:
    """An untitled page on the empty route is labelled Home."""
    links = ShellBuilder.links([PageConfig(route="")])
    assert [(link.label, link.href) for link in links] == [("Home", "")]
