"""Check the reference graph of a site description before generation.

Pages refer to components by name and to each other through derived file
and class names. Nothing about the generated sources catches a broken link
until the front end is compiled, so these checks run up front:

* every section and footer names a declared component;
* no two pages share a route;
* no two component names derive to the same slug or class name;
* no two routes derive to the same page slug;
* no component shares a module or class name with a generated page.

Example
-------
>>> from ngscaffold.config import SiteConfig, validate_site
>>> validate_site(SiteConfig(project_name="demo"))
[]
"""

from __future__ import annotations

import collections
import dataclasses as dc
import typing as typ

from ngscaffold import naming

from .models import SiteConfig, SiteConfigError

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@dc.dataclass(slots=True, frozen=True)
class ReferenceIssue:
    """A single inconsistency found in the site description."""

    kind: str
    message: str


class SiteReferenceError(SiteConfigError):
    """Raised when pages reference components or names inconsistently."""

    def __init__(self, issues: cabc.Sequence[ReferenceIssue]) -> None:
        self.issues = list(issues)
        lines = "\n".join(f"- {issue.message}" for issue in self.issues)
        super().__init__(f"Site description has dangling references:\n{lines}")


def validate_site(site: SiteConfig) -> list[ReferenceIssue]:
    """Return every reference issue in ``site``, in a stable order."""
    issues: list[ReferenceIssue] = []
    issues.extend(_missing_components(site))
    issues.extend(_duplicate_routes(site))
    issues.extend(
        _collisions(
            (component.name for component in site.components),
            naming.hyphenated,
            kind="component-slug",
            label="Components",
            noun="slug",
        )
    )
    issues.extend(
        _collisions(
            (component.name for component in site.components),
            naming.component_class,
            kind="component-class",
            label="Components",
            noun="class name",
        )
    )
    issues.extend(
        _collisions(
            dict.fromkeys(page.route for page in site.pages),
            naming.page_slug,
            kind="page-slug",
            label="Routes",
            noun="page slug",
        )
    )
    issues.extend(
        _page_component_clashes(
            site, naming.component_module, naming.page_module, noun="module"
        )
    )
    issues.extend(
        _page_component_clashes(
            site, naming.component_class, naming.page_class, noun="class name"
        )
    )
    return issues


def ensure_valid(site: SiteConfig) -> None:
    """Raise :class:`SiteReferenceError` when ``site`` has reference issues."""
    issues = validate_site(site)
    if issues:
        raise SiteReferenceError(issues)


def _missing_components(site: SiteConfig) -> cabc.Iterator[ReferenceIssue]:
    known = site.component_names()
    for page in site.pages:
        for placement in page.placements():
            if placement.component not in known:
                yield ReferenceIssue(
                    kind="missing-component",
                    message=(
                        f"Page '{page.route or '/'}' uses undeclared component "
                        f"'{placement.component}'."
                    ),
                )


def _duplicate_routes(site: SiteConfig) -> cabc.Iterator[ReferenceIssue]:
    counts = collections.Counter(page.route for page in site.pages)
    for route, count in counts.items():
        if count > 1:
            yield ReferenceIssue(
                kind="duplicate-route",
                message=f"Route '{route or '/'}' is declared by {count} pages.",
            )


def _page_component_clashes(
    site: SiteConfig,
    component_name: cabc.Callable[[str], str],
    page_name: cabc.Callable[[str], str],
    *,
    noun: str,
) -> cabc.Iterator[ReferenceIssue]:
    by_component = {
        component_name(component.name): component.name for component in site.components
    }
    for route in dict.fromkeys(page.route for page in site.pages):
        derived = page_name(route)
        if derived in by_component:
            yield ReferenceIssue(
                kind="page-component-clash",
                message=(
                    f"Component '{by_component[derived]}' and the page for route "
                    f"'{route or '/'}' share the {noun} '{derived}'."
                ),
            )


def _collisions(
    names: cabc.Iterable[str],
    derive: cabc.Callable[[str], str],
    *,
    kind: str,
    label: str,
    noun: str,
) -> cabc.Iterator[ReferenceIssue]:
    groups: dict[str, list[str]] = {}
    for name in names:
        groups.setdefault(derive(name), []).append(name)
    for derived, sources in groups.items():
        distinct = list(dict.fromkeys(sources))
        if len(distinct) > 1:
            quoted = ", ".join(f"'{source}'" for source in distinct)
            yield ReferenceIssue(
                kind=kind,
                message=f"{label} {quoted} share the {noun} '{derived}'.",
            )


__all__ = ["ReferenceIssue", "SiteReferenceError", "ensure_valid", "validate_site"]
