"""Shared dataclasses used by the scaffold generation pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from pathlib import Path


@dc.dataclass(slots=True, frozen=True)
class Artifact:
    """A generated file: where it goes and its complete text.

    Attributes
    ----------
    path : Path
        Destination of the file; any existing file there is overwritten.
    text : str
        Full source text of the file.
    """

    path: Path
    text: str

    def write(self) -> Path:
        """Write the text to ``path`` as UTF-8, replacing any previous file."""
        self.path.write_text(self.text, encoding="utf-8")
        return self.path


@dc.dataclass(slots=True, frozen=True)
class ComponentReference:
    """An import of one generated component into a page file.

    Attributes
    ----------
    name : str
        Human-readable component name from the site description.
    class_name : str
        Exported class of the component file.
    module : str
        Extension-less module name of the component file.
    """

    name: str
    class_name: str
    module: str


@dc.dataclass(slots=True, frozen=True)
class PageField:
    """One section binding within a page.

    Attributes
    ----------
    identifier : str
        Class field holding the section configuration (``S1``, ``S2``...).
    selector : str
        Element selector of the component instantiated for the section.
    literal : str
        Source-level literal encoding of the section props.
    """

    identifier: str
    selector: str
    literal: str

    @property
    def markup(self) -> str:
        """Return the element instantiating the component bound to the field."""
        return (
            f'<{self.selector} [props]="{self.identifier}"></{self.selector}>'
        )


@dc.dataclass(slots=True, frozen=True)
class PageModel:
    """Everything the page template needs, in rendering order.

    Attributes
    ----------
    class_name : str
        Exported class of the page file.
    selector : str
        Element selector of the page component.
    title : str or None
        Optional heading rendered above the sections.
    references : tuple[ComponentReference, ...]
        Deduplicated component imports, in first-use order.
    fields : tuple[PageField, ...]
        Section bindings in source order; the footer, when present, is last.
    """

    class_name: str
    selector: str
    title: str | None
    references: tuple[ComponentReference, ...]
    fields: tuple[PageField, ...]

    @property
    def import_names(self) -> list[str]:
        """Return the standalone imports declared by the page component."""
        return ["CommonModule", *(ref.class_name for ref in self.references)]

    @property
    def markup_lines(self) -> list[str]:
        """Return the page template lines: optional heading, then sections."""
        lines = [f'<h1 style="margin:24px 0">{self.title}</h1>'] if self.title else []
        lines.extend(field.markup for field in self.fields)
        return lines


@dc.dataclass(slots=True, frozen=True)
class RouteEntry:
    """A route table entry lazily loading one generated page."""

    path: str
    import_path: str
    class_name: str


@dc.dataclass(slots=True, frozen=True)
class NavLink:
    """A navigation link rendered in the root shell."""

    label: str
    href: str


__all__ = [
    "Artifact",
    "ComponentReference",
    "NavLink",
    "PageField",
    "PageModel",
    "RouteEntry",
]
