"""Unit tests for page assembly: imports, fields, and markup."""

from __future__ import annotations

import re
import typing as typ

import msgspec.json as msgspec_json
import pytest

from ngscaffold.config import PageConfig, SectionConfig
from ngscaffold.generator import PageAssembler, build_page_model

if typ.TYPE_CHECKING:
    from pathlib import Path

FIELD_PATTERN = re.compile(r"^  readonly (S\d+) = (.*?);$", re.MULTILINE | re.DOTALL)
IMPORT_PATTERN = re.compile(r"^import \{ (\w+) \} from '\./([\w.-]+)';$", re.MULTILINE)


def _fields(text: str) -> list[tuple[str, typ.Any]]:
    """Return (identifier, decoded props) pairs declared in a page file."""
    return [
        (identifier, msgspec_json.decode(literal))
        for identifier, literal in FIELD_PATTERN.findall(text)
    ]


@pytest.fixture(scope="module")
def assembler() -> PageAssembler:
    """Return a page assembler backed by the packaged templates."""
    return PageAssembler()


def test_fields_follow_sections_then_footer(assembler: PageAssembler) -> None:
    """N sections plus a footer declare N+1 fields, footer last."""
    page = PageConfig(
        route="landing",
        title="Landing",
        sections=(
            SectionConfig("Hero", {"headline": "Hi"}),
            SectionConfig("Grid", {"items": [{"title": "A", "desc": "a"}]}),
            SectionConfig("Hero"),
        ),
        footer=SectionConfig("Footer", {"text": "© 2026"}),
    )
    text = assembler.render(page)

    assert _fields(text) == [
        ("S1", {"headline": "Hi"}),
        ("S2", {"items": [{"title": "A", "desc": "a"}]}),
        ("S3", {}),
        ("S4", {"text": "© 2026"}),
    ]
    template = text.split("template: `\n", 1)[1].split("\n`", 1)[0]
    assert template.splitlines() == [
        '<h1 style="margin:24px 0">Landing</h1>',
        '<app-hero [props]="S1"></app-hero>',
        '<app-grid [props]="S2"></app-grid>',
        '<app-hero [props]="S3"></app-hero>',
        '<app-footer [props]="S4"></app-footer>',
    ]
    assert "export class PageLandingComponent {" in text
    assert "selector: 'app-page-landing'" in text


def test_imports_are_deduplicated_in_first_use_order(assembler: PageAssembler) -> None:
    """Each component is imported once, in order of first occurrence."""
    page = PageConfig(
        route="",
        sections=(
            SectionConfig("Rich Text"),
            SectionConfig("Hero Banner"),
            SectionConfig("Rich Text"),
        ),
        footer=SectionConfig("Hero Banner"),
    )
    text = assembler.render(page)

    assert IMPORT_PATTERN.findall(text) == [
        ("RichTextComponent", "rich-text.component"),
        ("HeroBannerComponent", "hero-banner.component"),
    ]
    assert "imports: [CommonModule, RichTextComponent, HeroBannerComponent]," in text
    assert len(_fields(text)) == 4, "fields are per section, not per component"


def test_footer_only_component_is_imported_last() -> None:
    """A footer component not used by any section is appended to the imports."""
    model = build_page_model(
        PageConfig(sections=(SectionConfig("Hero"),), footer=SectionConfig("Footer"))
    )
    assert [ref.name for ref in model.references] == ["Hero", "Footer"]
    assert [field.identifier for field in model.fields] == ["S1", "S2"]


@pytest.mark.parametrize("title", [None, "Empty"])
def test_empty_page_renders(assembler: PageAssembler, title: str | None) -> None:
    """A page with no sections and no footer still renders."""
    text = assembler.render(PageConfig(route="blank", title=title))

    assert _fields(text) == []
    assert IMPORT_PATTERN.findall(text) == []
    assert "imports: [CommonModule]," in text
    template = text.split("template: `\n", 1)[1].split("\n`", 1)[0]
    expected = '<h1 style="margin:24px 0">Empty</h1>' if title else ""
    assert template == expected


def test_props_of_any_shape_are_encoded() -> None:
    """Non-mapping and nested props are written as literals without failing."""
    model = build_page_model(
        PageConfig(
            sections=(
                SectionConfig("A", [1, "two", None]),
                SectionConfig("B", {"deep": {"deeper": {"deepest": [True]}}}),
                SectionConfig("C", "plain"),
            )
        )
    )
    decoded = [msgspec_json.decode(field.literal) for field in model.fields]
    assert decoded == [
        [1, "two", None],
        {"deep": {"deeper": {"deepest": [True]}}},
        "plain",
    ]


def test_assemble_writes_page_file(tmp_path: Path, assembler: PageAssembler) -> None:
    """The page is written under its page slug."""
    path = assembler.assemble(tmp_path, PageConfig(route="about"))
    assert path == tmp_path / "page-about.component.ts"
    assert "PageAboutComponent" in path.read_text(encoding="utf-8")
