"""Unit tests for the scaffold command line."""

from __future__ import annotations

import json
import typing as typ

import pytest

from ngscaffold import cli
from ngscaffold.config import SiteConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path

MAPPING = {
    "projectName": "cli-site",
    "components": [{"name": "Intro", "preset": "rich-text"}],
    "pages": [{"route": "", "sections": [{"component": "Intro", "props": {"html": "<p>x</p>"}}]}],
}


def _mapping(tmp_path: Path, payload: object = MAPPING) -> Path:
    path = tmp_path / "mapping.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_generate_reports_written_paths(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Each written file is reported relative to the working directory."""
    monkeypatch.chdir(tmp_path)
    _mapping(tmp_path)

    cli.generate()

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "wrote cli-site/src/app/generated/intro.component.ts",
        "wrote cli-site/src/app/generated/page-home.component.ts",
        "wrote cli-site/src/app/app.routes.ts",
        "wrote cli-site/src/app/app.component.ts",
        "wrote cli-site/src/styles.css",
    ]


def test_dry_run_writes_nothing(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Dry runs list destinations without creating them."""
    output_root = tmp_path / "out"
    cli.generate(_mapping(tmp_path), output_root=output_root, dry_run=True)

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 5
    assert all(line.startswith("would write ") for line in lines)
    assert not output_root.exists()


def test_generate_rejects_dangling_references(tmp_path: Path) -> None:
    """Undeclared components abort unless explicitly allowed."""
    payload = dict(MAPPING, components=[])
    mapping = _mapping(tmp_path, payload)
    with pytest.raises(SiteConfigError):
        cli.generate(mapping, output_root=tmp_path)
    cli.generate(mapping, output_root=tmp_path, allow_dangling=True)
    assert (tmp_path / "cli-site/src/app/app.routes.ts").exists()


def test_format_path_keeps_foreign_absolute_paths(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Paths outside the working directory stay absolute."""
    monkeypatch.chdir(tmp_path)
    foreign = tmp_path.parent / "elsewhere.ts"
    assert cli._format_path(foreign) == str(foreign)
    assert cli._format_path(tmp_path / "a" / "b.ts") == "a/b.ts"


def test_presets_lists_known_tags(capsys: pytest.CaptureFixture[str]) -> None:
    """The presets command prints every selectable tag."""
    cli.presets()
    assert capsys.readouterr().out.split() == [
        "hero",
        "feature-grid",
        "rich-text",
        "footer",
    ]
