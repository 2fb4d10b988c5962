"""High-level orchestration for scaffolding a front-end project.

This module turns a :class:`~ngscaffold.config.SiteConfig` into the full set
of generated sources and writes them under ``<output_root>/<projectName>``.
Generation runs in a fixed order: components, pages, the route table, the
root shell, then the global stylesheet. Every write replaces the previous
file; nothing is merged with hand edits.

Example
-------
>>> from pathlib import Path
>>> from ngscaffold.scaffold import scaffold
>>> scaffold(Path("mapping.json"))  # doctest: +SKIP
[PosixPath('my-site/src/app/generated/hero-banner.component.ts'), ...]
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ngscaffold.config import ensure_valid, load_site_config
from ngscaffold.generator import (
    ComponentEmitter,
    PageAssembler,
    PresetLibrary,
    RouteTableBuilder,
    ShellBuilder,
    StylesheetWriter,
    TemplateRenderer,
)

if typ.TYPE_CHECKING:
    from ngscaffold.config import SiteConfig
    from ngscaffold.generator import Artifact


class ScaffoldBuilder:
    """Render every artifact described by a site description."""

    def __init__(
        self,
        site: SiteConfig,
        *,
        output_root: Path | None = None,
        allow_dangling: bool = False,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder with a parsed site description.

        Parameters
        ----------
        site : SiteConfig
            Components and pages to generate.
        output_root : Path, optional
            Directory receiving the ``<projectName>`` folder; defaults to the
            current working directory.
        allow_dangling : bool, optional
            Skip reference validation and generate even when pages name
            undeclared components or derived names collide.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        """
        self.site = site
        self.allow_dangling = allow_dangling
        self.project_dir = (output_root or Path.cwd()) / site.project_name
        self.app_dir = self.project_dir / site.layout.app_dir
        self.generated_dir = self.app_dir / site.layout.generated_dir
        self.stylesheet_path = self.project_dir / site.layout.stylesheet

        renderer = TemplateRenderer(templates_dir)
        self.components = ComponentEmitter(PresetLibrary(renderer))
        self.pages = PageAssembler(renderer)
        self.routes = RouteTableBuilder(
            renderer, generated_dir=site.layout.generated_dir
        )
        self.shell = ShellBuilder(renderer)
        self.stylesheet = StylesheetWriter(renderer)

    def render(self) -> list[Artifact]:
        """Return every artifact in generation order without touching disk."""
        artifacts = [
            self.components.artifact(self.generated_dir, component.name, component.preset)
            for component in self.site.components
        ]
        artifacts.extend(
            self.pages.artifact(self.generated_dir, page) for page in self.site.pages
        )
        artifacts.append(self.routes.artifact(self.app_dir, self.site.pages))
        artifacts.append(self.shell.artifact(self.app_dir, self.site.pages))
        artifacts.append(self.stylesheet.artifact(self.stylesheet_path))
        return artifacts

    def run(self) -> list[Path]:
        """Validate, render, and write every artifact.

        Returns
        -------
        list[Path]
            Paths of the written files, in generation order.

        Raises
        ------
        SiteReferenceError
            When validation is enabled and the description has dangling
            references or colliding names. Nothing is written in that case.
        OSError
            When a directory cannot be created or a file cannot be written.
        """
        if not self.allow_dangling:
            ensure_valid(self.site)
        artifacts = self.render()
        directories = [self.generated_dir, *(artifact.path.parent for artifact in artifacts)]
        for directory in dict.fromkeys(directories):
            directory.mkdir(parents=True, exist_ok=True)
        return [artifact.write() for artifact in artifacts]


def scaffold(
    mapping: Path,
    *,
    output_root: Path | None = None,
    allow_dangling: bool = False,
) -> list[Path]:
    """Load ``mapping`` and write the scaffolded project, returning the paths."""
    site = load_site_config(mapping)
    builder = ScaffoldBuilder(
        site, output_root=output_root, allow_dangling=allow_dangling
    )
    return builder.run()


__all__ = ["ScaffoldBuilder", "scaffold"]
