"""Cyclopts CLI entrypoint for scaffolding front-end sources.

The ``scaffold`` console script defined here reads a site description
(``mapping.json`` by default) and writes reusable components, pages, the
route table, the root shell, and the global stylesheet under a directory
named after the project. Each written file is reported on stdout.

Examples
--------
Scaffold the project described in ``mapping.json``:

>>> from ngscaffold.cli import main
>>> main([])  # doctest: +SKIP

Preview the files a description would produce:

>>> from ngscaffold.cli import app
>>> app(["site.yaml", "--dry-run"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_MAPPING
from .config import load_site_config
from .generator import Preset
from .scaffold import ScaffoldBuilder

app = App(name="scaffold", config=cyclopts.config.Env("SCAFFOLD_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:
            return str(path)
    return str(path)


@app.default
def generate(
    mapping: typ.Annotated[
        Path, Parameter(help="Path to the site description")
    ] = Path(DEFAULT_MAPPING),
    *,
    output_root: typ.Annotated[
        Path | None,
        Parameter(help="Directory receiving the project folder (default: cwd)"),
    ] = None,
    allow_dangling: typ.Annotated[
        bool,
        Parameter(help="Generate even when pages reference undeclared components"),
    ] = False,
    dry_run: typ.Annotated[
        bool, Parameter(help="List the files that would be written")
    ] = False,
) -> None:
    """Generate components, pages, routes, shell, and stylesheet.

    Parameters
    ----------
    mapping : Path, optional
        Site description to read; defaults to ``mapping.json`` in the
        working directory.
    output_root : Path or None, optional
        Parent of the generated ``<projectName>`` directory; the working
        directory when ``None``.
    allow_dangling : bool, optional
        Skip reference validation, reproducing unchecked generation.
    dry_run : bool, optional
        Render everything but only print the destination paths.

    Returns
    -------
    None
        Writes the generated artifacts and prints their paths.

    Raises
    ------
    SiteConfigError
        If the description is malformed or, unless ``allow_dangling`` is
        set, references undeclared components or colliding names.
    """
    site = load_site_config(mapping)
    builder = ScaffoldBuilder(
        site, output_root=output_root, allow_dangling=allow_dangling
    )
    if dry_run:
        for artifact in builder.render():
            print(f"would write {_format_path(artifact.path)}")
        return
    for path in builder.run():
        print(f"wrote {_format_path(path)}")


@app.command(help="List the preset tags understood by the generator.")
def presets() -> None:
    """Print each known preset tag; other tags use the fallback template."""
    for tag in Preset.known_tags():
        print(tag)


def main(argv: list[str] | None = None) -> None:
    """Invoke the Cyclopts application that powers the ``scaffold`` command.

    Parameters
    ----------
    argv : list[str] or None, optional
        Arguments to parse instead of ``sys.argv[1:]``.

    Examples
    --------
    >>> main(["mapping.json"])  # doctest: +SKIP
    """
    app(argv)


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
