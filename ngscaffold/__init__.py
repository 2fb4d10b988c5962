"""Scaffold Angular front-end sources from a declarative site description.

This package exposes the CLI entry point used by ``scaffold`` to turn a
``mapping.json`` description of components and pages into generated
component files, page files, a route table, a navigation shell, and a
global stylesheet.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``scaffold``: Load a description and write the generated project.

Examples
--------
>>> from ngscaffold import main
>>> main(["mapping.json"])  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main
from .scaffold import scaffold

__all__ = ["app", "main", "scaffold"]
