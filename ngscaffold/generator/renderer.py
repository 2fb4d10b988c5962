"""Render generated sources from the packaged Jinja templates."""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from ngscaffold import naming

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"
TS_STRING_ESCAPES = str.maketrans({"\\": "\\\\", "'": "\\'", "\n": "\\n"})


def ts_string(value: str) -> str:
    """Escape ``value`` for use inside a single-quoted TypeScript string."""
    return value.translate(TS_STRING_ESCAPES)


def props_literal(value: typ.Any) -> str:
    """Encode section props as a two-space indented object literal.

    Values without a JSON form (timestamps from YAML input, for instance)
    are written as strings, so any props shape can be encoded.
    """
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


class TemplateRenderer:
    """Render TypeScript and CSS sources with consistent settings."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        """Initialize the Jinja environment.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing the templates; defaults to the package
            ``templates`` directory.
        """
        self.templates_dir = templates_dir or DEFAULT_TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml"], default=False),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters.update(
            component_class=naming.component_class,
            component_selector=naming.component_selector,
            props_literal=props_literal,
            ts_string=ts_string,
        )

    def render(self, template_name: str, **context: typ.Any) -> str:
        """Render ``template_name`` and return text ending with a newline."""
        text = self.env.get_template(template_name).render(**context)
        if not text.endswith("\n"):
            text += "\n"
        return text


__all__ = [
    "DEFAULT_TEMPLATES_DIR",
    "TemplateRenderer",
    "props_literal",
    "ts_string",
]
