"""Preset templates that synthesize self-contained UI components.

Each preset renders one standalone Angular component whose selector and
class name are derived from the component name, whose only input is a
loosely typed ``props`` object, and whose styles are inlined. Unknown or
missing preset tags resolve to :attr:`Preset.FALLBACK`, a generic component
that labels itself with its name and dumps whatever ``props`` it receives.

The ``rich-text`` preset marks ``props.html`` as trusted through
``DomSanitizer.bypassSecurityTrustHtml`` and renders it as raw markup. That
HTML is caller-trusted: sanitizing it is the job of whatever produces the
props, not of the generated component.

Examples
--------
>>> Preset.from_tag("hero")
<Preset.HERO: 'hero'>
>>> Preset.from_tag("carousel")
<Preset.FALLBACK: 'fallback'>
"""

from __future__ import annotations

import enum

from .renderer import TemplateRenderer


class Preset(enum.Enum):
    """Closed set of component presets, with a default fallback variant."""

    HERO = "hero"
    FEATURE_GRID = "feature-grid"
    RICH_TEXT = "rich-text"
    FOOTER = "footer"
    FALLBACK = "fallback"

    @property
    def template_name(self) -> str:
        """Return the template path rendering this preset."""
        return f"presets/{self.name.lower()}.ts.jinja"

    @classmethod
    def from_tag(cls, tag: str | None) -> Preset:
        """Return the preset for ``tag``, or the fallback when unknown."""
        if tag is None:
            return cls.FALLBACK
        return _PRESETS_BY_TAG.get(tag, cls.FALLBACK)

    @classmethod
    def known_tags(cls) -> list[str]:
        """Return the tags accepted in a component description."""
        return list(_PRESETS_BY_TAG)


_PRESETS_BY_TAG: dict[str, Preset] = {
    preset.value: preset for preset in Preset if preset is not Preset.FALLBACK
}


class PresetLibrary:
    """Render component sources from preset tags."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    def render(self, name: str, tag: str | None) -> str:
        """Return the full source of the component ``name`` built from ``tag``."""
        preset = Preset.from_tag(tag)
        return self.renderer.render(preset.template_name, name=name)


__all__ = ["Preset", "PresetLibrary"]
