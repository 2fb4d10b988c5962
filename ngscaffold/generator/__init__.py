"""Render and write the generated front-end sources."""

from .components import ComponentEmitter
from .models import Artifact, ComponentReference, NavLink, PageField, PageModel, RouteEntry
from .pages import PageAssembler, build_page_model
from .presets import Preset, PresetLibrary
from .renderer import TemplateRenderer
from .routes import RouteTableBuilder
from .shell import ShellBuilder
from .styles import StylesheetWriter

__all__ = [
    "Artifact",
    "ComponentEmitter",
    "ComponentReference",
    "NavLink",
    "PageAssembler",
    "PageField",
    "PageModel",
    "Preset",
    "PresetLibrary",
    "RouteEntry",
    "RouteTableBuilder",
    "ShellBuilder",
    "StylesheetWriter",
    "TemplateRenderer",
    "build_page_model",
]
