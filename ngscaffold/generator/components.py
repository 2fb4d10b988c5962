"""Write one component file per component description."""

from __future__ import annotations

import typing as typ

from ngscaffold import naming

from .models import Artifact
from .presets import PresetLibrary

if typ.TYPE_CHECKING:
    from pathlib import Path


class ComponentEmitter:
    """Render components from presets and write them to the generated dir."""

    def __init__(self, presets: PresetLibrary | None = None) -> None:
        self.presets = presets or PresetLibrary()

    def artifact(self, output_dir: Path, name: str, preset: str | None) -> Artifact:
        """Return the component file for ``name`` without writing it."""
        return Artifact(
            path=output_dir / naming.component_file(name),
            text=self.presets.render(name, preset),
        )

    def emit(self, output_dir: Path, name: str, preset: str | None) -> Path:
        """Write ``<output_dir>/<slug>.component.ts``, replacing any old file.

        Filesystem errors propagate to the caller.
        """
        return self.artifact(output_dir, name, preset).write()


__all__ = ["ComponentEmitter"]
