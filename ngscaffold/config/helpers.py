"""Utility helpers shared by the site description loader."""

from __future__ import annotations

import typing as typ

from .models import LayoutConfig, SiteConfigError

LAYOUT_KEYS: dict[str, str] = {
    "appDir": "app_dir",
    "generatedDir": "generated_dir",
    "stylesheet": "stylesheet",
}


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _coerce_props(value: object | None) -> typ.Any:
    """Return ``value`` unchanged, or an empty mapping when it is missing."""
    if value is None:
        return {}
    return value


def _require_list(value: object | None, *, where: str) -> list[typ.Any]:
    """Return ``value`` as a list, treating ``None`` as empty."""
    match value:
        case None:
            return []
        case list() as items:
            return items
        case _:
            msg = f"'{where}' must be a list."
            raise SiteConfigError(msg)


def _merge_layout(
    base: LayoutConfig, override: typ.Mapping[str, typ.Any] | None
) -> LayoutConfig:
    """Merge an override layout mapping into the base LayoutConfig."""
    if not override:
        return base
    if not isinstance(override, dict):
        msg = "'layout' must be a mapping."
        raise SiteConfigError(msg)
    values: dict[str, str] = {}
    for key, attr in LAYOUT_KEYS.items():
        raw = override.get(key, getattr(base, attr))
        text = _optional_str(raw)
        path = text.strip("/") if text else ""
        if not path:
            msg = f"Layout '{key}' must be a non-empty path."
            raise SiteConfigError(msg)
        values[attr] = path
    return LayoutConfig(**values)


__all__ = [
    "LAYOUT_KEYS",
    "_coerce_props",
    "_merge_layout",
    "_optional_str",
    "_require_list",
]
