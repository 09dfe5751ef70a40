#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from ..compose.spec import (
    DEFAULT_IMAGE_HEIGHT_MM,
    DEFAULT_IMAGE_WIDTH_MM,
    ImageSpec,
    LayoutConfig,
    default_layout_config,
)
from .installer import resolve_layouts_path

DEFAULT_LAYOUT_KEY = "default"

_TEXT_FIELDS = (
    "header_text",
    "footer_text",
    "addressee_name",
    "addressee_org",
    "signature_city",
    "signature_date",
    "signatory_name",
    "signatory_role",
    "signatory_cpf",
    "signatory_company",
    "signatory_cnpj",
)
_IMAGE_FIELDS = ("header_image", "footer_image")
_ALLOWED_KEYS = frozenset(
    {
        "name",
        *_TEXT_FIELDS,
        *_IMAGE_FIELDS,
        *(f"{image}_width_mm" for image in _IMAGE_FIELDS),
        *(f"{image}_height_mm" for image in _IMAGE_FIELDS),
    }
)


@dataclass(frozen=True)
class NamedLayout:
    key: str
    name: str
    config: LayoutConfig


@dataclass(frozen=True)
class LayoutsFile:
    path: Path | None
    default_key: str
    layouts: Mapping[str, NamedLayout] = field(default_factory=dict)

    def get(self, key: str | None = None) -> NamedLayout:
        wanted = (key or self.default_key).strip()
        if wanted in self.layouts:
            return self.layouts[wanted]
        lowered = wanted.lower()
        for candidate, layout in self.layouts.items():
            if candidate.lower() == lowered:
                return layout
        available = ", ".join(sorted(self.layouts)) or "none"
        raise ValueError(f"unknown layout: {wanted} (available: {available})")


def load_layouts(path: str | Path | None = None) -> LayoutsFile:
    layouts_path = resolve_layouts_path(path)
    data = _load_toml(layouts_path)
    base_dir = layouts_path.parent
    tables = _get_dict(data, "layouts")
    layouts: dict[str, NamedLayout] = {}
    for key, value in tables.items():
        if not isinstance(value, dict):
            raise ValueError(f"layouts.{key} must be a table")
        layouts[key] = _parse_layout(key, value, base_dir=base_dir)
    if not layouts:
        layouts[DEFAULT_LAYOUT_KEY] = NamedLayout(
            key=DEFAULT_LAYOUT_KEY, name="Default", config=default_layout_config()
        )

    defaults = _get_dict(data, "defaults")
    default_key = _parse_optional_str(defaults.get("layout"), field="defaults.layout")
    if default_key is None:
        default_key = DEFAULT_LAYOUT_KEY if DEFAULT_LAYOUT_KEY in layouts else next(iter(layouts))
    elif default_key not in layouts:
        raise ValueError(f"defaults.layout refers to an unknown layout: {default_key}")
    return LayoutsFile(path=layouts_path, default_key=default_key, layouts=layouts)


def load_layout_config(path: str | Path | None = None, key: str | None = None) -> LayoutConfig:
    return load_layouts(path).get(key).config


def _parse_layout(key: str, cfg: dict[str, object], *, base_dir: Path) -> NamedLayout:
    unknown = sorted(set(cfg) - _ALLOWED_KEYS)
    if unknown:
        raise ValueError(f"layouts.{key}: unknown field(s): {', '.join(unknown)}")
    values: dict[str, object] = {}
    for name in _TEXT_FIELDS:
        values[name] = _parse_text(cfg.get(name), field=f"layouts.{key}.{name}")
    for name in _IMAGE_FIELDS:
        values[name] = _parse_image(cfg, name, layout_key=key, base_dir=base_dir)
    display = _parse_optional_str(cfg.get("name"), field=f"layouts.{key}.name") or key
    return NamedLayout(key=key, name=display, config=LayoutConfig(**values))


def _parse_image(
    cfg: dict[str, object],
    name: str,
    *,
    layout_key: str,
    base_dir: Path,
) -> ImageSpec | None:
    prefix = f"layouts.{layout_key}.{name}"
    raw_path = _parse_optional_str(cfg.get(name), field=prefix)
    if raw_path is None:
        return None
    image_path = Path(raw_path).expanduser()
    if not image_path.is_absolute():
        image_path = base_dir / image_path
    if not image_path.is_file():
        raise FileNotFoundError(f"{prefix}: image file not found: {image_path}")
    return ImageSpec(
        data=image_path.read_bytes(),
        width_mm=_parse_positive_float(
            cfg.get(f"{name}_width_mm"),
            field=f"{prefix}_width_mm",
            default=DEFAULT_IMAGE_WIDTH_MM,
        ),
        height_mm=_parse_positive_float(
            cfg.get(f"{name}_height_mm"),
            field=f"{prefix}_height_mm",
            default=DEFAULT_IMAGE_HEIGHT_MM,
        ),
    )


def _parse_text(value: object, *, field: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    return value


def _parse_optional_str(value: object, *, field: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    stripped = value.strip()
    return stripped or None


def _parse_positive_float(value: object, *, field: str, default: float) -> float:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{field} must be a number")
    if value <= 0:
        raise ValueError(f"{field} must be positive")
    return float(value)


def _load_toml(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}
