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

from dataclasses import dataclass, fields, replace
from typing import Literal, Mapping

ParagraphMode = Literal["lines", "blank-lines"]
Align = Literal["left", "center", "right", "justify"]

DEFAULT_IMAGE_WIDTH_MM = 40.0
DEFAULT_IMAGE_HEIGHT_MM = 20.0
ADDRESSEE_PREFIX = "Ao"


@dataclass(frozen=True)
class ImageSpec:
    data: bytes
    width_mm: float = DEFAULT_IMAGE_WIDTH_MM
    height_mm: float = DEFAULT_IMAGE_HEIGHT_MM


@dataclass(frozen=True)
class FontSpec:
    family: str = "Helvetica"
    style: str = ""
    size_pt: float = 10.5
    gray: int = 0


@dataclass(frozen=True)
class PageSpec:
    width_mm: float = 210.0
    height_mm: float = 297.0
    margin_mm: float = 20.0


@dataclass(frozen=True)
class HeaderStyle:
    top_mm: float = 10.0
    image_gap_mm: float = 3.0
    line_step_mm: float = 3.5
    text_tail_mm: float = 2.0
    rule_gap_mm: float = 6.0
    rule_gray: int = 160
    font: FontSpec = FontSpec(size_pt=9.0, gray=60)


@dataclass(frozen=True)
class FooterStyle:
    image_gap_mm: float = 4.0
    text_allowance_mm: float = 8.0
    padding_mm: float = 3.0
    start_pad_mm: float = 3.0
    content_pad_mm: float = 8.0
    baseline_offset_mm: float = 6.0
    line_step_mm: float = 3.0
    text_gap_mm: float = 2.0
    image_bottom_mm: float = 5.0
    font: FontSpec = FontSpec(style="I", size_pt=7.5, gray=100)


@dataclass(frozen=True)
class BodyStyle:
    line_height_mm: float = 5.0
    numbered_indent_mm: float = 8.0
    paragraph_gap_mm: float = 3.0
    trailing_gap_mm: float = 6.0
    font: FontSpec = FontSpec()


@dataclass(frozen=True)
class AddresseeStyle:
    line_step_mm: float = 5.0
    trailing_gap_mm: float = 6.0
    font: FontSpec = FontSpec(size_pt=10.0)


@dataclass(frozen=True)
class TitleStyle:
    line_step_mm: float = 6.0
    width_inset_mm: float = 20.0
    trailing_gap_mm: float = 6.0
    font: FontSpec = FontSpec(style="B", size_pt=12.0)


@dataclass(frozen=True)
class SignatureStyle:
    block_height_mm: float = 55.0
    gap_mm: float = 10.0
    date_step_mm: float = 15.0
    rule_width_mm: float = 80.0
    rule_step_mm: float = 5.0
    field_step_mm: float = 4.5
    date_font: FontSpec = FontSpec(style="I", size_pt=10.5)
    name_font: FontSpec = FontSpec(style="B", size_pt=10.0)
    field_font: FontSpec = FontSpec(size_pt=9.0)
    company_font: FontSpec = FontSpec(style="B", size_pt=9.0)


@dataclass(frozen=True)
class LayoutConfig:
    header_image: ImageSpec | None = None
    footer_image: ImageSpec | None = None
    header_text: str = ""
    footer_text: str = ""
    addressee_name: str = ""
    addressee_org: str = ""
    signature_city: str = ""
    signature_date: str = ""
    signatory_name: str = ""
    signatory_role: str = ""
    signatory_cpf: str = ""
    signatory_company: str = ""
    signatory_cnpj: str = ""

    @property
    def has_header(self) -> bool:
        return self.header_image is not None or bool(self.header_text.strip())

    @property
    def has_footer(self) -> bool:
        return self.footer_image is not None or bool(self.footer_text.strip())


LAYOUT_FIELDS = frozenset(item.name for item in fields(LayoutConfig))


def default_layout_config() -> LayoutConfig:
    """Layout used when no layout is selected: every field empty."""
    return LayoutConfig()


def apply_layout_patch(config: LayoutConfig, patch: Mapping[str, object]) -> LayoutConfig:
    """Return a new layout with ``patch`` applied; ``config`` is left untouched."""
    unknown = sorted(set(patch) - LAYOUT_FIELDS)
    if unknown:
        raise ValueError(f"unknown layout field(s): {', '.join(unknown)}")
    changes: dict[str, object] = {}
    for key, value in patch.items():
        if key in ("header_image", "footer_image"):
            if value is not None and not isinstance(value, ImageSpec):
                raise ValueError(f"{key} must be an ImageSpec or None")
            changes[key] = value
            continue
        changes[key] = "" if value is None else str(value)
    return replace(config, **changes)
