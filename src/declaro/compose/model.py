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

from dataclasses import dataclass
from typing import Literal

from .geometry import PageGeometry
from .spec import Align, FontSpec

BlockRole = Literal["header", "footer", "addressee", "title", "body", "signature"]


@dataclass(frozen=True)
class TextBlock:
    """Lines drawn top-down from baseline ``y_mm``, one ``line_height_mm`` apart."""

    role: BlockRole
    x_mm: float
    y_mm: float
    width_mm: float
    lines: tuple[str, ...]
    line_height_mm: float
    font: FontSpec
    align: Align = "left"
    justify_last: bool = False

    @property
    def bottom_mm(self) -> float:
        return self.y_mm + len(self.lines) * self.line_height_mm


@dataclass(frozen=True)
class ImageBox:
    field: str
    data: bytes
    x_mm: float
    y_mm: float
    width_mm: float
    height_mm: float


@dataclass(frozen=True)
class RuleLine:
    role: BlockRole
    x1_mm: float
    y1_mm: float
    x2_mm: float
    y2_mm: float
    gray: int = 0


DrawItem = TextBlock | ImageBox | RuleLine


@dataclass(frozen=True)
class Page:
    number: int
    items: tuple[DrawItem, ...]

    def blocks(self, role: BlockRole | None = None) -> tuple[TextBlock, ...]:
        return tuple(
            item
            for item in self.items
            if isinstance(item, TextBlock) and (role is None or item.role == role)
        )

    def images(self) -> tuple[ImageBox, ...]:
        return tuple(item for item in self.items if isinstance(item, ImageBox))

    def rules(self, role: BlockRole | None = None) -> tuple[RuleLine, ...]:
        return tuple(
            item
            for item in self.items
            if isinstance(item, RuleLine) and (role is None or item.role == role)
        )

    def has_signature(self) -> bool:
        return any(getattr(item, "role", None) == "signature" for item in self.items)


@dataclass(frozen=True)
class Document:
    geometry: PageGeometry
    pages: tuple[Page, ...]

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def body_lines(self) -> list[str]:
        return [line for page in self.pages for block in page.blocks("body") for line in block.lines]
