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

import math
from dataclasses import dataclass

from .spec import FooterStyle, HeaderStyle, LayoutConfig, PageSpec
from .text import TextMetrics, normalize_text, wrap_lines_to_width

# Tolerance for cursor comparisons against the content limit
COORDINATE_EPSILON = 1e-6


@dataclass(frozen=True)
class PageGeometry:
    page_w: float
    page_h: float
    margin: float
    usable_w: float
    header_height: float
    content_start_y: float
    footer_height: float
    footer_y: float
    content_max_y: float
    header_lines: tuple[str, ...] = ()
    footer_lines: tuple[str, ...] = ()

    @property
    def content_height(self) -> float:
        return self.content_max_y - self.content_start_y


def footer_height(
    config: LayoutConfig,
    footer_line_count: int = 1,
    style: FooterStyle = FooterStyle(),
) -> float:
    height = 0.0
    if config.footer_image is not None:
        height += float(config.footer_image.height_mm) + style.image_gap_mm
    if config.footer_text.strip():
        # footer lines stack upward from the bottom baseline
        wrapped = footer_line_count * style.line_step_mm + style.text_gap_mm
        height += max(style.text_allowance_mm, wrapped)
    if height > 0:
        height += style.padding_mm
    return height


def header_height(
    config: LayoutConfig,
    header_line_count: int,
    style: HeaderStyle = HeaderStyle(),
) -> float:
    height = style.top_mm
    if config.header_image is not None:
        height += float(config.header_image.height_mm) + style.image_gap_mm
    if header_line_count > 0:
        height += header_line_count * style.line_step_mm + style.text_tail_mm
    return height


def lines_that_fit(available_mm: float, line_height: float) -> int:
    if available_mm <= 0 or line_height <= 0:
        return 0
    return max(0, math.floor(available_mm / line_height + COORDINATE_EPSILON))


def resolve_geometry(
    config: LayoutConfig,
    metrics: TextMetrics,
    page: PageSpec = PageSpec(),
    *,
    header_style: HeaderStyle = HeaderStyle(),
    footer_style: FooterStyle = FooterStyle(),
) -> PageGeometry:
    page_w = float(page.width_mm)
    page_h = float(page.height_mm)
    margin = float(page.margin_mm)
    usable_w = page_w - 2 * margin

    header_lines = tuple(
        wrap_lines_to_width(
            normalize_text(config.header_text),
            usable_w,
            metrics.measure(header_style.font),
        )
    )
    footer_lines = tuple(
        wrap_lines_to_width(
            normalize_text(config.footer_text),
            usable_w,
            metrics.measure(footer_style.font),
        )
    )

    header_h = header_height(config, len(header_lines), header_style)
    content_start_y = header_h
    if header_lines:
        content_start_y += header_style.rule_gap_mm

    footer_h = footer_height(config, len(footer_lines), footer_style)
    footer_y = page_h - footer_h - footer_style.start_pad_mm
    content_max_y = footer_y - footer_style.content_pad_mm

    return PageGeometry(
        page_w=page_w,
        page_h=page_h,
        margin=margin,
        usable_w=usable_w,
        header_height=header_h,
        content_start_y=content_start_y,
        footer_height=footer_h,
        footer_y=footer_y,
        content_max_y=content_max_y,
        header_lines=header_lines,
        footer_lines=footer_lines,
    )
