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

from typing import Sequence

from .model import BlockRole, TextBlock
from .pages import PageBreakCoordinator
from .paragraphs import Paragraph
from .spec import (
    ADDRESSEE_PREFIX,
    AddresseeStyle,
    Align,
    BodyStyle,
    FontSpec,
    LayoutConfig,
    TitleStyle,
)
from .text import TextMetrics, normalize_text, wrap_text

__all__ = ["flow_paragraphs", "place_addressee", "place_title"]


def _place_block(
    coordinator: PageBreakCoordinator,
    *,
    role: BlockRole,
    lines: Sequence[str],
    x: float,
    width: float,
    line_height: float,
    font: FontSpec,
    align: Align,
    ends_paragraph: bool = True,
) -> None:
    """Place ``lines`` at the cursor, spilling onto new pages line by line."""
    remaining = list(lines)
    if coordinator.fits(len(remaining) * line_height):
        coordinator.place(
            TextBlock(
                role=role,
                x_mm=x,
                y_mm=coordinator.current_y(),
                width_mm=width,
                lines=tuple(remaining),
                line_height_mm=line_height,
                font=font,
                align=align,
                justify_last=not ends_paragraph,
            )
        )
        coordinator.advance(len(remaining) * line_height)
        return

    while remaining:
        available = coordinator.lines_available(line_height)
        if available >= len(remaining):
            chunk, remaining = remaining, []
        elif available > 0:
            chunk, remaining = remaining[:available], remaining[available:]
        else:
            chunk = []
        if chunk:
            finished = not remaining
            coordinator.place(
                TextBlock(
                    role=role,
                    x_mm=x,
                    y_mm=coordinator.current_y(),
                    width_mm=width,
                    lines=tuple(chunk),
                    line_height_mm=line_height,
                    font=font,
                    align=align,
                    justify_last=not (finished and ends_paragraph),
                )
            )
            coordinator.advance(len(chunk) * line_height)
        if remaining:
            coordinator.break_page()


def _add_gap(coordinator: PageBreakCoordinator, gap: float) -> None:
    if coordinator.fits(gap):
        coordinator.advance(gap)
    else:
        coordinator.break_page()


def place_addressee(
    coordinator: PageBreakCoordinator,
    config: LayoutConfig,
    metrics: TextMetrics,
    style: AddresseeStyle = AddresseeStyle(),
) -> None:
    name = normalize_text(config.addressee_name.strip())
    org = normalize_text(config.addressee_org)
    if not name and not org.strip():
        return
    geometry = coordinator.geometry
    measure = metrics.measure(style.font)
    lines: list[str] = []
    if name:
        lines.extend(wrap_text(f"{ADDRESSEE_PREFIX} {name}", geometry.usable_w, measure))
    for raw in org.splitlines():
        lines.extend(wrap_text(raw, geometry.usable_w, measure))
    _place_block(
        coordinator,
        role="addressee",
        lines=lines,
        x=geometry.margin,
        width=geometry.usable_w,
        line_height=style.line_step_mm,
        font=style.font,
        align="left",
    )
    _add_gap(coordinator, style.trailing_gap_mm)


def place_title(
    coordinator: PageBreakCoordinator,
    title: str | None,
    metrics: TextMetrics,
    style: TitleStyle = TitleStyle(),
) -> None:
    text = normalize_text((title or "").strip().upper())
    if not text:
        return
    geometry = coordinator.geometry
    lines = wrap_text(text, geometry.usable_w - style.width_inset_mm, metrics.measure(style.font))
    _place_block(
        coordinator,
        role="title",
        lines=lines,
        x=geometry.margin,
        width=geometry.usable_w,
        line_height=style.line_step_mm,
        font=style.font,
        align="center",
    )
    _add_gap(coordinator, style.trailing_gap_mm)


def flow_paragraphs(
    coordinator: PageBreakCoordinator,
    paragraphs: Sequence[Paragraph],
    metrics: TextMetrics,
    style: BodyStyle = BodyStyle(),
) -> None:
    geometry = coordinator.geometry
    measure = metrics.measure(style.font)
    for paragraph in paragraphs:
        indent = style.numbered_indent_mm if paragraph.numbered else 0.0
        text_width = geometry.usable_w - indent
        lines = wrap_text(normalize_text(paragraph.text), text_width, measure)
        if not lines:
            continue
        _place_block(
            coordinator,
            role="body",
            lines=lines,
            x=geometry.margin + indent,
            width=text_width,
            line_height=style.line_height_mm,
            font=style.font,
            align="justify",
        )
        _add_gap(coordinator, style.paragraph_gap_mm)
    coordinator.advance(style.trailing_gap_mm)
