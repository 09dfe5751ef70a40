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

from .model import RuleLine, TextBlock
from .pages import PageBreakCoordinator
from .spec import FontSpec, LayoutConfig, SignatureStyle
from .text import normalize_text


def date_line(city: str, date: str) -> str:
    """``"<city>, <date>."``; the date is display text and is never reformatted."""
    city = city.strip()
    date = date.strip()
    if not city and not date:
        return ""
    separator = ", " if city and date else ""
    return f"{city}{separator}{date}."


def signatory_fields(config: LayoutConfig, style: SignatureStyle) -> list[tuple[str, FontSpec]]:
    candidates = (
        (config.signatory_name.strip().upper(), style.name_font),
        (config.signatory_cpf.strip(), style.field_font),
        (config.signatory_role.strip(), style.field_font),
        (config.signatory_company.strip(), style.company_font),
        (config.signatory_cnpj.strip(), style.field_font),
    )
    return [(normalize_text(text), font) for text, font in candidates if text]


def place_signature_block(
    coordinator: PageBreakCoordinator,
    config: LayoutConfig,
    style: SignatureStyle = SignatureStyle(),
) -> None:
    """Place the date line, signature rule and signatory fields as one unit."""
    if coordinator.fits(style.block_height_mm):
        coordinator.advance(style.gap_mm)
    else:
        coordinator.break_page()

    geometry = coordinator.geometry
    center = geometry.page_w / 2

    line = normalize_text(date_line(config.signature_city, config.signature_date))
    if line:
        coordinator.place(
            TextBlock(
                role="signature",
                x_mm=geometry.margin,
                y_mm=coordinator.current_y(),
                width_mm=geometry.usable_w,
                lines=(line,),
                line_height_mm=style.date_step_mm,
                font=style.date_font,
                align="right",
            )
        )
        coordinator.advance(style.date_step_mm)

    y = coordinator.current_y()
    coordinator.place(
        RuleLine(
            role="signature",
            x1_mm=center - style.rule_width_mm / 2,
            y1_mm=y,
            x2_mm=center + style.rule_width_mm / 2,
            y2_mm=y,
        )
    )
    coordinator.advance(style.rule_step_mm)

    for text, font in signatory_fields(config, style):
        coordinator.place(
            TextBlock(
                role="signature",
                x_mm=geometry.margin,
                y_mm=coordinator.current_y(),
                width_mm=geometry.usable_w,
                lines=(text,),
                line_height_mm=style.field_step_mm,
                font=font,
                align="center",
            )
        )
        coordinator.advance(style.field_step_mm)
