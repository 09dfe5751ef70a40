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

import io
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, cast

from fpdf import FPDF
from fpdf.errors import FPDFException

from .errors import InvalidImageData
from .model import Document, ImageBox, RuleLine, TextBlock

_RULE_THICKNESS_MM = 0.2
_CREATOR = "declaro"


def render_pdf(
    document: Document,
    *,
    title: str | None = None,
    creation_date: datetime | None = None,
) -> bytes:
    """Draw every page of ``document`` and return the PDF bytes."""
    geometry = document.geometry
    pdf = FPDF(unit="mm", format=cast(Any, (geometry.page_w, geometry.page_h)))
    pdf.set_auto_page_break(False)
    pdf.set_creator(_CREATOR)
    if title:
        pdf.set_title(title)
    if creation_date is not None:
        if creation_date.tzinfo is None:
            creation_date = creation_date.replace(tzinfo=timezone.utc)
        pdf.creation_date = creation_date

    for page in document.pages:
        pdf.add_page()
        for item in page.items:
            if isinstance(item, TextBlock):
                _draw_text_block(pdf, item)
            elif isinstance(item, ImageBox):
                _place_image(pdf, item)
            elif isinstance(item, RuleLine):
                _draw_rule(pdf, item)
    return bytes(pdf.output())


def write_pdf(
    document: Document,
    output_path: str | Path,
    *,
    title: str | None = None,
    creation_date: datetime | None = None,
) -> Path:
    payload = render_pdf(document, title=title, creation_date=creation_date)
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(payload)
    return output_path


def _draw_text_block(pdf: FPDF, block: TextBlock) -> None:
    font = block.font
    pdf.set_font(font.family, style=font.style, size=font.size_pt)
    pdf.set_text_color(font.gray)
    last = len(block.lines) - 1
    for idx, line in enumerate(block.lines):
        y = block.y_mm + idx * block.line_height_mm
        justify = block.align == "justify" and (idx < last or block.justify_last)
        if justify:
            _draw_justified_line(pdf, line, block.x_mm, y, block.width_mm)
            continue
        width = pdf.get_string_width(line)
        if block.align == "center":
            x = block.x_mm + (block.width_mm - width) / 2
        elif block.align == "right":
            x = block.x_mm + block.width_mm - width
        else:
            x = block.x_mm
        pdf.text(x, y, line)
    pdf.set_text_color(0)


def _draw_justified_line(pdf: FPDF, line: str, x: float, y: float, width: float) -> None:
    words = line.split()
    if len(words) < 2:
        pdf.text(x, y, line)
        return
    widths = [pdf.get_string_width(word) for word in words]
    gap = (width - sum(widths)) / (len(words) - 1)
    if gap < pdf.get_string_width(" "):
        pdf.text(x, y, " ".join(words))
        return
    cursor = x
    for word, word_w in zip(words, widths):
        pdf.text(cursor, y, word)
        cursor += word_w + gap


def _place_image(pdf: FPDF, image: ImageBox) -> None:
    try:
        pdf.image(
            io.BytesIO(image.data),
            x=image.x_mm,
            y=image.y_mm,
            w=image.width_mm,
            h=image.height_mm,
        )
    except (FPDFException, OSError, ValueError, SyntaxError) as exc:
        raise InvalidImageData(image.field, str(exc) or exc.__class__.__name__) from exc


def _draw_rule(pdf: FPDF, rule: RuleLine) -> None:
    pdf.set_draw_color(rule.gray)
    pdf.set_line_width(_RULE_THICKNESS_MM)
    pdf.line(rule.x1_mm, rule.y1_mm, rule.x2_mm, rule.y2_mm)
    pdf.set_draw_color(0)
