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

import unicodedata
from typing import Callable, Sequence

from fpdf import FPDF

from .spec import FontSpec, PageSpec

Measure = Callable[[str], float]

_TYPOGRAPHIC = str.maketrans(
    {
        "\u2018": "'",
        "\u2019": "'",
        "\u201a": ",",
        "\u201c": '"',
        "\u201d": '"',
        "\u201e": '"',
        "\u2013": "-",
        "\u2014": "-",
        "\u2212": "-",
        "\u2026": "...",
        "\u2022": "-",
        "\u00a0": " ",
        "\u202f": " ",
        "\u2009": " ",
        "\u200b": "",
        "\ufeff": "",
    }
)


def normalize_text(text: str) -> str:
    """Fold text into the Latin-1 range the PDF core fonts can encode."""
    text = text.translate(_TYPOGRAPHIC)
    if all(ord(ch) < 256 for ch in text):
        return text
    out: list[str] = []
    for ch in text:
        if ord(ch) < 256:
            out.append(ch)
            continue
        folded = "".join(
            part for part in unicodedata.normalize("NFKD", ch) if ord(part) < 256
        )
        out.append(folded or "?")
    return "".join(out)


class TextMetrics:
    """String widths in millimetres from the fpdf2 core font tables."""

    def __init__(self, page: PageSpec | None = None) -> None:
        page = page or PageSpec()
        self._pdf = FPDF(unit="mm", format=(page.width_mm, page.height_mm))
        self._font: FontSpec | None = None

    def width(self, text: str, font: FontSpec) -> float:
        if font != self._font:
            self._pdf.set_font(font.family, style=font.style, size=font.size_pt)
            self._font = font
        return float(self._pdf.get_string_width(text))

    def measure(self, font: FontSpec) -> Measure:
        return lambda text: self.width(text, font)


def wrap_text(
    text: str,
    max_width: float,
    measure: Measure,
    *,
    indent: float = 0.0,
) -> list[str]:
    words = text.split()
    if not words:
        return []
    available = max_width - indent
    lines: list[str] = []
    current = ""
    for word in words:
        candidate = word if not current else f"{current} {word}"
        if measure(candidate) <= available:
            current = candidate
            continue
        if current:
            lines.append(current)
        # An over-wide word gets a line of its own and protrudes.
        current = word
    lines.append(current)
    return lines


def wrap_lines_to_width(text: str, max_width: float, measure: Measure) -> list[str]:
    wrapped: list[str] = []
    for line in text.splitlines():
        wrapped.extend(wrap_text(line, max_width, measure))
    return wrapped


def split_words(lines: Sequence[str]) -> list[str]:
    return [word for line in lines for word in line.split()]
