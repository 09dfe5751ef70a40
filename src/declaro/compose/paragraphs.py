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

import re
from dataclasses import dataclass

from .spec import ParagraphMode

_NUMBERED_RE = re.compile(r"^\d+[.)]\s")
_BLANK_LINE_RE = re.compile(r"\n[ \t\r\f\v]*\n")
PARAGRAPH_MODES: tuple[ParagraphMode, ...] = ("lines", "blank-lines")


@dataclass(frozen=True)
class Paragraph:
    text: str
    numbered: bool = False


def is_numbered(text: str) -> bool:
    """True for paragraphs opening with ``N.`` or ``N)`` followed by whitespace."""
    return _NUMBERED_RE.match(text.strip()) is not None


def classify_paragraph(text: str) -> Paragraph:
    stripped = text.strip()
    return Paragraph(text=stripped, numbered=is_numbered(stripped))


def split_paragraphs(source: str, mode: ParagraphMode = "lines") -> list[Paragraph]:
    """Recover paragraphs from plain text.

    ``lines`` treats every non-blank line as its own paragraph. ``blank-lines``
    only splits on blank lines and folds the single newlines inside a
    paragraph into spaces.
    """
    if mode not in PARAGRAPH_MODES:
        raise ValueError(f"unknown paragraph mode: {mode}")
    text = source.replace("\r\n", "\n").replace("\r", "\n")
    if mode == "lines":
        chunks = text.split("\n")
    else:
        chunks = [" ".join(chunk.split("\n")) for chunk in _BLANK_LINE_RE.split(text)]
    return [classify_paragraph(chunk) for chunk in chunks if chunk.strip()]
