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

from datetime import datetime
from pathlib import Path

from .errors import InsufficientContentArea
from .flow import flow_paragraphs, place_addressee, place_title
from .geometry import resolve_geometry
from .images import check_layout_images
from .model import Document
from .pages import MAX_PAGES, PageBreakCoordinator
from .paragraphs import split_paragraphs
from .pdf_render import write_pdf
from .signature import place_signature_block
from .spec import (
    LayoutConfig,
    PageSpec,
    ParagraphMode,
    SignatureStyle,
    default_layout_config,
)
from .text import TextMetrics


def compose(
    source_text: str,
    config: LayoutConfig | None = None,
    *,
    title: str | None = None,
    paragraph_mode: ParagraphMode = "lines",
    page: PageSpec = PageSpec(),
    max_pages: int = MAX_PAGES,
) -> Document:
    """Lay out a declaration into closed pages.

    Pure: the same arguments always give an equal Document. Raises a
    ``CompositionError`` subclass instead of returning a partial document.
    """
    config = config or default_layout_config()
    check_layout_images(config)
    paragraphs = split_paragraphs(source_text or "", paragraph_mode)

    metrics = TextMetrics(page)
    geometry = resolve_geometry(config, metrics, page)
    signature_style = SignatureStyle()
    if geometry.content_height < signature_style.block_height_mm:
        raise InsufficientContentArea(geometry.content_height, signature_style.block_height_mm)

    coordinator = PageBreakCoordinator(geometry, config, max_pages=max_pages)
    place_addressee(coordinator, config, metrics)
    place_title(coordinator, title, metrics)
    flow_paragraphs(coordinator, paragraphs, metrics)
    place_signature_block(coordinator, config, signature_style)
    return coordinator.finish()


def compose_to_pdf(
    source_text: str,
    output_path: str | Path,
    config: LayoutConfig | None = None,
    *,
    title: str | None = None,
    paragraph_mode: ParagraphMode = "lines",
    creation_date: datetime | None = None,
) -> Document:
    document = compose(source_text, config, title=title, paragraph_mode=paragraph_mode)
    write_pdf(document, output_path, title=title, creation_date=creation_date)
    return document


def default_output_name(title: str | None, fallback_stem: str = "declaration") -> str:
    """``Declaracao_<TITLE>.pdf`` with spaces as underscores, capped at 40 chars."""
    cleaned = (title or "").strip()
    if not cleaned:
        return f"{fallback_stem}.pdf"
    stem = "_".join(cleaned.upper().split())[:40]
    stem = "".join(ch for ch in stem if ch.isalnum() or ch in "_-")
    return f"Declaracao_{stem}.pdf"
