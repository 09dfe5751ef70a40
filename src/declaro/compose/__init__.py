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

"""Declaration layout engine: geometry, wrapping, pagination and PDF output."""

from .errors import (
    CompositionError,
    InsufficientContentArea,
    InvalidImageData,
    RunawayPagination,
)
from .geometry import PageGeometry, resolve_geometry
from .model import Document, ImageBox, Page, RuleLine, TextBlock
from .pages import MAX_PAGES, PageBreakCoordinator
from .paragraphs import Paragraph, classify_paragraph, is_numbered, split_paragraphs
from .pdf_render import render_pdf, write_pdf
from .service import compose, compose_to_pdf, default_output_name
from .spec import (
    FontSpec,
    ImageSpec,
    LayoutConfig,
    PageSpec,
    apply_layout_patch,
    default_layout_config,
)
from .text import TextMetrics, normalize_text, wrap_text

__all__ = [
    "CompositionError",
    "Document",
    "FontSpec",
    "ImageBox",
    "ImageSpec",
    "InsufficientContentArea",
    "InvalidImageData",
    "LayoutConfig",
    "MAX_PAGES",
    "Page",
    "PageBreakCoordinator",
    "PageGeometry",
    "PageSpec",
    "Paragraph",
    "RuleLine",
    "RunawayPagination",
    "TextBlock",
    "TextMetrics",
    "apply_layout_patch",
    "classify_paragraph",
    "compose",
    "compose_to_pdf",
    "default_layout_config",
    "default_output_name",
    "is_numbered",
    "normalize_text",
    "render_pdf",
    "resolve_geometry",
    "split_paragraphs",
    "wrap_text",
    "write_pdf",
]
