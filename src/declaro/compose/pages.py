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

from typing import Literal

from .errors import RunawayPagination
from .geometry import COORDINATE_EPSILON, PageGeometry, lines_that_fit
from .model import Document, DrawItem, ImageBox, Page, RuleLine, TextBlock
from .spec import FooterStyle, HeaderStyle, LayoutConfig

MAX_PAGES = 200

CoordinatorState = Literal["open", "closed"]


class PageBreakCoordinator:
    """Owns the vertical cursor and the page list for one composition pass.

    The first page is opened (header stamped) on construction. ``break_page``
    closes the open page by stamping its footer and opens the next one;
    ``finish`` stamps the last footer and hands back the Document.
    """

    def __init__(
        self,
        geometry: PageGeometry,
        config: LayoutConfig,
        *,
        max_pages: int = MAX_PAGES,
        header_style: HeaderStyle = HeaderStyle(),
        footer_style: FooterStyle = FooterStyle(),
    ) -> None:
        if max_pages < 1:
            raise ValueError("max_pages must be at least 1")
        self.geometry = geometry
        self.config = config
        self.max_pages = max_pages
        self._header_style = header_style
        self._footer_style = footer_style
        self._closed: list[Page] = []
        self._items: list[DrawItem] = []
        self._page_number = 0
        self._y = 0.0
        self._content_placed = False
        self.state: CoordinatorState = "open"
        self._open_page()

    @property
    def page_number(self) -> int:
        return self._page_number

    @property
    def page_is_fresh(self) -> bool:
        """True while nothing but the header was placed on the open page."""
        return not self._content_placed

    def current_y(self) -> float:
        return self._y

    def remaining(self) -> float:
        return self.geometry.content_max_y - self._y

    def fits(self, height: float) -> bool:
        return self._y + height <= self.geometry.content_max_y + COORDINATE_EPSILON

    def lines_available(self, line_height: float) -> int:
        return lines_that_fit(self.remaining(), line_height)

    def advance(self, dy: float) -> float:
        self._require_open()
        self._y += dy
        return self._y

    def place(self, item: DrawItem) -> None:
        self._require_open()
        self._items.append(item)
        self._content_placed = True

    def break_page(self) -> float:
        self._require_open()
        if self._page_number + 1 > self.max_pages:
            raise RunawayPagination(self.max_pages)
        self._close_page()
        return self._open_page()

    def finish(self) -> Document:
        self._require_open()
        self._close_page()
        self.state = "closed"
        return Document(geometry=self.geometry, pages=tuple(self._closed))

    def _require_open(self) -> None:
        if self.state != "open":
            raise RuntimeError("page coordinator is closed")

    def _open_page(self) -> float:
        self._page_number += 1
        self._items = []
        self._content_placed = False
        self._y = self._stamp_header()
        return self._y

    def _close_page(self) -> None:
        self._stamp_footer()
        self._closed.append(Page(number=self._page_number, items=tuple(self._items)))
        self._items = []

    def _stamp_header(self) -> float:
        geometry = self.geometry
        style = self._header_style
        image = self.config.header_image
        y = style.top_mm
        if image is not None:
            self._items.append(
                ImageBox(
                    field="header_image",
                    data=image.data,
                    x_mm=(geometry.page_w - image.width_mm) / 2,
                    y_mm=y,
                    width_mm=float(image.width_mm),
                    height_mm=float(image.height_mm),
                )
            )
            y += float(image.height_mm) + style.image_gap_mm
        if geometry.header_lines:
            self._items.append(
                TextBlock(
                    role="header",
                    x_mm=geometry.margin,
                    y_mm=y,
                    width_mm=geometry.usable_w,
                    lines=geometry.header_lines,
                    line_height_mm=style.line_step_mm,
                    font=style.font,
                    align="center",
                )
            )
            y += len(geometry.header_lines) * style.line_step_mm + style.text_tail_mm
        if geometry.header_lines:
            self._items.append(
                RuleLine(
                    role="header",
                    x1_mm=geometry.margin,
                    y1_mm=y,
                    x2_mm=geometry.page_w - geometry.margin,
                    y2_mm=y,
                    gray=style.rule_gray,
                )
            )
            y += style.rule_gap_mm
        return y

    def _stamp_footer(self) -> None:
        geometry = self.geometry
        style = self._footer_style
        image = self.config.footer_image
        lines = geometry.footer_lines
        image_bottom = geometry.page_h - style.image_bottom_mm
        if lines:
            last_baseline = geometry.page_h - style.baseline_offset_mm
            first_baseline = last_baseline - (len(lines) - 1) * style.line_step_mm
            self._items.append(
                TextBlock(
                    role="footer",
                    x_mm=geometry.margin,
                    y_mm=first_baseline,
                    width_mm=geometry.usable_w,
                    lines=lines,
                    line_height_mm=style.line_step_mm,
                    font=style.font,
                    align="center",
                )
            )
            image_bottom = last_baseline - len(lines) * style.line_step_mm - style.text_gap_mm
        if image is not None:
            self._items.append(
                ImageBox(
                    field="footer_image",
                    data=image.data,
                    x_mm=(geometry.page_w - image.width_mm) / 2,
                    y_mm=image_bottom - float(image.height_mm),
                    width_mm=float(image.width_mm),
                    height_mm=float(image.height_mm),
                )
            )
