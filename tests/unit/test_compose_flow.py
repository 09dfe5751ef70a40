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

import unittest

from declaro.compose.flow import flow_paragraphs, place_addressee, place_title
from declaro.compose.geometry import COORDINATE_EPSILON, resolve_geometry
from declaro.compose.pages import PageBreakCoordinator
from declaro.compose.paragraphs import Paragraph, split_paragraphs
from declaro.compose.spec import LayoutConfig, default_layout_config
from declaro.compose.text import TextMetrics, split_words
from tests.test_support import CharMetrics, full_width_words


def _coordinator(config: LayoutConfig | None = None) -> PageBreakCoordinator:
    config = config or default_layout_config()
    return PageBreakCoordinator(resolve_geometry(config, TextMetrics()), config)


class TestFlowParagraphs(unittest.TestCase):
    def test_paragraph_that_fits_stays_on_page(self) -> None:
        coordinator = _coordinator()
        paragraph = Paragraph(text=full_width_words(40))
        flow_paragraphs(coordinator, [paragraph], CharMetrics())
        document = coordinator.finish()

        self.assertEqual(document.page_count, 1)
        (block,) = document.pages[0].blocks("body")
        self.assertEqual(len(block.lines), 40)
        self.assertEqual(block.y_mm, 10.0)
        self.assertFalse(block.justify_last)
        # 40 lines, paragraph gap and trailing gap
        self.assertAlmostEqual(coordinator.current_y(), 10.0 + 200.0 + 3.0 + 6.0)

    def test_paragraph_splits_across_break(self) -> None:
        coordinator = _coordinator(LayoutConfig(header_text="Timbre"))
        geometry = coordinator.geometry
        coordinator.advance(geometry.content_max_y - 25.0 - coordinator.current_y())
        self.assertEqual(coordinator.lines_available(5.0), 5)

        paragraph = Paragraph(text=full_width_words(40))
        flow_paragraphs(coordinator, [paragraph], CharMetrics())
        document = coordinator.finish()

        self.assertEqual(document.page_count, 2)
        (first,) = document.pages[0].blocks("body")
        (second,) = document.pages[1].blocks("body")
        self.assertEqual(len(first.lines), 5)
        self.assertEqual(len(second.lines), 35)
        self.assertTrue(first.justify_last)
        self.assertFalse(second.justify_last)
        self.assertEqual(second.y_mm, geometry.content_start_y)
        self.assertEqual(split_words(first.lines + second.lines), paragraph.text.split())

        items = document.pages[1].items
        header_index = items.index(document.pages[1].blocks("header")[0])
        self.assertLess(header_index, items.index(second))

    def test_paragraph_longer_than_a_page(self) -> None:
        coordinator = _coordinator()
        paragraph = Paragraph(text=full_width_words(130))
        flow_paragraphs(coordinator, [paragraph], CharMetrics())
        document = coordinator.finish()

        self.assertEqual(document.page_count, 3)
        counts = [len(page.blocks("body")[0].lines) for page in document.pages]
        self.assertEqual(counts, [55, 55, 20])
        self.assertEqual(len(document.body_lines()), 130)

    def test_break_falls_on_first_paragraph_that_overflows(self) -> None:
        coordinator = _coordinator()
        paragraphs = [Paragraph(text=f"item{idx}") for idx in range(40)]
        flow_paragraphs(coordinator, paragraphs, CharMetrics())
        document = coordinator.finish()

        first_page = document.pages[0].blocks("body")
        second_page = document.pages[1].blocks("body")
        # each paragraph takes 5 mm plus a 3 mm gap from y = 10
        self.assertEqual(len(first_page), 34)
        self.assertEqual(len(second_page), 6)
        last = first_page[-1]
        self.assertLessEqual(last.bottom_mm, coordinator.geometry.content_max_y)
        self.assertGreater(last.bottom_mm + 3.0 + 5.0, coordinator.geometry.content_max_y)
        self.assertEqual(second_page[0].lines, ("item34",))

    def test_numbered_paragraph_is_indented(self) -> None:
        coordinator = _coordinator()
        paragraphs = split_paragraphs("1. Primeiro item\nTexto comum")
        flow_paragraphs(coordinator, paragraphs, TextMetrics())
        numbered, plain = coordinator.finish().pages[0].blocks("body")
        self.assertEqual((numbered.x_mm, numbered.width_mm), (28.0, 162.0))
        self.assertEqual((plain.x_mm, plain.width_mm), (20.0, 170.0))
        self.assertEqual(numbered.align, "justify")

    def test_no_block_crosses_content_limit(self) -> None:
        coordinator = _coordinator(LayoutConfig(header_text="Timbre", footer_text="Rodape"))
        text = "\n".join(
            " ".join(f"palavra{idx}" for idx in range(size)) for size in (3, 80, 7, 150, 1, 40) * 6
        )
        flow_paragraphs(coordinator, split_paragraphs(text), TextMetrics())
        document = coordinator.finish()

        self.assertGreater(document.page_count, 1)
        for page in document.pages:
            for block in page.blocks("body"):
                with self.subTest(page=page.number, y=block.y_mm):
                    self.assertGreaterEqual(block.y_mm, document.geometry.content_start_y)
                    self.assertLessEqual(
                        block.bottom_mm,
                        document.geometry.content_max_y + COORDINATE_EPSILON,
                    )
        self.assertEqual(split_words(document.body_lines()), text.split())


class TestAddresseeAndTitle(unittest.TestCase):
    def test_addressee_lines(self) -> None:
        coordinator = _coordinator()
        config = LayoutConfig(
            addressee_name="Agente de Contratação",
            addressee_org="Prefeitura Municipal\nSetor de Licitações",
        )
        place_addressee(coordinator, config, TextMetrics())
        (block,) = coordinator.finish().pages[0].blocks("addressee")
        self.assertEqual(
            block.lines,
            ("Ao Agente de Contratação", "Prefeitura Municipal", "Setor de Licitações"),
        )
        self.assertEqual(block.line_height_mm, 5.0)
        self.assertAlmostEqual(coordinator.current_y(), 10.0 + 15.0 + 6.0)

    def test_empty_addressee_is_skipped(self) -> None:
        coordinator = _coordinator()
        place_addressee(coordinator, LayoutConfig(addressee_name="  "), TextMetrics())
        self.assertTrue(coordinator.page_is_fresh)
        self.assertEqual(coordinator.current_y(), 10.0)

    def test_title_is_uppercase_and_centered(self) -> None:
        coordinator = _coordinator()
        place_title(coordinator, "declaração de idoneidade", TextMetrics())
        (block,) = coordinator.finish().pages[0].blocks("title")
        self.assertEqual(block.lines, ("DECLARAÇÃO DE IDONEIDADE",))
        self.assertEqual(block.align, "center")
        self.assertEqual(block.font.style, "B")
        self.assertAlmostEqual(coordinator.current_y(), 10.0 + 6.0 + 6.0)

    def test_missing_title_is_skipped(self) -> None:
        coordinator = _coordinator()
        place_title(coordinator, None, TextMetrics())
        place_title(coordinator, "   ", TextMetrics())
        self.assertTrue(coordinator.page_is_fresh)


if __name__ == "__main__":
    unittest.main()
