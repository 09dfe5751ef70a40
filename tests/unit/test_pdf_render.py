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

import tempfile
import unittest
from dataclasses import replace
from pathlib import Path

from declaro.compose import (
    ImageBox,
    InvalidImageData,
    LayoutConfig,
    Page,
    compose,
    render_pdf,
    write_pdf,
)
from tests.test_support import FIXED_CREATION_DATE, SHORT_TEXT, image_spec, numbered_lines

_FULL_LAYOUT = LayoutConfig(
    header_image=image_spec(),
    header_text="Empresa Exemplo Ltda",
    footer_image=image_spec(height_mm=10.0),
    footer_text="Rua das Flores, 100 - Centro",
    addressee_name="Agente de Contratação",
    signature_city="Recife",
    signature_date="1 de abril de 2025",
    signatory_name="Maria da Silva",
    signatory_cpf="123.456.789-00",
)


class TestRenderPdf(unittest.TestCase):
    def test_renders_pdf_bytes(self) -> None:
        payload = render_pdf(compose(SHORT_TEXT))
        self.assertTrue(payload.startswith(b"%PDF"))
        self.assertIn(b"%%EOF", payload[-64:])

    def test_full_layout_renders(self) -> None:
        document = compose(numbered_lines(80), _FULL_LAYOUT, title="Declaração")
        self.assertGreater(document.page_count, 1)
        payload = render_pdf(document, title="Declaração", creation_date=FIXED_CREATION_DATE)
        self.assertTrue(payload.startswith(b"%PDF"))

    def test_fixed_creation_date_is_byte_identical(self) -> None:
        document = compose(numbered_lines(50), _FULL_LAYOUT, title="Declaracao")
        first = render_pdf(document, title="Declaracao", creation_date=FIXED_CREATION_DATE)
        second = render_pdf(
            compose(numbered_lines(50), _FULL_LAYOUT, title="Declaracao"),
            title="Declaracao",
            creation_date=FIXED_CREATION_DATE,
        )
        self.assertEqual(first, second)

    def test_naive_creation_date_is_accepted(self) -> None:
        naive = FIXED_CREATION_DATE.replace(tzinfo=None)
        first = render_pdf(compose(SHORT_TEXT), creation_date=naive)
        second = render_pdf(compose(SHORT_TEXT), creation_date=FIXED_CREATION_DATE)
        self.assertEqual(first, second)

    def test_corrupt_image_is_reported(self) -> None:
        document = compose(SHORT_TEXT)
        broken = ImageBox(
            field="header_image",
            data=b"\x89PNG broken",
            x_mm=85.0,
            y_mm=10.0,
            width_mm=40.0,
            height_mm=20.0,
        )
        page = document.pages[0]
        tampered = replace(
            document,
            pages=(Page(number=page.number, items=(broken,) + page.items),),
        )
        with self.assertRaises(InvalidImageData) as ctx:
            render_pdf(tampered)
        self.assertEqual(ctx.exception.field, "header_image")

    def test_write_pdf_creates_parents(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            target = Path(tmpdir) / "a" / "b" / "declaracao.pdf"
            written = write_pdf(compose(SHORT_TEXT), target, creation_date=FIXED_CREATION_DATE)
            self.assertEqual(written, target)
            self.assertTrue(target.read_bytes().startswith(b"%PDF"))


if __name__ == "__main__":
    unittest.main()
