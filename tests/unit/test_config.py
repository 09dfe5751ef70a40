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

import tempfile
import unittest
from pathlib import Path

from declaro.config import (
    DEFAULT_LAYOUTS_PATH,
    load_layout_config,
    load_layouts,
)
from tests.test_support import png_bytes, write_png

_LAYOUTS = """
[defaults]
layout = "acme"

[layouts.acme]
name = "ACME Ltda"
header_image = "assets/logo.png"
header_image_width_mm = 50
header_image_height_mm = 25.5
header_text = "ACME Ltda - CNPJ 00.000.000/0001-00"
footer_text = "Rua A, 1"
addressee_name = "Agente de Contratação"
signatory_name = "Maria"

[layouts.Simples]
name = "Simples"
"""


class TestLoadLayouts(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _write(self, content: str, name: str = "layouts.toml") -> Path:
        path = self.root / name
        path.write_text(content, encoding="utf-8")
        return path

    def test_layouts_and_relative_images(self) -> None:
        (self.root / "assets").mkdir()
        write_png(self.root / "assets" / "logo.png")
        path = self._write(_LAYOUTS)

        loaded = load_layouts(path)
        self.assertEqual(loaded.path, path)
        self.assertEqual(loaded.default_key, "acme")
        self.assertEqual(set(loaded.layouts), {"acme", "Simples"})

        acme = loaded.get()
        self.assertEqual(acme.name, "ACME Ltda")
        self.assertEqual(acme.config.header_image.data, png_bytes())
        self.assertEqual(acme.config.header_image.width_mm, 50.0)
        self.assertEqual(acme.config.header_image.height_mm, 25.5)
        self.assertIsNone(acme.config.footer_image)
        self.assertEqual(acme.config.addressee_name, "Agente de Contratação")
        self.assertEqual(acme.config.signatory_cpf, "")

    def test_get_is_case_insensitive(self) -> None:
        (self.root / "assets").mkdir()
        write_png(self.root / "assets" / "logo.png")
        loaded = load_layouts(self._write(_LAYOUTS))
        self.assertEqual(loaded.get("simples").key, "Simples")
        self.assertEqual(loaded.get(" ACME ").key, "acme")
        with self.assertRaises(ValueError) as ctx:
            loaded.get("outro")
        self.assertIn("Simples", str(ctx.exception))

    def test_image_defaults_size(self) -> None:
        write_png(self.root / "logo.png")
        path = self._write('[layouts.a]\nfooter_image = "logo.png"\n')
        config = load_layout_config(path)
        self.assertEqual((config.footer_image.width_mm, config.footer_image.height_mm), (40.0, 20.0))

    def test_invalid_files(self) -> None:
        cases = (
            ('[layouts.a]\ncolour = "red"\n', ValueError),
            ("[layouts.a]\nheader_text = 3\n", ValueError),
            ('[layouts]\na = "texto"\n', ValueError),
            ('[defaults]\nlayout = "b"\n[layouts.a]\n', ValueError),
            ('[layouts.a]\nheader_image = "missing.png"\n', FileNotFoundError),
        )
        for content, error in cases:
            with self.subTest(content=content):
                with self.assertRaises(error):
                    load_layouts(self._write(content))

    def test_image_size_must_be_positive(self) -> None:
        write_png(self.root / "logo.png")
        for value in ("0", "-2", '"big"', "true"):
            with self.subTest(value=value):
                path = self._write(
                    f'[layouts.a]\nheader_image = "logo.png"\nheader_image_height_mm = {value}\n'
                )
                with self.assertRaises(ValueError):
                    load_layouts(path)

    def test_empty_file_gets_default_layout(self) -> None:
        loaded = load_layouts(self._write(""))
        self.assertEqual(loaded.default_key, "default")
        self.assertFalse(loaded.get().config.has_header)

    def test_without_defaults_prefers_default_key(self) -> None:
        loaded = load_layouts(self._write('[layouts.x]\n[layouts.default]\nname = "Base"\n'))
        self.assertEqual(loaded.default_key, "default")
        loaded = load_layouts(self._write('[layouts.x]\n[layouts.y]\n', name="other.toml"))
        self.assertEqual(loaded.default_key, "x")

    def test_bundled_layouts(self) -> None:
        loaded = load_layouts(DEFAULT_LAYOUTS_PATH)
        self.assertEqual(loaded.default_key, "default")
        self.assertIn("blank", loaded.layouts)
        self.assertEqual(loaded.get().config.addressee_name, "Agente de Contratação")
        self.assertEqual(loaded.get("blank").config.addressee_name, "")


if __name__ == "__main__":
    unittest.main()
