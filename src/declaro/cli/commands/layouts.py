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

import typer

from ...config import load_layouts
from ..core.common import _global_flags, _run_cli
from ..ui import build_layouts_table, console

_LAYOUTS_HELP = (
    "List the named layouts available to `declaro compose --layout`.\n\n"
    "Examples:\n"
    "  declaro layouts\n"
    "  declaro layouts --print-path\n"
    "  declaro --config ./layouts.toml layouts\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_LAYOUTS_HELP)(layouts)


def layouts(
    ctx: typer.Context,
    print_path: bool = typer.Option(
        False,
        "--print-path",
        help="Print the resolved layouts file path and exit.",
        rich_help_panel="Behavior",
    ),
) -> None:
    flags = _global_flags(ctx)

    def _run() -> None:
        loaded = load_layouts(flags.config)
        if print_path:
            console.print(str(loaded.path))
            return
        rows = [
            (key, layout.name, key == loaded.default_key)
            for key, layout in loaded.layouts.items()
        ]
        console.print(build_layouts_table(rows))

    _run_cli(_run, debug=flags.debug)
