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

import sys
from datetime import date as Date
from pathlib import Path
from typing import Literal

import typer

from ...compose import apply_layout_patch, compose, default_output_name, write_pdf
from ...config import load_layouts
from ..core.common import _global_flags, _run_cli
from ..core.log import _warn
from ..ui import build_kv_table, console

ParagraphOption = Literal["lines", "blank-lines"]

_PT_BR_MONTHS = (
    "janeiro",
    "fevereiro",
    "março",
    "abril",
    "maio",
    "junho",
    "julho",
    "agosto",
    "setembro",
    "outubro",
    "novembro",
    "dezembro",
)

_COMPOSE_HELP = (
    "Compose a declaration text file into a paginated PDF.\n\n"
    "Examples:\n"
    "  declaro compose declaracao.txt\n"
    "  declaro compose declaracao.txt --layout blank -o out.pdf\n"
    '  declaro compose - --title "Declaração de Idoneidade" < texto.txt\n'
)


def register(app: typer.Typer) -> None:
    app.command(name="compose", help=_COMPOSE_HELP)(compose_command)


def compose_command(
    ctx: typer.Context,
    input: str = typer.Argument(..., help="Declaration text file, or '-' for stdin."),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output PDF path (defaults to Declaracao_<TITLE>.pdf).",
        rich_help_panel="Outputs",
    ),
    layout: str | None = typer.Option(
        None,
        "--layout",
        "-l",
        help="Layout key from the layouts file.",
        rich_help_panel="Layout",
    ),
    title: str | None = typer.Option(
        None,
        "--title",
        help="Document title printed above the body.",
        rich_help_panel="Layout",
    ),
    city: str | None = typer.Option(
        None, "--city", help="Signature city.", rich_help_panel="Signature"
    ),
    date: str | None = typer.Option(
        None, "--date", help="Signature date (free text, defaults to today).", rich_help_panel="Signature"
    ),
    signatory_name: str | None = typer.Option(
        None, "--signatory-name", help="Signatory name.", rich_help_panel="Signature"
    ),
    signatory_role: str | None = typer.Option(
        None, "--signatory-role", help="Signatory role.", rich_help_panel="Signature"
    ),
    signatory_cpf: str | None = typer.Option(
        None, "--signatory-cpf", help="Signatory CPF.", rich_help_panel="Signature"
    ),
    signatory_company: str | None = typer.Option(
        None, "--signatory-company", help="Company name.", rich_help_panel="Signature"
    ),
    signatory_cnpj: str | None = typer.Option(
        None, "--signatory-cnpj", help="Company CNPJ.", rich_help_panel="Signature"
    ),
    paragraphs: ParagraphOption = typer.Option(
        "lines",
        "--paragraphs",
        help="Paragraph splitting: every line, or blank-line separated blocks.",
        rich_help_panel="Layout",
    ),
) -> None:
    flags = _global_flags(ctx)

    def _run() -> None:
        source_text, input_stem = _read_input(input)
        named = load_layouts(flags.config).get(layout)
        overrides = {
            "signature_city": city,
            "signature_date": date,
            "signatory_name": signatory_name,
            "signatory_role": signatory_role,
            "signatory_cpf": signatory_cpf,
            "signatory_company": signatory_company,
            "signatory_cnpj": signatory_cnpj,
        }
        patch = {key: value for key, value in overrides.items() if value is not None}
        if "signature_date" not in patch and not named.config.signature_date.strip():
            patch["signature_date"] = long_date_pt_br(Date.today())
        layout_config = apply_layout_patch(named.config, patch)
        if not layout_config.signatory_name.strip():
            _warn(
                "no signatory name set; the signature block will be incomplete",
                quiet=flags.quiet,
            )

        document = compose(source_text, layout_config, title=title, paragraph_mode=paragraphs)
        output_path = output or Path.cwd() / default_output_name(title, input_stem)
        written = write_pdf(document, output_path, title=title)
        if flags.quiet:
            return
        console.print(
            build_kv_table(
                [
                    ("Output", str(written)),
                    ("Layout", named.name),
                    ("Pages", str(document.page_count)),
                ]
            )
        )

    _run_cli(_run, debug=flags.debug)


def _read_input(value: str) -> tuple[str, str]:
    if value == "-":
        return sys.stdin.read(), "declaration"
    path = Path(value)
    return path.read_text(encoding="utf-8"), path.stem


def long_date_pt_br(value: Date) -> str:
    """Format a date the way Brazilian letters do: ``05 de março de 2025``."""
    return f"{value.day:02d} de {_PT_BR_MONTHS[value.month - 1]} de {value.year}"
