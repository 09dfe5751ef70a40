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

import importlib.metadata
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import typer
from rich.traceback import install as install_rich_traceback

from ...compose.errors import CompositionError
from ..ui import console_err

_HANDLED_ERRORS = (OSError, RuntimeError, ValueError, LookupError)


@dataclass(frozen=True)
class GlobalFlags:
    config: str | None
    quiet: bool
    debug: bool


def _run_cli(func: Callable[[], Any], *, debug: bool) -> None:
    """Run a command body, turning expected failures into exit code 2."""
    if debug:
        install_rich_traceback(show_locals=True)
    try:
        func()
    except _HANDLED_ERRORS as exc:
        if debug:
            raise
        label = "Composition failed" if isinstance(exc, CompositionError) else "Error"
        console_err.print(f"[error]{label}:[/error] {exc}")
        raise typer.Exit(code=2) from None


def _global_flags(ctx: typer.Context) -> GlobalFlags:
    values: dict[str, Any] = ctx.obj or {}
    return GlobalFlags(
        config=values.get("config"),
        quiet=bool(values.get("quiet")),
        debug=bool(values.get("debug")),
    )


def _get_version() -> str:
    try:
        return importlib.metadata.version("declaro")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0"
