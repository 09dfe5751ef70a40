#!/usr/bin/env python3
from __future__ import annotations

from ..ui import console, console_err


def _warn(message: str, *, quiet: bool) -> None:
    if not quiet:
        console_err.print(f"[warning]Warning:[/warning] {message}")


def _info(message: str, *, quiet: bool) -> None:
    if not quiet:
        console.print(f"[muted]{message}[/muted]")
