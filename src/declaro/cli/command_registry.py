#!/usr/bin/env python3
from __future__ import annotations

import typer

from .commands import (
    compose as compose_command,
    layouts as layouts_command,
)


def register(app: typer.Typer) -> None:
    compose_command.register(app)
    layouts_command.register(app)
