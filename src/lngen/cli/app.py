# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

from .generate import generate_command
from .key import key_command
from .typer_ext import create_typer

app = create_typer(
    name="lngen",
    help="Generate LICENSE and NOTICE files for bundled third-party artifacts.",
    no_args_is_help=True,
)
app.command("generate")(generate_command)
app.command("key")(key_command)

__all__ = ["app"]
