# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command showing the canonical license key of a coordinate pair."""

from __future__ import annotations

from typing import Annotated

import typer

from ..models import Coordinates
from ..rules import ConsolidationEngine, ExclusionFilter


def key_command(
    group_id: Annotated[str, typer.Argument(metavar="GROUP", help="Group identifier.")],
    artifact_id: Annotated[str, typer.Argument(metavar="ARTIFACT", help="Artifact identifier.")],
    version: Annotated[str, typer.Option("--version", help="Version identifier.")] = "0",
) -> None:
    """Print the canonical license key GROUP:ARTIFACT consolidates to."""

    coordinates = Coordinates(group_id=group_id, artifact_id=artifact_id, version=version)
    if ExclusionFilter().excludes(coordinates):
        typer.echo(f"{coordinates.ga} is excluded: covered by the distribution license")
        raise typer.Exit(code=0)

    rule = ConsolidationEngine().explain(coordinates)
    typer.echo(f"{rule.key_for(coordinates)}\t({rule.kind.value}: {rule.name})")


__all__ = ["key_command"]
