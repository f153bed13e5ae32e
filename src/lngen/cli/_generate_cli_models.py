# SPDX-License-Identifier: MIT
"""Data structures for the generate CLI command."""

from __future__ import annotations

import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any

import typer

SOURCE_ARGUMENT = Annotated[
    Path,
    typer.Argument(metavar="SOURCE", help="Bundle directory holding the packaged artifacts."),
]
DESTINATION_ARGUMENT = Annotated[
    Path | None,
    typer.Argument(metavar="[DEST]", help="Directory receiving LICENSE and NOTICE (defaults to the temp dir)."),
]
CONFIG_OPTION = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="TOML configuration file ([tool.lngen] when pyproject.toml)."),
]
REPOSITORY_OPTION = Annotated[
    Path | None,
    typer.Option("--repository", "-r", help="Local Maven repository root."),
]
JOBS_OPTION = Annotated[
    int | None,
    typer.Option("--jobs", "-j", min=1, help="Number of concurrent resolution workers."),
]
MAX_DEPTH_OPTION = Annotated[
    int | None,
    typer.Option("--max-depth", min=1, help="Maximum repository search depth."),
]
LICENSES_OPTION = Annotated[
    Path | None,
    typer.Option("--licenses", help="License catalog (XML properties or TOML)."),
]
NOTICES_OPTION = Annotated[
    Path | None,
    typer.Option("--notices", help="Notice catalog (XML properties or TOML)."),
]
RESOURCES_OPTION = Annotated[
    Path | None,
    typer.Option("--resources", help="Directory overriding templates and license texts."),
]
STRICT_OPTION = Annotated[
    bool,
    typer.Option("--strict", help="Exit with status 1 when any artifact or key was skipped."),
]
VERBOSE_OPTION = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Log debug details to stderr."),
]
NO_EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--no-emoji", help="Disable emoji in console output."),
]


@dataclass(slots=True)
class GenerateCLIOptions:
    """Normalised CLI inputs for the generate command."""

    source: Path
    destination: Path
    config_file: Path | None
    overrides: dict[str, Any]
    strict: bool
    verbose: bool
    emoji: bool


def build_generate_options(
    source: Path,
    destination: Path | None,
    *,
    config_file: Path | None,
    repository: Path | None,
    jobs: int | None,
    max_depth: int | None,
    licenses: Path | None,
    notices: Path | None,
    resources: Path | None,
    strict: bool,
    verbose: bool,
    no_emoji: bool,
) -> GenerateCLIOptions:
    """Construct ``GenerateCLIOptions`` from Typer parameters."""

    resolved_destination = destination if destination is not None else Path(tempfile.gettempdir())
    overrides: dict[str, Any] = {
        "repository": _resolve(repository),
        "jobs": jobs,
        "max_depth": max_depth,
        "licenses_catalog": _resolve(licenses),
        "notices_catalog": _resolve(notices),
        "resources_dir": _resolve(resources),
    }
    return GenerateCLIOptions(
        source=source.expanduser().resolve(),
        destination=resolved_destination.expanduser().resolve(),
        config_file=_resolve(config_file),
        overrides=overrides,
        strict=strict,
        verbose=verbose,
        emoji=not no_emoji,
    )


def _resolve(path: Path | None) -> Path | None:
    return path.expanduser().resolve() if path is not None else None


__all__ = [
    "CONFIG_OPTION",
    "DESTINATION_ARGUMENT",
    "GenerateCLIOptions",
    "JOBS_OPTION",
    "LICENSES_OPTION",
    "MAX_DEPTH_OPTION",
    "NOTICES_OPTION",
    "NO_EMOJI_OPTION",
    "REPOSITORY_OPTION",
    "RESOURCES_OPTION",
    "SOURCE_ARGUMENT",
    "STRICT_OPTION",
    "VERBOSE_OPTION",
    "build_generate_options",
]
