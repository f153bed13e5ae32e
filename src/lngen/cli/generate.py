# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command generating LICENSE and NOTICE files for a bundle directory."""

from __future__ import annotations

import typer

from ..config import ConfigError, GeneratorConfig, load_config
from ..errors import SetupError
from ..logging import configure_logging
from ..pipeline import GenerationResult, generate
from ._generate_cli_models import (
    CONFIG_OPTION,
    DESTINATION_ARGUMENT,
    JOBS_OPTION,
    LICENSES_OPTION,
    MAX_DEPTH_OPTION,
    NO_EMOJI_OPTION,
    NOTICES_OPTION,
    REPOSITORY_OPTION,
    RESOURCES_OPTION,
    SOURCE_ARGUMENT,
    STRICT_OPTION,
    VERBOSE_OPTION,
    GenerateCLIOptions,
    build_generate_options,
)
from .shared import EXIT_FAILURE, EXIT_OK, EXIT_USAGE, CLIError, CLILogger, build_cli_logger


def generate_command(
    source: SOURCE_ARGUMENT,
    destination: DESTINATION_ARGUMENT = None,
    config_file: CONFIG_OPTION = None,
    repository: REPOSITORY_OPTION = None,
    jobs: JOBS_OPTION = None,
    max_depth: MAX_DEPTH_OPTION = None,
    licenses: LICENSES_OPTION = None,
    notices: NOTICES_OPTION = None,
    resources: RESOURCES_OPTION = None,
    strict: STRICT_OPTION = False,
    verbose: VERBOSE_OPTION = False,
    no_emoji: NO_EMOJI_OPTION = False,
) -> None:
    """Generate aggregated LICENSE and NOTICE files for the artifacts in SOURCE."""

    options = build_generate_options(
        source,
        destination,
        config_file=config_file,
        repository=repository,
        jobs=jobs,
        max_depth=max_depth,
        licenses=licenses,
        notices=notices,
        resources=resources,
        strict=strict,
        verbose=verbose,
        no_emoji=no_emoji,
    )
    logger = build_cli_logger(emoji=options.emoji)
    configure_logging(verbose=options.verbose)

    try:
        result = _run(options)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    _emit_summary(result, logger)
    if options.strict and result.problems:
        raise typer.Exit(code=EXIT_FAILURE)
    raise typer.Exit(code=EXIT_OK)


def _run(options: GenerateCLIOptions) -> GenerationResult:
    try:
        config = _load_config(options)
    except ConfigError as exc:
        raise CLIError(str(exc), exit_code=EXIT_USAGE) from exc
    try:
        return generate(options.source, options.destination, config)
    except SetupError as exc:
        raise CLIError(str(exc), exit_code=EXIT_FAILURE) from exc


def _load_config(options: GenerateCLIOptions) -> GeneratorConfig:
    return load_config(options.config_file).with_overrides(options.overrides)


def _emit_summary(result: GenerationResult, logger: CLILogger) -> None:
    logger.info(f"Resolved {len(result.artifacts)} artifacts into {len(result.keys)} license keys")
    if result.problems:
        logger.section("Problems")
        for problem in result.problems:
            logger.warn(problem.describe())
    logger.ok(f"Wrote {result.license_path} and {result.notice_path}")


__all__ = ["generate_command"]
