# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model and TOML loading for LICENSE/NOTICE generation."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .resolver import MAX_SEARCH_DEPTH

REPOSITORY_ENV: Final[str] = "LNGEN_REPOSITORY"
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "lngen"
DEFAULT_ARTIFACT_SUFFIX: Final[str] = ".jar"


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


def default_repository() -> Path:
    """Return the local Maven repository, honouring ``LNGEN_REPOSITORY``.

    Returns:
        Path: Repository root used when no explicit location is configured.
    """

    override = os.environ.get(REPOSITORY_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".m2" / "repository"


def default_jobs() -> int:
    """Return the default number of resolution workers."""

    return os.cpu_count() or 1


class GeneratorConfig(BaseModel):
    """Settings controlling artifact resolution and document rendering."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    repository: Path = Field(default_factory=default_repository)
    max_depth: int = Field(default=MAX_SEARCH_DEPTH, ge=1)
    jobs: int = Field(default_factory=default_jobs, ge=1)
    artifact_suffix: str = DEFAULT_ARTIFACT_SUFFIX
    licenses_catalog: Path | None = None
    notices_catalog: Path | None = None
    resources_dir: Path | None = None
    extra_excluded_groups: list[str] = Field(default_factory=list)
    extra_excluded_prefixes: list[str] = Field(default_factory=list)

    @field_validator("artifact_suffix")
    @classmethod
    def _check_suffix(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("artifact_suffix must not be empty")
        return value.strip()

    def with_overrides(self, overrides: Mapping[str, Any]) -> GeneratorConfig:
        """Return a copy updated with the non-``None`` values of ``overrides``.

        Args:
            overrides: Field values supplied on the command line.

        Returns:
            GeneratorConfig: Validated configuration with overrides applied.

        Raises:
            ConfigError: If an override is invalid.
        """

        payload = self.model_dump(mode="python")
        payload.update({key: value for key, value in overrides.items() if value is not None})
        return _validate(payload, source="command line")


def load_config(path: Path | None = None) -> GeneratorConfig:
    """Load configuration from ``path`` or return defaults.

    ``pyproject.toml`` files are read from their ``[tool.lngen]`` table; any
    other TOML file is read from its top-level table. Relative paths inside
    the file are resolved against the file's directory.

    Args:
        path: Optional TOML configuration file.

    Returns:
        GeneratorConfig: Validated configuration.

    Raises:
        ConfigError: If the file cannot be read or holds invalid settings.
    """

    if path is None:
        return GeneratorConfig()
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Could not read configuration {path}: {exc}") from exc

    section: Any = data
    if path.name == PYPROJECT_FILENAME:
        section = data.get(PYPROJECT_TOOL_KEY, {}).get(PYPROJECT_SECTION_KEY, {})
    if not isinstance(section, Mapping):
        raise ConfigError(f"Configuration at {path} must be a table")
    return _validate(_resolve_paths(dict(section), path.parent), source=str(path))


def _resolve_paths(payload: dict[str, Any], base_dir: Path) -> dict[str, Any]:
    for key in ("repository", "licenses_catalog", "notices_catalog", "resources_dir"):
        value = payload.get(key)
        if isinstance(value, str):
            candidate = Path(value).expanduser()
            payload[key] = candidate if candidate.is_absolute() else base_dir / candidate
    return payload


def _validate(payload: Mapping[str, Any], *, source: str) -> GeneratorConfig:
    try:
        return GeneratorConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration from {source}: {exc}") from exc


__all__ = [
    "ConfigError",
    "DEFAULT_ARTIFACT_SUFFIX",
    "GeneratorConfig",
    "REPOSITORY_ENV",
    "default_jobs",
    "default_repository",
    "load_config",
]
