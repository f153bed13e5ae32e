# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""License and notice catalogs keyed by canonical license key."""

from __future__ import annotations

import logging
import tomllib
import xml.etree.ElementTree as ElementTree
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Final, Self

from .errors import SetupError
from .models import LicenseType

LOGGER = logging.getLogger(__name__)

LICENSE_TYPE_SUFFIX: Final[str] = ".license"
PROPERTIES_ENTRY_TAG: Final[str] = "entry"
PROPERTIES_KEY_ATTRIBUTE: Final[str] = "key"
TOML_SUFFIX: Final[str] = ".toml"


def load_catalog(path: Path) -> dict[str, str]:
    """Return the ``key -> text`` entries stored in ``path``.

    Java XML properties documents are read by default; files ending in
    ``.toml`` are read as a flat table of strings.

    Args:
        path: Catalog file to read.

    Returns:
        dict[str, str]: Catalog entries.

    Raises:
        SetupError: If the file cannot be read or is malformed.
    """

    try:
        if path.suffix == TOML_SUFFIX:
            return _load_toml_catalog(path)
        return _load_properties_catalog(path)
    except OSError as exc:
        raise SetupError(f"Could not read catalog {path}: {exc}") from exc


def _load_properties_catalog(path: Path) -> dict[str, str]:
    try:
        document = ElementTree.parse(path)
    except ElementTree.ParseError as exc:
        raise SetupError(f"Malformed properties catalog {path}: {exc}") from exc

    entries: dict[str, str] = {}
    for element in document.getroot().iter(PROPERTIES_ENTRY_TAG):
        key = element.get(PROPERTIES_KEY_ATTRIBUTE)
        if key is None:
            raise SetupError(f"Catalog entry without key in {path}")
        entries[key] = element.text or ""
    LOGGER.debug("Loaded %d entries from %s", len(entries), path)
    return entries


def _load_toml_catalog(path: Path) -> dict[str, str]:
    with path.open("rb") as handle:
        try:
            data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise SetupError(f"Malformed TOML catalog {path}: {exc}") from exc

    entries: dict[str, str] = {}
    for key, value in data.items():
        if not isinstance(value, str):
            raise SetupError(f"Catalog value for {key!r} in {path} must be a string")
        entries[key] = value
    LOGGER.debug("Loaded %d entries from %s", len(entries), path)
    return entries


class _Catalog(Mapping[str, str]):
    """Read-only mapping shared by license and notice catalogs."""

    def __init__(self, entries: Mapping[str, str]) -> None:
        self._entries = MappingProxyType(dict(entries))

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Load the catalog stored in ``path``."""

        return cls(load_catalog(path))


class LicenseCatalog(_Catalog):
    """Descriptive labels and license-type tags keyed by canonical key."""

    def label(self, key: str) -> str | None:
        """Return the descriptive label for ``key``, or ``None`` when unknown."""

        return self._entries.get(key)

    def license_tag(self, key: str) -> str | None:
        """Return the raw license-type tag for ``key``.

        ``None`` means the artifact is covered by the distribution's own
        base license.
        """

        return self._entries.get(key + LICENSE_TYPE_SUFFIX)

    def license_type(self, key: str) -> LicenseType | None:
        """Return the parsed license type for ``key``.

        Args:
            key: Canonical license key.

        Returns:
            LicenseType | None: Parsed type, ``None`` for the base license.

        Raises:
            ValueError: If the catalog holds an unknown tag for ``key``.
        """

        tag = self.license_tag(key)
        if tag is None:
            return None
        return LicenseType.from_tag(tag)


class NoticeCatalog(_Catalog):
    """Attribution notices keyed by canonical key."""

    def notice(self, key: str) -> str | None:
        """Return the notice text for ``key``, or ``None`` when absent."""

        return self._entries.get(key)


__all__ = ["LICENSE_TYPE_SUFFIX", "LicenseCatalog", "NoticeCatalog", "load_catalog"]
