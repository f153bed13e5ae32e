# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Access to document templates, license texts and default catalogs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

from .errors import ResourceLoadError
from .models import LicenseType

LOGGER = logging.getLogger(__name__)

PACKAGED_RESOURCES_DIR: Final[Path] = Path(__file__).resolve().parent / "resources"
LICENSE_TEMPLATE: Final[str] = "LICENSE.template"
NOTICE_TEMPLATE: Final[str] = "NOTICE.template"
DEFAULT_LICENSES_CATALOG: Final[str] = "licenses.xml"
DEFAULT_NOTICES_CATALOG: Final[str] = "notices.xml"


class ResourceLoader:
    """Read text resources from a directory, the packaged one by default."""

    def __init__(self, directory: Path | None = None, *, fallback: bool = True) -> None:
        """Create a loader for ``directory``.

        Args:
            directory: Directory holding templates and ``LICENSE.<TYPE>``
                files.
            fallback: When ``True`` resources missing from ``directory`` are
                read from the packaged resources.
        """

        self.directory = directory
        self.fallback = fallback or directory is None
        self._license_texts: dict[LicenseType, str] = {}

    def read(self, name: str) -> str:
        """Return the content of resource ``name``.

        Args:
            name: Resource file name.

        Returns:
            str: Resource content decoded as UTF-8.

        Raises:
            ResourceLoadError: If the resource is missing or unreadable.
        """

        path = self.locate(name)
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ResourceLoadError(name, str(exc)) from exc

    def locate(self, name: str) -> Path:
        """Return the path of resource ``name``, preferring the override directory.

        Args:
            name: Resource file name.

        Returns:
            Path: Override path when it exists or fallback is disabled,
            otherwise the packaged path.
        """

        if self.directory is not None:
            candidate = self.directory / name
            if candidate.is_file() or not self.fallback:
                return candidate
        return PACKAGED_RESOURCES_DIR / name

    def license_template(self) -> str:
        """Return the header written at the top of the LICENSE document."""

        return self.read(LICENSE_TEMPLATE)

    def notice_template(self) -> str:
        """Return the header written at the top of the NOTICE document."""

        return self.read(NOTICE_TEMPLATE)

    def license_text(self, license_type: LicenseType) -> str:
        """Return the full verbatim text for ``license_type``.

        Args:
            license_type: License type whose text is requested.

        Returns:
            str: License text.

        Raises:
            ResourceLoadError: If no text is available for ``license_type``.
        """

        cached = self._license_texts.get(license_type)
        if cached is not None:
            return cached
        if license_type.is_public_domain:
            raise ResourceLoadError(license_type.resource_name, "public domain has no license text")
        text = self.read(license_type.resource_name)
        self._license_texts[license_type] = text
        LOGGER.debug("Loaded %s", license_type.resource_name)
        return text


__all__ = [
    "DEFAULT_LICENSES_CATALOG",
    "DEFAULT_NOTICES_CATALOG",
    "LICENSE_TEMPLATE",
    "NOTICE_TEMPLATE",
    "PACKAGED_RESOURCES_DIR",
    "ResourceLoader",
]
