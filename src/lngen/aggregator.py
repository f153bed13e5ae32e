# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render LICENSE and NOTICE documents from a sorted set of license keys."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Final

from .catalogs import LicenseCatalog, NoticeCatalog
from .errors import ResourceLoadError
from .models import LicenseType, Problem, ProblemKind
from .resources import ResourceLoader

LOGGER = logging.getLogger(__name__)

BLOCK_SEPARATOR: Final[str] = "\n==\n\n"
BASE_LICENSE_LABEL: Final[str] = "AL 2.0"


@dataclass(slots=True)
class AggregatedDocuments:
    """Rendered document bodies and the problems met while rendering them."""

    license_text: str
    notice_text: str
    problems: list[Problem] = field(default_factory=list)
    license_blocks: int = 0
    notice_blocks: int = 0


class LicenseAggregator:
    """Turn canonical keys into LICENSE and NOTICE text in one sequential pass."""

    def __init__(self, licenses: LicenseCatalog, notices: NoticeCatalog, resources: ResourceLoader) -> None:
        """Create an aggregator over read-only catalogs.

        Args:
            licenses: Labels and license-type tags keyed by canonical key.
            notices: Attribution notices keyed by canonical key.
            resources: Loader for templates and full license texts.
        """

        self.licenses = licenses
        self.notices = notices
        self.resources = resources

    def aggregate(self, keys: Iterable[str]) -> AggregatedDocuments:
        """Render both documents for ``keys``.

        Keys are processed in sorted order. Full license texts are written
        once per license type; later keys with the same type refer back to it.

        Args:
            keys: Canonical license keys collected for the bundle.

        Returns:
            AggregatedDocuments: Rendered documents plus recovered problems.

        Raises:
            ResourceLoadError: If a document template cannot be read.
        """

        license_parts = [self.resources.license_template()]
        notice_parts = [self.resources.notice_template()]
        documents = AggregatedDocuments(license_text="", notice_text="")
        emitted: set[LicenseType] = set()

        for key in sorted(set(keys)):
            block = self._license_block(key, emitted, documents.problems)
            if block is not None:
                license_parts.append(block)
                documents.license_blocks += 1

            notice = self.notices.notice(key)
            if notice is not None:
                notice_parts.append(f"{BLOCK_SEPARATOR}{notice}\n")
                documents.notice_blocks += 1

        documents.license_text = "".join(license_parts)
        documents.notice_text = "".join(notice_parts)
        return documents

    def _license_block(self, key: str, emitted: set[LicenseType], problems: list[Problem]) -> str | None:
        """Return the LICENSE block for ``key`` or ``None`` when it must be skipped.

        Args:
            key: Canonical license key being rendered.
            emitted: License types whose full text was already written.
            problems: Problem list receiving recovered failures.

        Returns:
            str | None: Rendered block, ``None`` when the key was skipped.
        """

        label = self.licenses.label(key)
        if label is None:
            LOGGER.error("Could not find license information about %s", key)
            problems.append(Problem(ProblemKind.MISSING_LICENSE_INFO, key))
            return None

        try:
            license_type = self.licenses.license_type(key)
        except ValueError as exc:
            LOGGER.error("While dealing with %s: %s", key, exc)
            problems.append(Problem(ProblemKind.RESOURCE_LOAD_ERROR, key, str(exc)))
            return None

        header = f"{BLOCK_SEPARATOR}For {label}:\n"
        if license_type is None:
            return f"{header}This is licensed under the {BASE_LICENSE_LABEL}, see above.\n"
        if license_type.is_public_domain:
            return f"{header}This is {license_type.label}.\n"

        statement = f"This is licensed under the {license_type.label}"
        if license_type in emitted:
            return f"{header}{statement}, see above.\n"

        try:
            text = self.resources.license_text(license_type)
        except ResourceLoadError as exc:
            LOGGER.error("While dealing with %s: %s", key, exc)
            problems.append(Problem(ProblemKind.RESOURCE_LOAD_ERROR, key, exc.resource))
            return None
        emitted.add(license_type)
        return f"{header}{statement}:\n\n{text}\n"


__all__ = ["AggregatedDocuments", "BASE_LICENSE_LABEL", "BLOCK_SEPARATOR", "LicenseAggregator"]
