# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Value objects shared by the resolution pipeline and the aggregator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Final


@dataclass(frozen=True, slots=True)
class Coordinates:
    """Publishing coordinates of an artifact stored in the package cache."""

    group_id: str
    artifact_id: str
    version: str

    @property
    def ga(self) -> str:
        """Return the ``group:artifact`` pair used as fallback license key.

        Returns:
            str: Colon separated group and artifact identifiers.
        """

        return f"{self.group_id}:{self.artifact_id}"

    def __str__(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"


class LicenseType(str, Enum):
    """Enumerate license types that may require a dedicated text block."""

    PUBLIC_DOMAIN = "PUBLIC_DOMAIN"
    CC0 = "CC0"
    BSD = "BSD"
    CDDL = "CDDL"
    EPL = "EPL"
    EDL = "EDL"
    MIT = "MIT"
    CPL = "CPL"
    INDIANA = "INDIANA"
    ZLIB = "ZLIB"

    @property
    def label(self) -> str:
        """Return the human readable name written to the LICENSE document.

        Returns:
            str: Display label for the license type.
        """

        return _LICENSE_LABELS[self]

    @property
    def is_public_domain(self) -> bool:
        """Return whether the type grants public-domain-equivalent status.

        Returns:
            bool: ``True`` when no license text needs to be reproduced.
        """

        return self is LicenseType.PUBLIC_DOMAIN

    @property
    def resource_name(self) -> str:
        """Return the resource file name holding the full license text.

        Returns:
            str: File name such as ``LICENSE.MIT``.
        """

        return f"LICENSE.{self.value}"

    @classmethod
    def from_tag(cls, raw: str) -> LicenseType:
        """Return the member matching the catalog tag ``raw``.

        Args:
            raw: Tag value read from a ``<key>.license`` catalog entry.

        Returns:
            LicenseType: Matching enum member.

        Raises:
            ValueError: If ``raw`` does not name a known license type.
        """

        try:
            return cls(raw.strip())
        except ValueError as exc:
            raise ValueError(f"Unknown license type: {raw!r}") from exc


_LICENSE_LABELS: Final[dict[LicenseType, str]] = {
    LicenseType.PUBLIC_DOMAIN: "Public Domain",
    LicenseType.CC0: "CC0 1.0",
    LicenseType.BSD: "BSD license",
    LicenseType.CDDL: "CDDL 1.0",
    LicenseType.EPL: "EPL 1.0",
    LicenseType.EDL: "EDL 1.0",
    LicenseType.MIT: "MIT license",
    LicenseType.CPL: "CPL",
    LicenseType.INDIANA: "Indiana University Extreme! Lab Software License, version 1.1.1",
    LicenseType.ZLIB: "zlib/libpng license",
}


class ProblemKind(str, Enum):
    """Enumerate the recoverable failures reported during a run."""

    NOT_FOUND = "not-found"
    AMBIGUOUS = "ambiguous"
    INVALID_PATH = "invalid-path"
    MISSING_LICENSE_INFO = "missing-license-info"
    RESOURCE_LOAD_ERROR = "resource-load-error"


@dataclass(frozen=True, slots=True, order=True)
class Problem:
    """Describe a single recovered failure and the subject it concerns."""

    kind: ProblemKind
    subject: str
    detail: str = ""

    def describe(self) -> str:
        """Return a single-line description suitable for console output.

        Returns:
            str: ``kind: subject (detail)`` rendering of the problem.
        """

        suffix = f" ({self.detail})" if self.detail else ""
        return f"{self.kind.value}: {self.subject}{suffix}"


@dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of resolving a bundled filename against the package cache."""

    filename: str
    path: Path
    coordinates: Coordinates
    discarded: tuple[Path, ...] = field(default_factory=tuple)

    @property
    def ambiguous(self) -> bool:
        """Return whether other cache entries matched the same filename."""

        return bool(self.discarded)


__all__ = [
    "Coordinates",
    "LicenseType",
    "Problem",
    "ProblemKind",
    "Resolution",
]
