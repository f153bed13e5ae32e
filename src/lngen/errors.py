# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised while generating LICENSE and NOTICE documents."""

from __future__ import annotations

from pathlib import Path


class LicenseGenerationError(RuntimeError):
    """Base class for every error raised by :mod:`lngen`."""


class ArtifactNotFoundError(LicenseGenerationError):
    """Raised when a bundled filename has no match in the package cache."""

    def __init__(self, filename: str, repository: Path) -> None:
        """Create the error for ``filename`` searched under ``repository``."""

        super().__init__(f"Could not find {filename} in {repository}")
        self.filename = filename
        self.repository = repository


class InvalidRepositoryPathError(LicenseGenerationError):
    """Raised when a cache-relative path cannot be decomposed into coordinates."""

    def __init__(self, path: str, reason: str) -> None:
        """Create the error for ``path`` with a short ``reason``."""

        super().__init__(f"Invalid repository path {path}: {reason}")
        self.path = path
        self.reason = reason


class ResourceLoadError(LicenseGenerationError):
    """Raised when a template or license text resource cannot be read."""

    def __init__(self, resource: str, reason: str) -> None:
        """Create the error for ``resource`` with a short ``reason``."""

        super().__init__(f"Could not load resource {resource}: {reason}")
        self.resource = resource
        self.reason = reason


class SetupError(LicenseGenerationError):
    """Raised when the pipeline cannot start or cannot write its output."""


__all__ = [
    "ArtifactNotFoundError",
    "InvalidRepositoryPathError",
    "LicenseGenerationError",
    "ResourceLoadError",
    "SetupError",
]
