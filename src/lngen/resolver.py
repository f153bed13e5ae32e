# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve bundled artifact filenames to coordinates via the local package cache."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path, PurePosixPath
from typing import Final

from .errors import ArtifactNotFoundError, InvalidRepositoryPathError
from .models import Coordinates, Resolution

LOGGER = logging.getLogger(__name__)

MAX_SEARCH_DEPTH: Final[int] = 10
MIN_PATH_SEGMENTS: Final[int] = 3
SNAPSHOT_SUFFIX: Final[str] = "-SNAPSHOT"


class ArtifactResolver:
    """Search a Maven-layout repository for cache entries matching a filename."""

    def __init__(self, repository: Path, *, max_depth: int = MAX_SEARCH_DEPTH) -> None:
        """Create a resolver rooted at ``repository``.

        Args:
            repository: Root directory of the local package cache.
            max_depth: Maximum number of path levels below ``repository``
                visited while searching.
        """

        self.repository = repository
        self.max_depth = max_depth

    def find(self, filename: str) -> list[Path]:
        """Return every cache entry named ``filename``, sorted by full path.

        Args:
            filename: Bare artifact filename to look up.

        Returns:
            list[Path]: Matching files ordered lexicographically.
        """

        matches: list[str] = []
        root = str(self.repository)
        for dirpath, dirnames, filenames in os.walk(root):
            depth = _relative_depth(dirpath, root)
            if filename in filenames and depth < self.max_depth:
                candidate = os.path.join(dirpath, filename)
                if os.path.isfile(candidate):
                    matches.append(candidate)
            if depth + 1 >= self.max_depth:
                dirnames[:] = []
        return [Path(match) for match in sorted(matches)]

    def resolve(self, filename: str) -> Resolution:
        """Resolve ``filename`` to a single set of coordinates.

        When several cache entries match, the lexicographically smallest path
        is kept and the others are reported through a warning.

        Args:
            filename: Bare artifact filename to resolve.

        Returns:
            Resolution: Chosen path, its coordinates and discarded matches.

        Raises:
            ArtifactNotFoundError: If no cache entry matches ``filename``.
            InvalidRepositoryPathError: If the chosen path does not follow the
                repository layout.
        """

        matches = self.find(filename)
        if not matches:
            raise ArtifactNotFoundError(filename, self.repository)

        chosen, discarded = select_match(filename, matches)
        relative = str(chosen)[len(str(self.repository)) + 1 :]
        coordinates = coordinates_from_path(relative)
        return Resolution(filename=filename, path=chosen, coordinates=coordinates, discarded=discarded)


def select_match(filename: str, matches: Sequence[Path]) -> tuple[Path, tuple[Path, ...]]:
    """Pick the lexicographically smallest of ``matches`` for ``filename``.

    Args:
        filename: Bare filename the matches were found for.
        matches: Non-empty collection of matching cache entries.

    Returns:
        tuple[Path, tuple[Path, ...]]: Chosen path and the discarded ones.
    """

    ordered = sorted(matches, key=str)
    chosen, discarded = ordered[0], tuple(ordered[1:])
    if discarded:
        LOGGER.warning(
            "Multiple matches found for %s, using %s and discarding %s",
            filename,
            chosen,
            ", ".join(str(path) for path in discarded),
        )
    return chosen, discarded


def coordinates_from_path(relative: str) -> Coordinates:
    """Decompose a cache-relative path into coordinates.

    The path is expected to follow ``<group-segments>/<artifact>/<version>/<file>``.

    Args:
        relative: Path relative to the repository root.

    Returns:
        Coordinates: Group, artifact and version derived from the path.

    Raises:
        InvalidRepositoryPathError: If the path has too few segments or the
            file name does not belong to the artifact version directory.
    """

    parts = PurePosixPath(relative.replace(os.sep, "/")).parts
    if len(parts) <= MIN_PATH_SEGMENTS:
        raise InvalidRepositoryPathError(relative, "expected <group>/<artifact>/<version>/<file>")

    *group_parts, artifact_id, version, filename = parts
    if not _belongs_to(filename, artifact_id, version):
        raise InvalidRepositoryPathError(relative, f"{filename} is not a file of {artifact_id} {version}")
    return Coordinates(group_id=".".join(group_parts), artifact_id=artifact_id, version=version)


def _belongs_to(filename: str, artifact_id: str, version: str) -> bool:
    """Return whether ``filename`` is stored under ``artifact_id``/``version``."""

    if filename.startswith(f"{artifact_id}-{version}"):
        return True
    if version.endswith(SNAPSHOT_SUFFIX):
        base_version = version[: -len(SNAPSHOT_SUFFIX)]
        return filename.startswith(f"{artifact_id}-{base_version}-")
    return False


def _relative_depth(dirpath: str, root: str) -> int:
    relative = os.path.relpath(dirpath, root)
    if relative == os.curdir:
        return 0
    return relative.count(os.sep) + 1


__all__ = ["ArtifactResolver", "MAX_SEARCH_DEPTH", "coordinates_from_path", "select_match"]
