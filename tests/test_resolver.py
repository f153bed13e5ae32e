# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for resolving bundled filenames against the package cache."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from lngen.errors import ArtifactNotFoundError, InvalidRepositoryPathError
from lngen.models import Coordinates
from lngen.resolver import ArtifactResolver, coordinates_from_path, select_match


def test_resolve_returns_coordinates_from_layout(repository: Path, install_artifact) -> None:
    path = install_artifact("com.example", "foo-core", "1.2")

    resolution = ArtifactResolver(repository).resolve("foo-core-1.2.jar")

    assert resolution.path == path
    assert resolution.coordinates == Coordinates("com.example", "foo-core", "1.2")
    assert not resolution.ambiguous


def test_resolve_missing_file_raises(repository: Path) -> None:
    with pytest.raises(ArtifactNotFoundError) as excinfo:
        ArtifactResolver(repository).resolve("missing-1.0.jar")

    assert excinfo.value.filename == "missing-1.0.jar"
    assert "Could not find missing-1.0.jar" in str(excinfo.value)


def test_find_respects_depth_bound(repository: Path, install_artifact) -> None:
    install_artifact("org.deep", "lib", "1.0")

    assert ArtifactResolver(repository, max_depth=5).find("lib-1.0.jar")
    assert ArtifactResolver(repository, max_depth=4).find("lib-1.0.jar") == []


def test_find_ignores_directories_with_matching_name(repository: Path, install_artifact) -> None:
    expected = install_artifact("org.example", "lib", "1.0")
    (repository / "org" / "lib-1.0.jar").mkdir()

    assert ArtifactResolver(repository).find("lib-1.0.jar") == [expected]


def test_select_match_keeps_smallest_path_and_warns_once(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="lngen")
    first = Path("/cache/a/1.0/x.jar")
    second = Path("/cache/b/1.0/x.jar")

    chosen, discarded = select_match("x.jar", [second, first])

    assert chosen == first
    assert discarded == (second,)
    warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "Multiple matches found for x.jar" in warnings[0].getMessage()
    assert str(second) in warnings[0].getMessage()


def test_select_match_single_candidate_is_silent(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="lngen")

    chosen, discarded = select_match("x.jar", [Path("/cache/a/1.0/x.jar")])

    assert chosen == Path("/cache/a/1.0/x.jar")
    assert discarded == ()
    assert not caplog.records


def test_resolve_ambiguous_filename_prefers_first_path(repository: Path, install_artifact) -> None:
    kept = install_artifact("org.one", "shared", "1.0")
    dropped = install_artifact("org.two", "shared", "1.0")

    resolution = ArtifactResolver(repository).resolve("shared-1.0.jar")

    assert resolution.path == kept
    assert resolution.discarded == (dropped,)
    assert resolution.ambiguous
    assert resolution.coordinates.group_id == "org.one"


def test_resolve_file_outside_layout_raises(repository: Path) -> None:
    (repository / "stray").mkdir()
    (repository / "stray" / "stray.jar").write_bytes(b"PK")

    with pytest.raises(InvalidRepositoryPathError):
        ArtifactResolver(repository).resolve("stray.jar")


@pytest.mark.parametrize(
    ("relative", "expected"),
    [
        ("com/example/foo-core/1.2/foo-core-1.2.jar", Coordinates("com.example", "foo-core", "1.2")),
        ("junit/junit/4.13/junit-4.13.jar", Coordinates("junit", "junit", "4.13")),
        (
            "org/example/lib/2.0-SNAPSHOT/lib-2.0-20240101.120000-3.jar",
            Coordinates("org.example", "lib", "2.0-SNAPSHOT"),
        ),
        (
            "org/example/lib/1.0/lib-1.0-sources.jar",
            Coordinates("org.example", "lib", "1.0"),
        ),
    ],
)
def test_coordinates_from_path(relative: str, expected: Coordinates) -> None:
    assert coordinates_from_path(relative) == expected


@pytest.mark.parametrize(
    "relative",
    [
        "lib/1.0/lib-1.0.jar",
        "lib-1.0.jar",
        "org/example/lib/1.0/other-1.0.jar",
        "org/example/lib/1.0/lib-1.1.jar",
    ],
)
def test_coordinates_from_invalid_path_raises(relative: str) -> None:
    with pytest.raises(InvalidRepositoryPathError) as excinfo:
        coordinates_from_path(relative)

    assert excinfo.value.path == relative
