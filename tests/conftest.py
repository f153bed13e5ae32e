# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from xml.sax.saxutils import escape, quoteattr

import pytest

InstallArtifact = Callable[..., Path]


def write_properties(path: Path, entries: Mapping[str, str]) -> Path:
    """Write ``entries`` to ``path`` as a Java XML properties document."""

    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<!DOCTYPE properties SYSTEM "http://java.sun.com/dtd/properties.dtd">',
        "<properties>",
    ]
    lines.extend(f"  <entry key={quoteattr(key)}>{escape(value)}</entry>" for key, value in entries.items())
    lines.append("</properties>")
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def repository(tmp_path: Path) -> Path:
    """Return an empty Maven-layout package cache."""

    root = tmp_path / "m2" / "repository"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def install_artifact(repository: Path) -> InstallArtifact:
    """Return a helper storing an artifact under ``group/artifact/version``."""

    def _install(group_id: str, artifact_id: str, version: str, filename: str | None = None) -> Path:
        name = filename or f"{artifact_id}-{version}.jar"
        directory = repository.joinpath(*group_id.split("."), artifact_id, version)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_bytes(b"PK")
        return path

    return _install


@pytest.fixture
def bundle(tmp_path: Path) -> Path:
    """Return an empty bundle directory."""

    root = tmp_path / "bundle"
    (root / "lib").mkdir(parents=True)
    return root


@pytest.fixture
def destination(tmp_path: Path) -> Path:
    """Return an empty directory receiving the generated documents."""

    root = tmp_path / "out"
    root.mkdir()
    return root


@pytest.fixture
def resources_dir(tmp_path: Path) -> Path:
    """Return a resources directory with short templates and license texts."""

    root = tmp_path / "resources"
    root.mkdir()
    (root / "LICENSE.template").write_text("BASE LICENSE\n", encoding="utf-8")
    (root / "NOTICE.template").write_text("BASE NOTICE\n", encoding="utf-8")
    (root / "LICENSE.MIT").write_text("MIT TEXT", encoding="utf-8")
    (root / "LICENSE.BSD").write_text("BSD TEXT", encoding="utf-8")
    return root


@pytest.fixture
def licenses_catalog(tmp_path: Path) -> Path:
    """Return a license catalog covering the fixture artifacts."""

    return write_properties(
        tmp_path / "licenses.xml",
        {
            "com.example:foo-core": "Foo Core",
            "com.example:bar": "Bar",
            "com.example:bar.license": "MIT",
            "org.slf4j": "SLF4J",
            "org.slf4j.license": "MIT",
        },
    )


@pytest.fixture
def notices_catalog(tmp_path: Path) -> Path:
    """Return a notice catalog with a single attribution notice."""

    return write_properties(tmp_path / "notices.xml", {"com.example:bar": "Bar\nCopyright Example"})


@pytest.fixture
def properties_file() -> Callable[[Path, Mapping[str, str]], Path]:
    """Return the XML properties writer for ad-hoc catalogs."""

    return write_properties
