# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""End-to-end LICENSE/NOTICE generation for a bundle directory."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from .aggregator import AggregatedDocuments, LicenseAggregator
from .catalogs import LicenseCatalog, NoticeCatalog
from .config import GeneratorConfig
from .errors import ArtifactNotFoundError, InvalidRepositoryPathError, ResourceLoadError, SetupError
from .keyset import KeySetBuilder
from .models import Problem, ProblemKind
from .resolver import ArtifactResolver
from .resources import DEFAULT_LICENSES_CATALOG, DEFAULT_NOTICES_CATALOG, ResourceLoader
from .rules import ConsolidationEngine, ExclusionFilter

LOGGER = logging.getLogger(__name__)

LICENSE_FILENAME: Final[str] = "LICENSE"
NOTICE_FILENAME: Final[str] = "NOTICE"


@dataclass(frozen=True, slots=True)
class ArtifactOutcome:
    """Result of processing one bundled filename."""

    filename: str
    key: str | None = None
    excluded: bool = False
    problems: tuple[Problem, ...] = ()


@dataclass(slots=True)
class KeyCollection:
    """Keys gathered from a bundle together with per-artifact outcomes."""

    keys: list[str]
    outcomes: list[ArtifactOutcome]

    @property
    def problems(self) -> list[Problem]:
        """Return resolution problems ordered for deterministic reporting."""

        return sorted(problem for outcome in self.outcomes for problem in outcome.problems)

    @property
    def excluded(self) -> list[str]:
        """Return the filenames dropped by the exclusion filter."""

        return sorted(outcome.filename for outcome in self.outcomes if outcome.excluded)


@dataclass(slots=True)
class GenerationResult:
    """Summary of a complete generation run."""

    artifacts: list[str]
    keys: list[str]
    documents: AggregatedDocuments
    license_path: Path
    notice_path: Path
    problems: list[Problem] = field(default_factory=list)


class ArtifactProcessor:
    """Resolve, filter and consolidate a bundled filename into a license key."""

    def __init__(
        self,
        resolver: ArtifactResolver,
        *,
        exclusions: ExclusionFilter | None = None,
        engine: ConsolidationEngine | None = None,
    ) -> None:
        self.resolver = resolver
        self.exclusions = exclusions or ExclusionFilter()
        self.engine = engine or ConsolidationEngine()

    def process(self, filename: str, keys: KeySetBuilder) -> ArtifactOutcome:
        """Resolve ``filename`` and add its canonical key to ``keys``.

        Recoverable failures are logged and returned as problems; the key set
        is left untouched for artifacts that cannot be resolved.

        Args:
            filename: Bare filename of a bundled artifact.
            keys: Shared key set populated by concurrent workers.

        Returns:
            ArtifactOutcome: Key contributed by the artifact and any problems.
        """

        try:
            resolution = self.resolver.resolve(filename)
        except ArtifactNotFoundError as exc:
            LOGGER.warning("Could not find %s in the local repository %s", filename, exc.repository)
            return ArtifactOutcome(filename, problems=(Problem(ProblemKind.NOT_FOUND, filename),))
        except InvalidRepositoryPathError as exc:
            LOGGER.error("Invalid repository path for %s: %s", filename, exc.path)
            return ArtifactOutcome(filename, problems=(Problem(ProblemKind.INVALID_PATH, filename, exc.path),))

        problems: tuple[Problem, ...] = ()
        if resolution.ambiguous:
            detail = ", ".join(str(path) for path in resolution.discarded)
            problems = (Problem(ProblemKind.AMBIGUOUS, filename, detail),)

        coordinates = resolution.coordinates
        if self.exclusions.excludes(coordinates):
            LOGGER.debug("Skipping %s, covered by the distribution license", coordinates)
            return ArtifactOutcome(filename, excluded=True, problems=problems)

        key = self.engine.canonical_key(coordinates)
        keys.add(key)
        return ArtifactOutcome(filename, key=key, problems=problems)


def discover_artifacts(source: Path, suffix: str = ".jar") -> list[str]:
    """Return the bare filenames of bundled artifacts found under ``source``.

    Args:
        source: Bundle directory scanned recursively.
        suffix: File extension identifying bundled artifacts.

    Returns:
        list[str]: Sorted, de-duplicated filenames.
    """

    found: set[str] = set()
    for dirpath, _dirnames, filenames in os.walk(source):
        for name in filenames:
            if name.endswith(suffix) and os.path.isfile(os.path.join(dirpath, name)):
                found.add(name)
    return sorted(found)


def collect_license_keys(
    filenames: Sequence[str],
    processor: ArtifactProcessor,
    *,
    jobs: int = 1,
) -> KeyCollection:
    """Resolve every filename concurrently and gather canonical keys.

    The executor shutdown acts as the barrier: the returned keys are only
    read after every worker finished.

    Args:
        filenames: Bundled filenames to resolve.
        processor: Processor shared by the workers.
        jobs: Maximum number of worker threads.

    Returns:
        KeyCollection: Sorted keys and per-artifact outcomes.
    """

    keys = KeySetBuilder()
    outcomes: list[ArtifactOutcome] = []
    if jobs <= 1 or len(filenames) <= 1:
        outcomes.extend(processor.process(filename, keys) for filename in filenames)
    else:
        with ThreadPoolExecutor(max_workers=jobs) as executor:
            futures = [executor.submit(processor.process, filename, keys) for filename in filenames]
            for future in as_completed(futures):
                outcomes.append(future.result())
    outcomes.sort(key=lambda outcome: outcome.filename)
    return KeyCollection(keys=keys.sorted_keys(), outcomes=outcomes)


def write_documents(documents: AggregatedDocuments, destination: Path) -> tuple[Path, Path]:
    """Write the LICENSE and NOTICE documents into ``destination``.

    Args:
        documents: Rendered document bodies.
        destination: Existing, writable directory.

    Returns:
        tuple[Path, Path]: Paths of the written LICENSE and NOTICE files.

    Raises:
        SetupError: If either file cannot be written.
    """

    license_path = destination / LICENSE_FILENAME
    notice_path = destination / NOTICE_FILENAME
    try:
        license_path.write_text(documents.license_text, encoding="utf-8")
        notice_path.write_text(documents.notice_text, encoding="utf-8")
    except OSError as exc:
        raise SetupError(f"Could not write documents to {destination}: {exc}") from exc
    return license_path, notice_path


def validate_directories(source: Path, destination: Path, repository: Path) -> None:
    """Ensure the bundle, destination and repository directories are usable.

    Args:
        source: Bundle directory to scan.
        destination: Directory receiving the documents.
        repository: Package cache root.

    Raises:
        SetupError: If any directory is missing or the destination is not
            writable.
    """

    if not source.is_dir():
        raise SetupError(f"Not a directory: {source}")
    if not destination.is_dir() or not os.access(destination, os.W_OK):
        raise SetupError(f"Not a directory, or not writable: {destination}")
    if not repository.is_dir():
        raise SetupError(f"Local repository not found: {repository}")


def load_catalogs(config: GeneratorConfig, resources: ResourceLoader) -> tuple[LicenseCatalog, NoticeCatalog]:
    """Return the license and notice catalogs selected by ``config``.

    Args:
        config: Generator configuration naming optional catalog files.
        resources: Loader used to locate the default catalogs.

    Returns:
        tuple[LicenseCatalog, NoticeCatalog]: Loaded catalogs.

    Raises:
        SetupError: If a catalog cannot be read.
    """

    licenses_path = config.licenses_catalog or resources.locate(DEFAULT_LICENSES_CATALOG)
    notices_path = config.notices_catalog or resources.locate(DEFAULT_NOTICES_CATALOG)
    return LicenseCatalog.from_file(licenses_path), NoticeCatalog.from_file(notices_path)


def generate(source: Path, destination: Path, config: GeneratorConfig | None = None) -> GenerationResult:
    """Generate LICENSE and NOTICE files for the bundle under ``source``.

    Args:
        source: Bundle directory holding the packaged artifacts.
        destination: Directory receiving the documents; existing files are
            overwritten.
        config: Generator configuration; defaults are used when omitted.

    Returns:
        GenerationResult: Written paths, keys and recovered problems.

    Raises:
        SetupError: If directories, catalogs or templates are unusable.
    """

    settings = config or GeneratorConfig()
    validate_directories(source, destination, settings.repository)
    LOGGER.debug("Local repository is %s", settings.repository)
    LOGGER.debug("Source path is %s", source)
    LOGGER.debug("Destination path is %s", destination)

    resources = ResourceLoader(settings.resources_dir)
    licenses, notices = load_catalogs(settings, resources)

    processor = ArtifactProcessor(
        ArtifactResolver(settings.repository, max_depth=settings.max_depth),
        exclusions=ExclusionFilter().with_extra(
            groups=settings.extra_excluded_groups,
            prefixes=settings.extra_excluded_prefixes,
        ),
    )
    artifacts = discover_artifacts(source, settings.artifact_suffix)
    collection = collect_license_keys(artifacts, processor, jobs=settings.jobs)

    aggregator = LicenseAggregator(licenses, notices, resources)
    try:
        documents = aggregator.aggregate(collection.keys)
    except ResourceLoadError as exc:
        raise SetupError(str(exc)) from exc

    LOGGER.warning("Existing LICENSE and NOTICE files in %s will be overwritten", destination)
    license_path, notice_path = write_documents(documents, destination)
    return GenerationResult(
        artifacts=artifacts,
        keys=collection.keys,
        documents=documents,
        license_path=license_path,
        notice_path=notice_path,
        problems=_merge_problems(collection.problems, documents.problems),
    )


def _merge_problems(*groups: Iterable[Problem]) -> list[Problem]:
    merged: list[Problem] = []
    for group in groups:
        merged.extend(group)
    return merged


__all__ = [
    "ArtifactOutcome",
    "ArtifactProcessor",
    "GenerationResult",
    "KeyCollection",
    "LICENSE_FILENAME",
    "NOTICE_FILENAME",
    "collect_license_keys",
    "discover_artifacts",
    "generate",
    "load_catalogs",
    "validate_directories",
    "write_documents",
]
