# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for LICENSE and NOTICE document aggregation."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from lngen.aggregator import LicenseAggregator
from lngen.catalogs import LicenseCatalog, NoticeCatalog
from lngen.errors import ResourceLoadError
from lngen.models import ProblemKind
from lngen.resources import ResourceLoader

LICENSES = {
    "com.example:foo-core": "Foo Core",
    "alpha": "Alpha",
    "alpha.license": "MIT",
    "beta": "Beta",
    "beta.license": "MIT",
    "gamma": "Gamma",
    "gamma.license": "BSD",
    "aop": "AOP Alliance",
    "aop.license": "PUBLIC_DOMAIN",
    "cddl-one": "CDDL One",
    "cddl-one.license": "CDDL",
    "cddl-two": "CDDL Two",
    "cddl-two.license": "CDDL",
    "weird": "Weird",
    "weird.license": "WTFPL",
}


@pytest.fixture
def aggregator(resources_dir: Path) -> LicenseAggregator:
    notices = NoticeCatalog({"beta": "Beta notice", "orphan": "Orphan notice"})
    return LicenseAggregator(LicenseCatalog(LICENSES), notices, ResourceLoader(resources_dir, fallback=False))


def test_base_license_block(aggregator: LicenseAggregator) -> None:
    documents = aggregator.aggregate(["com.example:foo-core"])

    assert documents.license_text == (
        "BASE LICENSE\n\n==\n\nFor Foo Core:\nThis is licensed under the AL 2.0, see above.\n"
    )
    assert documents.notice_text == "BASE NOTICE\n"
    assert documents.problems == []


def test_full_text_is_written_once_per_license_type(aggregator: LicenseAggregator) -> None:
    documents = aggregator.aggregate(["beta", "alpha", "gamma"])
    text = documents.license_text

    assert text.count("MIT TEXT") == 1
    assert "For Alpha:\nThis is licensed under the MIT license:\n\nMIT TEXT\n" in text
    assert "For Beta:\nThis is licensed under the MIT license, see above.\n" in text
    assert "For Gamma:\nThis is licensed under the BSD license:\n\nBSD TEXT\n" in text
    assert text.index("For Alpha:") < text.index("For Beta:") < text.index("For Gamma:")
    assert documents.license_blocks == 3


def test_duplicate_keys_render_once(aggregator: LicenseAggregator) -> None:
    documents = aggregator.aggregate(["alpha", "alpha"])

    assert documents.license_text.count("For Alpha:") == 1


def test_each_run_starts_without_emitted_types(aggregator: LicenseAggregator) -> None:
    first = aggregator.aggregate(["alpha"])
    second = aggregator.aggregate(["alpha"])

    assert first.license_text == second.license_text
    assert "MIT TEXT" in second.license_text


def test_public_domain_block(aggregator: LicenseAggregator) -> None:
    documents = aggregator.aggregate(["aop"])

    assert documents.license_text.endswith("\n==\n\nFor AOP Alliance:\nThis is Public Domain.\n")


def test_missing_license_information_is_reported(
    aggregator: LicenseAggregator,
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.ERROR, logger="lngen")

    documents = aggregator.aggregate(["orphan", "alpha"])

    assert "For Alpha:" in documents.license_text
    assert "orphan" not in documents.license_text
    assert [(problem.kind, problem.subject) for problem in documents.problems] == [
        (ProblemKind.MISSING_LICENSE_INFO, "orphan"),
    ]
    assert "Could not find license information about orphan" in caplog.text


def test_notice_written_without_license_information(aggregator: LicenseAggregator) -> None:
    documents = aggregator.aggregate(["orphan", "beta"])

    assert documents.notice_text == "BASE NOTICE\n\n==\n\nBeta notice\n\n==\n\nOrphan notice\n"
    assert documents.notice_blocks == 2


def test_resource_failure_skips_only_affected_keys(aggregator: LicenseAggregator) -> None:
    documents = aggregator.aggregate(["alpha", "cddl-one", "cddl-two", "gamma"])
    text = documents.license_text

    assert "CDDL" not in text
    assert "For Alpha:" in text
    assert "For Gamma:" in text
    assert [(problem.kind, problem.subject, problem.detail) for problem in documents.problems] == [
        (ProblemKind.RESOURCE_LOAD_ERROR, "cddl-one", "LICENSE.CDDL"),
        (ProblemKind.RESOURCE_LOAD_ERROR, "cddl-two", "LICENSE.CDDL"),
    ]


def test_unknown_license_tag_is_reported(aggregator: LicenseAggregator) -> None:
    documents = aggregator.aggregate(["weird"])

    assert "Weird" not in documents.license_text
    assert documents.problems[0].kind is ProblemKind.RESOURCE_LOAD_ERROR
    assert "WTFPL" in documents.problems[0].detail


def test_missing_template_raises(tmp_path: Path) -> None:
    empty = tmp_path / "empty"
    empty.mkdir()
    aggregator = LicenseAggregator(LicenseCatalog({}), NoticeCatalog({}), ResourceLoader(empty, fallback=False))

    with pytest.raises(ResourceLoadError) as excinfo:
        aggregator.aggregate([])

    assert excinfo.value.resource == "LICENSE.template"


def test_packaged_resources_provide_every_license_text() -> None:
    aggregator = LicenseAggregator(
        LicenseCatalog({"cddl-one": "CDDL One", "cddl-one.license": "CDDL"}),
        NoticeCatalog({}),
        ResourceLoader(),
    )

    documents = aggregator.aggregate(["cddl-one"])

    assert documents.license_text.startswith(ResourceLoader().license_template())
    assert "COMMON DEVELOPMENT AND DISTRIBUTION LICENSE" in documents.license_text
    assert documents.problems == []
