# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exclusion and consolidation rules mapping coordinates to license keys.

Consolidation is an ordered table of :class:`ConsolidationRule` entries
scanned top to bottom; the first rule whose predicate matches decides the
canonical license key. The table always ends with a default rule so every
coordinate maps to exactly one key.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Final

from .models import Coordinates

LOGGER = logging.getLogger(__name__)


class RuleKind(str, Enum):
    """Enumerate the families of consolidation rules."""

    EXACT_GROUP = "exact-group"
    GROUP_PREFIX = "group-prefix"
    GROUP_ARTIFACT_PREFIX = "group-artifact-prefix"
    META_GROUP = "meta-group"
    DEFAULT = "default"


@dataclass(frozen=True, slots=True)
class ConsolidationRule:
    """Single ``predicate -> key`` entry of the consolidation table.

    A rule matches when the group identifier is one of ``groups`` or starts
    with one of ``group_prefixes`` (either check passes when both are empty),
    and, if ``artifact_prefixes`` is set, the artifact identifier starts with
    one of them.
    """

    name: str
    kind: RuleKind
    key: str | None = None
    groups: frozenset[str] = field(default_factory=frozenset)
    group_prefixes: tuple[str, ...] = ()
    artifact_prefixes: tuple[str, ...] = ()

    def matches(self, coordinates: Coordinates) -> bool:
        """Return whether this rule applies to ``coordinates``.

        Args:
            coordinates: Coordinates being consolidated.

        Returns:
            bool: ``True`` when both the group and artifact conditions hold.
        """

        group_id = coordinates.group_id
        if self.groups or self.group_prefixes:
            group_ok = group_id in self.groups or group_id.startswith(self.group_prefixes)
            if not group_ok:
                return False
        if self.artifact_prefixes:
            return coordinates.artifact_id.startswith(self.artifact_prefixes)
        return True

    def key_for(self, coordinates: Coordinates) -> str:
        """Return the canonical key this rule assigns to ``coordinates``.

        Args:
            coordinates: Coordinates already known to match the rule.

        Returns:
            str: Canonical license key.
        """

        if self.key is not None:
            return self.key
        if self.kind is RuleKind.EXACT_GROUP:
            return coordinates.group_id
        if self.kind is RuleKind.META_GROUP:
            return coordinates.artifact_id
        return coordinates.ga


def exact_groups(name: str, groups: Iterable[str]) -> ConsolidationRule:
    """Return a rule keeping the group identifier verbatim for listed groups."""

    return ConsolidationRule(name=name, kind=RuleKind.EXACT_GROUP, groups=frozenset(groups))


def group_prefix(key: str, *prefixes: str) -> ConsolidationRule:
    """Return a rule mapping every group starting with ``prefixes`` to ``key``."""

    return ConsolidationRule(name=key, kind=RuleKind.GROUP_PREFIX, key=key, group_prefixes=prefixes)


def group_equals(key: str, group_id: str) -> ConsolidationRule:
    """Return a rule mapping exactly ``group_id`` to ``key``."""

    return ConsolidationRule(name=key, kind=RuleKind.GROUP_PREFIX, key=key, groups=frozenset({group_id}))


def artifact_family(
    key: str,
    artifact_prefixes: Sequence[str],
    *,
    group_id: str | None = None,
    group_prefixes: Sequence[str] = (),
) -> ConsolidationRule:
    """Return a rule matching a family of artifacts under one or more groups.

    Args:
        key: Canonical key shared by the whole family.
        artifact_prefixes: Artifact identifier prefixes forming the family.
        group_id: Exact group identifier the family is published under.
        group_prefixes: Group prefixes the family is published under.

    Returns:
        ConsolidationRule: Rule of kind ``GROUP_ARTIFACT_PREFIX``.
    """

    return ConsolidationRule(
        name=key,
        kind=RuleKind.GROUP_ARTIFACT_PREFIX,
        key=key,
        groups=frozenset({group_id}) if group_id else frozenset(),
        group_prefixes=tuple(group_prefixes),
        artifact_prefixes=tuple(artifact_prefixes),
    )


def meta_group(group_id: str, *, key: str | None = None, artifact_prefixes: Sequence[str] = ()) -> ConsolidationRule:
    """Return a rule for redistribution groups keyed by the embedded library.

    Without ``key`` the artifact identifier itself becomes the license key.
    """

    label = key or "<artifact>"
    return ConsolidationRule(
        name=f"{group_id} -> {label}",
        kind=RuleKind.META_GROUP,
        key=key,
        groups=frozenset({group_id}),
        artifact_prefixes=tuple(artifact_prefixes),
    )


DEFAULT_RULE: Final[ConsolidationRule] = ConsolidationRule(name="group:artifact", kind=RuleKind.DEFAULT)

CONSOLIDATING_GROUP_IDS: Final[tuple[str, ...]] = (
    "net.tirasa.connid",
    "org.slf4j",
    "io.swagger",
    "io.netty",
    "org.bouncycastle",
    "org.pac4j",
    "net.minidev",
    "org.flowable",
    "com.googlecode.wicket-jquery-ui",
    "com.sun.xml.bind",
    "io.dropwizard.metrics",
    "org.codehaus.izpack",
    "org.codehaus.plexus",
    "org.opensaml",
    "net.shibboleth",
    "com.google.guava",
    "org.apereo.cas",
    "org.aspectj",
    "com.github.scribejava",
    "cglib",
    "com.duosecurity",
    "com.yubico",
    "org.apereo.inspektr",
    "org.apereo.service.persondir",
    "com.github.ben-manes.caffeine",
    "com.giffing.wicket.spring.boot.starter",
    "com.squareup.retrofit2",
    "org.jetbrains.kotlin",
    "org.ldaptive",
    "org.glassfish.main.javaee-api",
    "org.json",
    "org.springdoc",
    "org.thymeleaf",
    "io.undertow",
    "org.jboss.xnio",
    "com.squareup.okio",
    "net.java.dev.jna",
    "org.scala-lang",
    "io.micrometer",
    "io.zonky.test",
    "org.apereo.cas.client",
    "com.okta",
    "org.osgi",
    "io.jsonwebtoken",
    "com.squareup.okhttp3",
    "com.netflix.spectator",
    "io.prometheus",
    "software.amazon.awssdk",
    "org.ehcache",
    "net.sf.ehcache",
)

ANGULAR_MODULES: Final[tuple[str, ...]] = (
    "angular-animate",
    "angular-cookies",
    "angular-resource",
    "angular-sanitize",
    "angular-aria",
    "angular-treasure-overlay-spinner",
)

CONSOLIDATION_RULES: Final[tuple[ConsolidationRule, ...]] = (
    exact_groups("consolidating groups", CONSOLIDATING_GROUP_IDS),
    group_prefix("org.springframework", "org.springframework"),
    group_prefix("io.projectreactor", "io.projectreactor"),
    group_prefix("com.sun.xml.bind", "com.sun.xml.bind"),
    group_prefix("org.wildfly", "org.wildfly"),
    group_prefix("ee4j.jaxb-impl", "com.sun.istack", "org.jvnet.staxex", "org.glassfish.jaxb", "jakarta.xml.bind"),
    group_prefix("ee4j.jaf", "com.sun.activation", "jakarta.activation"),
    group_prefix("ee4j.jaxws", "jakarta.xml.soap", "jakarta.jws", "jakarta.xml.ws"),
    group_prefix("javax.validation:validation-api", "jakarta.validation"),
    group_prefix("net.shibboleth", "net.shibboleth"),
    group_prefix("org.thymeleaf", "org.thymeleaf"),
    group_prefix("com.thoughtworks.qdox:qdox", "qdox"),
    artifact_family("material", ("material",), group_id="org.webjars.npm"),
    group_prefix("net.tirasa.connid", "net.tirasa.connid"),
    group_prefix("com.fasterxml.jackson", "com.fasterxml.jackson"),
    artifact_family("com.zaxxer.HikariCP", ("HikariCP",), group_prefixes=("com.zaxxer",)),
    group_prefix("com.sun.xml.bind", "javax.xml.bind"),
    group_prefix("io.swagger", "io.swagger.core.v3"),
    artifact_family(
        "org.codehaus.woodstox:woodstox-core-asl",
        ("woodstox-core",),
        group_prefixes=("com.fasterxml.woodstox",),
    ),
    artifact_family("org.webjars.bower:angular", ANGULAR_MODULES, group_id="org.webjars.bower"),
    group_prefix("javax.servlet:jstl", "javax.servlet.jstl"),
    artifact_family("org.webjars.bower:angular-translate", ("angular-translate",), group_id="org.webjars.bower"),
    group_prefix("wicket-bootstrap", "de.agilecoders"),
    artifact_family(
        "com.google.javascript:closure-compiler",
        ("closure-compiler-",),
        group_id="com.google.javascript",
    ),
    meta_group("org.webjars", key="jquery-ui", artifact_prefixes=("jquery-ui",)),
    meta_group("org.webjars", key="io.swagger", artifact_prefixes=("swagger-ui",)),
    meta_group("org.webjars"),
    meta_group("org.webjars.npm"),
    group_equals("org.scala-lang", "org.scala-lang.modules"),
    group_equals("io.zonky.test", "io.zonky.test.postgres"),
    group_prefix("com.okta", "com.okta"),
    group_equals("com.sun.xml.messaging.saaj:saaj-impl", "com.sun.xml.stream.buffer"),
    DEFAULT_RULE,
)

EXCLUDED_GROUP_PREFIXES: Final[tuple[str, ...]] = ("org.apache.", "commons-")

EXCLUDED_GROUP_IDS: Final[frozenset[str]] = frozenset(
    {
        "org.codehaus.groovy",
        "jakarta-regexp",
        "bsf",
        "xml-apis",
        "xml-resolver",
        "xerces",
        "geronimo-spec",
        "oro",
        "batik",
    },
)


@dataclass(frozen=True, slots=True)
class ExclusionFilter:
    """Drop coordinates already covered by the distribution's own license."""

    group_ids: frozenset[str] = EXCLUDED_GROUP_IDS
    group_prefixes: tuple[str, ...] = EXCLUDED_GROUP_PREFIXES

    def with_extra(self, *, groups: Iterable[str] = (), prefixes: Iterable[str] = ()) -> ExclusionFilter:
        """Return a filter extended with additional groups and prefixes.

        Args:
            groups: Exact group identifiers to exclude as well.
            prefixes: Group identifier prefixes to exclude as well.

        Returns:
            ExclusionFilter: New filter combining defaults and extras.
        """

        extra_prefixes = tuple(prefix for prefix in prefixes if prefix not in self.group_prefixes)
        return ExclusionFilter(
            group_ids=self.group_ids | frozenset(groups),
            group_prefixes=self.group_prefixes + extra_prefixes,
        )

    def excludes(self, coordinates: Coordinates) -> bool:
        """Return whether ``coordinates`` contribute nothing to the key set.

        Args:
            coordinates: Coordinates resolved from the package cache.

        Returns:
            bool: ``True`` when the group is excluded.
        """

        group_id = coordinates.group_id
        return group_id in self.group_ids or group_id.startswith(self.group_prefixes)


class ConsolidationEngine:
    """Map coordinates to canonical license keys through an ordered rule table."""

    def __init__(self, rules: Sequence[ConsolidationRule] = CONSOLIDATION_RULES) -> None:
        """Create the engine for ``rules``.

        Args:
            rules: Ordered rule table; a default rule is appended when the
                table does not already end with one.
        """

        table = tuple(rules)
        if not table or table[-1].kind is not RuleKind.DEFAULT:
            table = (*table, DEFAULT_RULE)
        self._rules = table

    @property
    def rules(self) -> tuple[ConsolidationRule, ...]:
        """Return the ordered rule table."""

        return self._rules

    def explain(self, coordinates: Coordinates) -> ConsolidationRule:
        """Return the first rule matching ``coordinates``.

        Args:
            coordinates: Coordinates being consolidated.

        Returns:
            ConsolidationRule: Winning rule; the default rule at worst.
        """

        for rule in self._rules:
            if rule.matches(coordinates):
                return rule
        return DEFAULT_RULE

    def canonical_key(self, coordinates: Coordinates) -> str:
        """Return the canonical license key for ``coordinates``.

        Args:
            coordinates: Coordinates that passed the exclusion filter.

        Returns:
            str: Canonical key used to look up license and notice text.
        """

        rule = self.explain(coordinates)
        key = rule.key_for(coordinates)
        LOGGER.debug("%s consolidated to %s by rule %s", coordinates, key, rule.name)
        return key


__all__ = [
    "CONSOLIDATING_GROUP_IDS",
    "CONSOLIDATION_RULES",
    "ConsolidationEngine",
    "ConsolidationRule",
    "DEFAULT_RULE",
    "EXCLUDED_GROUP_IDS",
    "EXCLUDED_GROUP_PREFIXES",
    "ExclusionFilter",
    "RuleKind",
    "artifact_family",
    "exact_groups",
    "group_equals",
    "group_prefix",
    "meta_group",
]
