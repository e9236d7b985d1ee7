"""sbt package resolver: crawl directory listings, fall back to Maven metadata."""
from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from constants import Constants
from common import http_client
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer
from registry.maven.client import MavenMetadataResolver
from registry.models import PackageCoordinate, ReleaseResult
from versioning.maven_compare import compare as maven_compare, latest_version

from .discovery import (
    build_search_roots,
    get_artifact_subdirs,
    get_package_releases,
    get_urls,
)

logger = logging.getLogger(__name__)

Fallback = Callable[[PackageCoordinate, str], Optional[ReleaseResult]]


class SbtPackageResolver:
    """Resolve releases of sbt-published packages.

    The crawl visits each search root in order and returns on the first one
    that lists any version. When none does, the request goes unchanged to
    ``fallback`` (Maven metadata lookup by default); ``no_fallback`` turns
    that step off.
    """

    def __init__(
        self,
        fetch: Optional[Callable[[str], Optional[str]]] = None,
        compare: Callable[[str, str], int] = maven_compare,
        fallback: Optional[Fallback] = None,
        no_fallback: bool = False,
    ):
        self.fetch = fetch or http_client.fetch_text
        self.compare = compare
        if no_fallback:
            self.fallback = None
        else:
            self.fallback = fallback or MavenMetadataResolver(self.fetch, compare)

    def get_releases(
        self, coordinate: PackageCoordinate, registry_url: Optional[str]
    ) -> Optional[ReleaseResult]:
        """Return the releases of ``coordinate`` hosted at ``registry_url``."""
        if not registry_url:
            return None

        search_roots = build_search_roots(coordinate, registry_url)
        with Timer() as t:
            for search_root in search_roots:
                artifact_subdirs = get_artifact_subdirs(
                    self.fetch, search_root, coordinate.artifact, coordinate.scala_version
                )
                versions = get_package_releases(
                    self.fetch, search_root, artifact_subdirs, self.compare
                )
                if is_debug_enabled(logger):
                    logger.debug("Package versions", extra=extra_context(
                        event="decision", component="client", action="get_releases",
                        target=safe_url(search_root), count=len(versions or []),
                        package_manager="sbt"
                    ))
                if not versions:
                    continue

                metadata = get_urls(
                    self.fetch,
                    search_root,
                    artifact_subdirs,
                    latest_version(versions, self.compare),
                )
                logger.info(
                    "Found %d versions for %s",
                    len(versions),
                    coordinate.package_name,
                    extra=extra_context(
                        event="complete", component="client", action="get_releases",
                        outcome="crawl", duration_ms=t.duration_ms(), package_manager="sbt"
                    ),
                )
                return ReleaseResult.from_versions(
                    versions,
                    metadata,
                    dependency_url=search_root,
                    registry_url=registry_url,
                )

        if self.fallback is None:
            logger.debug(
                "No versions discovered for %s and fallback is disabled", coordinate.package_name
            )
            return None

        logger.debug(
            "No versions discovered for %s listing organization root package folder, "
            "fallback to maven datasource for version discovery",
            coordinate.package_name,
        )
        result = self.fallback(coordinate, registry_url)
        if result is None:
            logger.debug(
                "No versions found for %s in %d repositories",
                coordinate.package_name,
                len(search_roots),
            )
        return result

    def get_releases_from_registries(
        self, coordinate: PackageCoordinate, registry_urls: Iterable[str]
    ) -> Optional[ReleaseResult]:
        """Try each registry in order and return the first result found."""
        for registry_url in registry_urls:
            result = self.get_releases(coordinate, registry_url)
            if result is not None:
                return result
        return None

    def resolve(
        self, package_name: str, registry_url: Optional[str] = None
    ) -> Optional[ReleaseResult]:
        """Resolve a ``groupId:artifactId`` string.

        Raises:
            ValueError: If ``package_name`` is not a valid coordinate.
        """
        coordinate = PackageCoordinate.parse(package_name)
        return self.get_releases(coordinate, registry_url or Constants.REGISTRY_URL_MAVEN_REPO)
