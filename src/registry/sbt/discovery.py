"""sbt repository crawl helpers: search roots, artifact subdirectories,
release listings and POM metadata.

Every helper takes the ``fetch`` callable explicitly (``url -> body or None``)
so the crawl can run against any transport.
"""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Callable, List, Optional

from common.logging_utils import extra_context, is_debug_enabled, safe_url
from registry.models import PackageCoordinate, ReleaseMetadata
from registry.pom import extract_metadata
from versioning.maven_compare import compare as maven_compare, sort_versions

from .links import ensure_trailing_slash, extract_page_links

logger = logging.getLogger(__name__)

Fetch = Callable[[str], Optional[str]]
Compare = Callable[[str, str], int]


def build_search_roots(coordinate: PackageCoordinate, registry_url: str) -> List[str]:
    """Return the candidate roots: slash-joined group first, dot-joined second."""
    repo_root = ensure_trailing_slash(registry_url)
    segments = coordinate.group_segments
    return [
        f"{repo_root}{'/'.join(segments)}",
        f"{repo_root}{'.'.join(segments)}",
    ]


def get_artifact_subdirs(
    fetch: Fetch,
    search_root: str,
    artifact: str,
    scala_version: Optional[str] = None,
) -> Optional[List[str]]:
    """List the subdirectories of ``search_root`` holding ``artifact`` builds.

    Returns:
        Matching directory names (possibly empty), or None when the root has
        no listing at all.
    """
    pkg_url = ensure_trailing_slash(search_root)
    content = fetch(pkg_url)
    if not content:
        if is_debug_enabled(logger):
            logger.debug("No listing at search root", extra=extra_context(
                event="decision", component="discovery", action="get_artifact_subdirs",
                outcome="no_listing", target=safe_url(pkg_url), package_manager="sbt"
            ))
        return None

    def _match(path: str) -> Optional[str]:
        if path.startswith(f"{artifact}_native") or path.startswith(f"{artifact}_sjs"):
            return None
        if path == artifact or path.startswith(f"{artifact}_"):
            return path
        return None

    subdirs = extract_page_links(content, pkg_url, _match)

    preferred = f"{artifact}_{scala_version}"
    if scala_version and preferred in subdirs:
        subdirs = [preferred]

    if is_debug_enabled(logger):
        logger.debug("Artifact subdirectories matched", extra=extra_context(
            event="function_exit", component="discovery", action="get_artifact_subdirs",
            outcome="matched" if subdirs else "empty", count=len(subdirs),
            target=safe_url(pkg_url), package_manager="sbt"
        ))
    return subdirs


def _release_entry(path: str) -> Optional[str]:
    if path.startswith("."):
        return None
    return path


def get_package_releases(
    fetch: Fetch,
    search_root: str,
    artifact_subdirs: Optional[List[str]],
    compare: Compare = maven_compare,
) -> Optional[List[str]]:
    """Merge the version directories of every subdirectory, sorted ascending.

    Returns:
        The de-duplicated, sorted versions, or None when nothing was found.
    """
    if not artifact_subdirs:
        return None

    releases: List[str] = []
    for subdir in artifact_subdirs:
        pkg_url = ensure_trailing_slash(f"{search_root}/{subdir}")
        content = fetch(pkg_url)
        if not content:
            continue
        releases.extend(extract_page_links(content, pkg_url, _release_entry))

    if not releases:
        return None
    return sort_versions(dict.fromkeys(releases), compare)


def get_urls(
    fetch: Fetch,
    search_root: str,
    artifact_dirs: Optional[List[str]],
    version: Optional[str],
) -> ReleaseMetadata:
    """Harvest homepage/source URL from the first POM found for ``version``.

    Tries ``<dir>-<version>.pom`` then ``<artifact>-<version>.pom`` in each
    directory and stops at the first descriptor that parses, even when it
    lacks one of the fields. Malformed descriptors are skipped.
    """
    if not artifact_dirs or not version:
        return ReleaseMetadata()

    for artifact_dir in artifact_dirs:
        artifact = artifact_dir.split("_")[0]
        pom_file_names = [
            f"{artifact_dir}-{version}.pom",
            f"{artifact}-{version}.pom",
        ]
        for pom_file_name in dict.fromkeys(pom_file_names):
            pom_url = f"{search_root}/{artifact_dir}/{version}/{pom_file_name}"
            content = fetch(pom_url)
            if not content:
                continue
            try:
                metadata = extract_metadata(content)
            except ET.ParseError:
                logger.debug("Skipping malformed POM", extra=extra_context(
                    event="anomaly", component="discovery", action="get_urls",
                    outcome="parse_error", target=safe_url(pom_url), package_manager="sbt"
                ))
                continue
            if is_debug_enabled(logger):
                logger.debug("POM metadata extracted", extra=extra_context(
                    event="function_exit", component="discovery", action="get_urls",
                    outcome="success", target=safe_url(pom_url), package_manager="sbt"
                ))
            return metadata

    return ReleaseMetadata()
