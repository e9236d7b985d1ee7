"""Maven registry client: release lookup through maven-metadata.xml.

Used as the generic fallback when a repository cannot be crawled through
its directory listings.
"""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Callable, List, Optional

from constants import Constants
from common import http_client
from common.logging_utils import extra_context, is_debug_enabled, safe_url
from registry.models import PackageCoordinate, ReleaseMetadata, ReleaseResult
from registry.pom import extract_metadata
from versioning.maven_compare import compare as maven_compare, latest_version, sort_versions

logger = logging.getLogger(__name__)


def _artifact_base_url(registry_url: str, coordinate: PackageCoordinate) -> str:
    """Construct the artifact directory URL (no trailing slash)."""
    repo_root = registry_url if registry_url.endswith("/") else f"{registry_url}/"
    group_path = coordinate.group_id.replace(".", "/")
    return f"{repo_root}{group_path}/{coordinate.artifact_id}"


def parse_metadata_versions(content: str) -> List[str]:
    """Return versions listed in maven-metadata.xml in source order.

    Raises:
        ET.ParseError: If the content is not well-formed XML.
    """
    root = ET.fromstring(content)
    versions: List[str] = []
    versions_elem = root.find("versioning/versions")
    if versions_elem is None:
        return versions
    for item in versions_elem.findall("version"):
        if isinstance(item.text, str) and item.text.strip():
            versions.append(item.text.strip())
    return versions


class MavenMetadataResolver:
    """Resolve releases for ``groupId:artifactId`` from maven-metadata.xml."""

    def __init__(
        self,
        fetch: Optional[Callable[[str], Optional[str]]] = None,
        compare: Callable[[str, str], int] = maven_compare,
    ):
        self.fetch = fetch or http_client.fetch_text
        self.compare = compare

    def fetch_candidates(self, base_url: str) -> List[str]:
        """Fetch version candidates for the artifact rooted at ``base_url``."""
        metadata_url = f"{base_url}/{Constants.MAVEN_METADATA_FILE}"
        content = self.fetch(metadata_url)
        if not content:
            return []
        try:
            versions = parse_metadata_versions(content)
        except ET.ParseError:
            logger.debug("Maven metadata parse error", extra=extra_context(
                event="anomaly", component="client", action="fetch_candidates",
                outcome="parse_error", target=safe_url(metadata_url), package_manager="maven"
            ))
            return []
        return list(dict.fromkeys(versions))

    def fetch_metadata(self, base_url: str, artifact_id: str, version: str) -> ReleaseMetadata:
        """Read homepage and source URL from the POM of ``version``."""
        pom_url = f"{base_url}/{version}/{artifact_id}-{version}.pom"
        content = self.fetch(pom_url)
        if not content:
            return ReleaseMetadata()
        try:
            return extract_metadata(content)
        except ET.ParseError:
            logger.debug("POM parse error", extra=extra_context(
                event="anomaly", component="client", action="fetch_metadata",
                outcome="parse_error", target=safe_url(pom_url), package_manager="maven"
            ))
            return ReleaseMetadata()

    def get_releases(
        self, coordinate: PackageCoordinate, registry_url: Optional[str]
    ) -> Optional[ReleaseResult]:
        """Return the releases of ``coordinate`` in ``registry_url`` or None."""
        if not registry_url:
            return None
        base_url = _artifact_base_url(registry_url, coordinate)
        versions = self.fetch_candidates(base_url)
        if not versions:
            if is_debug_enabled(logger):
                logger.debug("No versions in Maven metadata", extra=extra_context(
                    event="function_exit", component="client", action="get_releases",
                    outcome="not_found", target=safe_url(base_url), package_manager="maven"
                ))
            return None

        versions = sort_versions(versions, self.compare)
        metadata = self.fetch_metadata(
            base_url, coordinate.artifact_id, latest_version(versions, self.compare)
        )
        return ReleaseResult.from_versions(
            versions,
            metadata,
            dependency_url=base_url,
            registry_url=registry_url,
        )

    __call__ = get_releases
