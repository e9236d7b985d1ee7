"""Maven registry package: maven-metadata.xml release lookup."""

from .client import MavenMetadataResolver, parse_metadata_versions  # noqa: F401

__all__ = ["MavenMetadataResolver", "parse_metadata_versions"]
