"""sbt registry package.

This package provides release discovery for sbt-published artifacts:
- links.py: directory-listing link extraction
- discovery.py: search roots, artifact subdirectories, release listings, POM metadata
- client.py: the resolver sequencing the crawl and the Maven metadata fallback
"""

from .client import SbtPackageResolver  # noqa: F401
from .discovery import (  # noqa: F401
    build_search_roots,
    get_artifact_subdirs,
    get_package_releases,
    get_urls,
)
from .links import extract_page_links  # noqa: F401

__all__ = [
    "SbtPackageResolver",
    "build_search_roots",
    "get_artifact_subdirs",
    "get_package_releases",
    "get_urls",
    "extract_page_links",
]
