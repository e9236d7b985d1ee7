"""POM descriptor helpers: parsing, dotted-path lookups, SCM URL normalization."""
from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from typing import Optional

from .models import ReleaseMetadata

_SCM_REWRITES = (
    (re.compile(r"^scm:"), ""),
    (re.compile(r"^git:"), ""),
    (re.compile(r"^git@github\.com:"), "https://github.com/"),
    (re.compile(r"\.git$"), ""),
)


def _local_name(tag) -> str:
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def parse_pom(content: str) -> ET.Element:
    """Parse POM XML and return the root element.

    Raises:
        ET.ParseError: If the content is not well-formed XML.
    """
    return ET.fromstring(content)


def value_with_path(root: ET.Element, path: str) -> Optional[str]:
    """Return the stripped text at a dotted child path (e.g. ``scm.url``).

    Only direct children are followed at each step, and namespaces are
    ignored, so ``url`` never matches ``licenses/license/url``.
    """
    node: Optional[ET.Element] = root
    for name in path.split("."):
        if node is None:
            return None
        node = next((child for child in node if _local_name(child.tag) == name), None)
    if node is None or node.text is None:
        return None
    text = node.text.strip()
    return text or None


def normalize_source_url(url: str) -> str:
    """Turn an SCM URL into a browsable repository URL.

    ``scm:git:git@github.com:org/repo.git`` -> ``https://github.com/org/repo``
    """
    for pattern, replacement in _SCM_REWRITES:
        url = pattern.sub(replacement, url, count=1)
    return url


def extract_metadata(content: str) -> ReleaseMetadata:
    """Read homepage (``url``) and source URL (``scm.url``) from POM XML.

    Raises:
        ET.ParseError: If the content is not well-formed XML.
    """
    root = parse_pom(content)
    metadata = ReleaseMetadata()
    homepage = value_with_path(root, "url")
    if homepage:
        metadata.homepage = homepage
    source_url = value_with_path(root, "scm.url")
    if source_url:
        metadata.source_url = normalize_source_url(source_url)
    return metadata
