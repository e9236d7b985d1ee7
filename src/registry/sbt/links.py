"""Directory-listing link extraction."""
from __future__ import annotations

from typing import Callable, List, Optional, TypeVar
from urllib.parse import unquote, urljoin, urlsplit

from bs4 import BeautifulSoup

T = TypeVar("T")


def ensure_trailing_slash(url: str) -> str:
    return url if url.endswith("/") else f"{url}/"


def _relative_path(href: str, page_url: str, root_path: str) -> str:
    """Path of ``href`` relative to the listing page, without a trailing slash."""
    path = urlsplit(urljoin(page_url, href)).path
    if path.startswith(root_path):
        relative = unquote(path[len(root_path):])
    else:
        # Outside the listing (parent links, other hosts): hand it over as-is.
        relative = href
    return relative.rstrip("/")


def extract_page_links(
    content: str,
    page_url: str,
    filter_map: Callable[[str], Optional[T]],
) -> List[T]:
    """Collect ``filter_map(path)`` for every anchor on a listing page.

    ``path`` is the anchor href made relative to ``page_url``. None and empty
    results are dropped and duplicates collapse, keeping first-seen order.
    """
    page_url = ensure_trailing_slash(page_url)
    root_path = urlsplit(page_url).path
    soup = BeautifulSoup(content, "html.parser")
    results = {}
    for link in soup.find_all("a", href=True):
        href = link["href"].strip()
        if not href:
            continue
        value = filter_map(_relative_path(href, page_url, root_path))
        if value:
            results.setdefault(value, None)
    return list(results)
