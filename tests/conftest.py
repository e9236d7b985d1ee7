"""Shared test helpers: an in-memory fetcher and listing page builder."""

import pytest


def listing(*hrefs):
    """Render a minimal Maven-style directory listing page."""
    rows = "\n".join(f'<a href="{h}" title="{h}">{h}</a>' for h in hrefs)
    return f"<html><body><pre>\n{rows}\n</pre></body></html>"


class FakeFetch:
    """Callable ``url -> body or None`` backed by a dict; records every URL."""

    def __init__(self, pages=None):
        self.pages = dict(pages or {})
        self.calls = []

    def __call__(self, url):
        self.calls.append(url)
        return self.pages.get(url)


@pytest.fixture
def fake_fetch():
    return FakeFetch()
