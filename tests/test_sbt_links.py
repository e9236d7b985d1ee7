"""Tests for directory-listing link extraction."""

from conftest import listing
from registry.sbt.links import ensure_trailing_slash, extract_page_links

PAGE = "https://repo.example.com/maven2/org/example/"


def identity(path):
    return path


class TestExtractPageLinks:
    """Test extract_page_links()."""

    def test_relative_hrefs_become_segments(self):
        """Relative directory links lose their trailing slash."""
        content = listing("foo/", "foo_2.12/")

        assert extract_page_links(content, PAGE, identity) == ["foo", "foo_2.12"]

    def test_duplicates_collapse(self):
        """The same segment linked twice appears once."""
        content = listing("foo/", "foo", "foo/")

        assert extract_page_links(content, PAGE, identity) == ["foo"]

    def test_root_relative_and_absolute_hrefs(self):
        """Hrefs carrying the page path are made relative to it."""
        content = listing(
            "/maven2/org/example/foo/",
            "https://repo.example.com/maven2/org/example/bar/",
        )

        assert extract_page_links(content, PAGE, identity) == ["foo", "bar"]

    def test_page_url_without_trailing_slash(self):
        """The page URL is treated as a directory."""
        content = listing("/maven2/org/example/foo/")

        assert extract_page_links(content, PAGE.rstrip("/"), identity) == ["foo"]

    def test_parent_link_passed_through(self):
        """Links outside the page path reach the filter unchanged."""
        seen = []

        def record(path):
            seen.append(path)
            return None

        extract_page_links(listing("../", "foo/"), PAGE, record)

        assert seen == ["..", "foo"]

    def test_filter_rejections_and_empty_results_dropped(self):
        """None and empty filter results are excluded."""
        content = listing("foo/", "bar/", "?C=N;O=D")

        result = extract_page_links(content, PAGE, lambda p: p if p.startswith("f") else None)

        assert result == ["foo"]

    def test_percent_encoding_decoded(self):
        """Encoded characters are decoded."""
        content = listing("1.0%2Bbuild/")

        assert extract_page_links(content, PAGE, identity) == ["1.0+build"]

    def test_filter_can_transform(self):
        """The filter result, not the path, is collected."""
        content = listing("foo/", "bar/")

        assert extract_page_links(content, PAGE, str.upper) == ["FOO", "BAR"]

    def test_malformed_markup_and_anchors_without_href(self):
        """Broken HTML never raises; anchors without href are ignored."""
        content = "<html><a name='x'>x</a><a href='foo/'>foo<a href=\"bar/\">bar</p></html>"

        assert extract_page_links(content, PAGE, identity) == ["foo", "bar"]


def test_ensure_trailing_slash():
    """A single trailing slash is added only when missing."""
    assert ensure_trailing_slash("https://a/b") == "https://a/b/"
    assert ensure_trailing_slash("https://a/b/") == "https://a/b/"
