"""Tests for Maven-style version ordering."""

import pytest

from versioning.maven_compare import compare, latest_version, sort_versions


class TestCompare:
    """Test compare()."""

    @pytest.mark.parametrize("lower, higher", [
        ("1.2", "1.3"),
        ("1.3", "1.10"),
        ("1.9.9", "1.10.0"),
        ("2.13.0-M5", "2.13.0"),
        ("1.0-RC1", "1.0"),
        ("1.0-alpha", "1.0-beta"),
        ("1.0-beta", "1.0-RC1"),
        ("1.0-SNAPSHOT", "1.0"),
        ("1.0", "1.0-sp1"),
        ("1.0-RC1", "1.0-RC2"),
        ("1.0", "1.0.1"),
        ("2.0.0-RC1", "2.0-RC2"),
        ("2.0-M1", "2.0.0-RC1"),
        ("2.0.0-RC2", "2.0"),
        ("2.0.0-RC1", "2.0.1-RC1"),
    ])
    def test_orders_versions(self, lower, higher):
        """Lower version compares below higher and vice versa."""
        assert compare(lower, higher) == -1
        assert compare(higher, lower) == 1

    def test_trailing_zeros_and_release_qualifiers_are_equal(self):
        """1, 1.0, 1.0.0 and 1.0-final compare equal."""
        assert compare("1", "1.0.0") == 0
        assert compare("1.0", "1.0-final") == 0
        assert compare("1.0.GA", "1.0") == 0
        assert compare("2.0.0-RC1", "2.0-RC1") == 0

    def test_aliases(self):
        """Single-letter qualifiers alias the long forms."""
        assert compare("1.0-M1", "1.0-milestone1") == 0
        assert compare("1.0-a1", "1.0-alpha1") == 0
        assert compare("1.0-cr1", "1.0-rc1") == 0


class TestSortAndLatest:
    """Test sort_versions() and latest_version()."""

    def test_sort_is_numeric_aware(self):
        """1.10 sorts after 1.3, not lexicographically."""
        assert sort_versions(["1.2", "1.10", "1.3"]) == ["1.2", "1.3", "1.10"]

    def test_latest_version(self):
        """Greatest version is returned."""
        assert latest_version(["1.2", "1.10", "1.3", "1.10-RC1"]) == "1.10"

    def test_latest_version_empty(self):
        """None or empty input gives None."""
        assert latest_version(None) is None
        assert latest_version([]) is None

    def test_custom_comparator(self):
        """A caller-supplied comparator drives the order."""
        def reverse(a, b):
            return compare(b, a)
        assert sort_versions(["1.2", "1.10", "1.3"], reverse) == ["1.10", "1.3", "1.2"]
