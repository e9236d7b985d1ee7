"""Tests for the sbt-releases command line."""

import json
from unittest.mock import patch

import pytest

import sbtreleases
from args import parse_args
from constants import Constants, ExitCodes
from registry.models import ReleaseMetadata, ReleaseResult


def _result():
    return ReleaseResult.from_versions(
        ["1.0", "1.1"],
        ReleaseMetadata(homepage="https://foo.example.com"),
        dependency_url="https://repo.example.com/org/example",
        registry_url="https://repo.example.com/",
    )


class TestParseArgs:
    """Test argument parsing."""

    def test_defaults(self):
        """Only the package is required."""
        args = parse_args(["-p", "org.example:foo"])

        assert args.PACKAGE == "org.example:foo"
        assert args.REGISTRIES is None
        assert args.NO_FALLBACK is False
        assert args.LOG_LEVEL == "WARNING"

    def test_repeated_registries(self):
        """Registries accumulate in the given order."""
        args = parse_args(["-p", "a:b", "-r", "https://one/", "-r", "https://two/"])

        assert args.REGISTRIES == ["https://one/", "https://two/"]

    def test_package_required(self):
        """Missing package is a usage error."""
        with pytest.raises(SystemExit):
            parse_args([])


@patch("sbtreleases.configure_logging")
class TestMain:
    """Test main()."""

    @patch("sbtreleases.SbtPackageResolver")
    def test_prints_json(self, mock_resolver, _mock_logging, capsys):
        """A found package is printed as JSON and exits 0."""
        mock_resolver.return_value.get_releases_from_registries.return_value = _result()

        with pytest.raises(SystemExit) as exc_info:
            sbtreleases.main(["-p", "org.example:foo"])

        assert exc_info.value.code == ExitCodes.SUCCESS.value
        out = json.loads(capsys.readouterr().out)
        assert out["releases"] == [{"version": "1.0"}, {"version": "1.1"}]
        assert out["homepage"] == "https://foo.example.com"
        coordinate, registries = mock_resolver.return_value.get_releases_from_registries.call_args[0]
        assert coordinate.package_name == "org.example:foo"
        assert registries == [Constants.REGISTRY_URL_MAVEN_REPO]
        mock_resolver.assert_called_once_with(no_fallback=False)

    @patch("sbtreleases.SbtPackageResolver")
    def test_writes_output_file(self, mock_resolver, _mock_logging, tmp_path):
        """--output writes the JSON document to disk."""
        mock_resolver.return_value.get_releases_from_registries.return_value = _result()
        out_file = tmp_path / "releases.json"

        with pytest.raises(SystemExit) as exc_info:
            sbtreleases.main(["-p", "org.example:foo", "-o", str(out_file), "--no-fallback"])

        assert exc_info.value.code == ExitCodes.SUCCESS.value
        assert json.loads(out_file.read_text(encoding="utf-8"))["registry_url"] == "https://repo.example.com/"
        mock_resolver.assert_called_once_with(no_fallback=True)

    @patch("sbtreleases.SbtPackageResolver")
    def test_not_found(self, mock_resolver, _mock_logging):
        """No result exits with NOT_FOUND."""
        mock_resolver.return_value.get_releases_from_registries.return_value = None

        with pytest.raises(SystemExit) as exc_info:
            sbtreleases.main(["-p", "org.example:foo", "-r", "https://repo.example.com/"])

        assert exc_info.value.code == ExitCodes.NOT_FOUND.value

    @patch("sbtreleases.SbtPackageResolver")
    def test_bad_coordinate(self, mock_resolver, _mock_logging):
        """An invalid coordinate exits with INPUT_ERROR before any lookup."""
        with pytest.raises(SystemExit) as exc_info:
            sbtreleases.main(["-p", "no-colon"])

        assert exc_info.value.code == ExitCodes.INPUT_ERROR.value
        mock_resolver.assert_not_called()
