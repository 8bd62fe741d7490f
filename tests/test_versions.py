"""Tests for tf_installer.versions."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from packaging.version import Version

from tf_installer.errors import LaunchError, SubprocessError, VersionParseError
from tf_installer.versions import (
    is_full_version,
    is_python3,
    latest_release,
    parse_python_version,
    python_version,
    resolve_version,
)


class TestIsFullVersion:
    def test_full_version(self) -> None:
        assert is_full_version("1.1.0")

    def test_two_part_version(self) -> None:
        assert not is_full_version("1.1")

    def test_prerelease(self) -> None:
        assert not is_full_version("1.1.0-rc1")

    def test_latest(self) -> None:
        assert not is_full_version("latest")


class TestLatestRelease:
    def test_takes_first_matching_tag(self) -> None:
        assert latest_release(["v2.0.0", "v1.9.0"]) == "2.0.0"

    def test_preserves_source_order(self) -> None:
        """No sorting: an older release listed first still wins."""
        assert latest_release(["v1.9.0", "v2.0.0"]) == "1.9.0"

    def test_skips_prerelease_tags(self) -> None:
        assert latest_release(["v2.1.0-rc0", "2.0.5", "v2.0.0"]) == "2.0.0"

    def test_no_matching_tag(self) -> None:
        with pytest.raises(VersionParseError):
            latest_release(["v2.1.0-rc0", "nightly"])


class TestResolveVersion:
    def test_explicit_version_skips_index(self) -> None:
        index = MagicMock()

        assert resolve_version("1.1.0", index) == "1.1.0"
        index.tags.assert_not_called()

    def test_malformed_version_passes_through(self) -> None:
        index = MagicMock()

        assert resolve_version("1.1", index) == "1.1"
        index.tags.assert_not_called()

    def test_latest_queries_index(self) -> None:
        index = MagicMock()
        index.tags.return_value = ["v2.0.0", "v1.9.0"]

        assert resolve_version("latest", index) == "2.0.0"
        index.tags.assert_called_once_with()


class TestParsePythonVersion:
    def test_python3(self) -> None:
        assert parse_python_version("Python 3.5.2\n") == Version("3.5")

    def test_python2(self) -> None:
        assert parse_python_version("Python 2.7.18") == Version("2.7")

    def test_two_digit_minor(self) -> None:
        assert parse_python_version("Python 3.12.1") == Version("3.12")

    def test_anaconda_suffix(self) -> None:
        assert parse_python_version("Python 3.6.0 :: Anaconda 4.3.0") == Version("3.6")

    def test_garbage(self) -> None:
        with pytest.raises(VersionParseError, match="Unable to parse"):
            parse_python_version("command not found")

    def test_empty(self) -> None:
        with pytest.raises(VersionParseError):
            parse_python_version("")


class TestPythonVersion:
    @patch("tf_installer.versions.capture")
    def test_runs_interpreter(self, mock_capture: MagicMock) -> None:
        mock_capture.return_value = subprocess.CompletedProcess(
            args=[], returncode=0, stdout="Python 3.5.2\n"
        )

        assert python_version("/usr/bin/python") == Version("3.5")
        mock_capture.assert_called_once_with("/usr/bin/python", "--version")

    @patch("tf_installer.versions.capture")
    def test_non_zero_exit(self, mock_capture: MagicMock) -> None:
        mock_capture.return_value = subprocess.CompletedProcess(
            args=[], returncode=127, stdout=""
        )

        with pytest.raises(SubprocessError) as excinfo:
            python_version("/usr/bin/python")
        assert excinfo.value.exit_code == 127

    def test_missing_interpreter(self, tmp_path: Path) -> None:
        with pytest.raises(LaunchError, match="Unable to run"):
            python_version(str(tmp_path / "bin" / "python"))


class TestIsPython3:
    def test_python3(self) -> None:
        assert is_python3(Version("3.0"))
        assert is_python3(Version("3.12"))

    def test_python2(self) -> None:
        assert not is_python3(Version("2.7"))
