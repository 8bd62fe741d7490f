"""Tests for tf_installer.models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tf_installer.models import InstallMethod, InstallRequest, OSFamily, PlatformInfo


class TestInstallRequest:
    def test_defaults(self) -> None:
        request = InstallRequest()

        assert request.method is InstallMethod.AUTO
        assert request.version == "latest"
        assert request.gpu is False
        assert request.package_url is None
        assert request.conda == "auto"

    def test_method_from_string(self) -> None:
        assert InstallRequest(method="virtualenv").method is InstallMethod.VIRTUALENV

    def test_unknown_method_rejected(self) -> None:
        with pytest.raises(ValidationError):
            InstallRequest(method="docker")


class TestPlatformInfo:
    @pytest.mark.parametrize(
        ("os_family", "windows", "unix"),
        [
            (OSFamily.WINDOWS, True, False),
            (OSFamily.MACOS, False, True),
            (OSFamily.LINUX, False, True),
            (None, False, False),
        ],
    )
    def test_family_flags(self, os_family: OSFamily | None, windows: bool, unix: bool) -> None:
        platform = PlatformInfo(os_family=os_family, pointer_width=64)

        assert platform.is_windows is windows
        assert platform.is_unix is unix

    def test_supported_needs_known_os_and_64_bits(self) -> None:
        assert PlatformInfo(os_family=OSFamily.LINUX, pointer_width=64).is_supported
        assert not PlatformInfo(os_family=OSFamily.LINUX, pointer_width=32).is_supported
        assert not PlatformInfo(os_family=None, pointer_width=64).is_supported
