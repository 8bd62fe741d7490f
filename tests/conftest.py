"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from tf_installer.config import InstallerConfig
from tf_installer.models import OSFamily, PlatformInfo, PythonRegistration


@pytest.fixture
def linux() -> PlatformInfo:
    return PlatformInfo(os_family=OSFamily.LINUX, pointer_width=64)


@pytest.fixture
def macos() -> PlatformInfo:
    return PlatformInfo(os_family=OSFamily.MACOS, pointer_width=64)


@pytest.fixture
def windows() -> PlatformInfo:
    return PlatformInfo(os_family=OSFamily.WINDOWS, pointer_width=64)


@pytest.fixture
def windows_python() -> PythonRegistration:
    return PythonRegistration(
        type="PythonCore",
        version="3.5",
        arch="x64",
        install_path="C:\\Python35",
        executable_path="C:\\Python35\\python.exe",
    )


@pytest.fixture
def config(tmp_path: Path) -> InstallerConfig:
    """Default configuration with virtualenvs kept under tmp_path."""
    return InstallerConfig(virtualenv_root=str(tmp_path / "virtualenvs"))
