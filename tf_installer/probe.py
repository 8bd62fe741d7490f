"""Host platform and tool detection.

Nothing in here raises for a missing tool: every lookup returns None and
the strategy selector decides whether that absence is fatal.
"""

from __future__ import annotations

import os
import shutil
import struct
import sys
from collections.abc import Iterator
from pathlib import Path

from .config import InstallerConfig
from .models import OSFamily, PlatformInfo, PythonRegistration, ToolAvailability

PYTHON_NAMES = ["python", "python3"]
PIP_NAMES = ["pip", "pip3"]
VIRTUALENV_NAMES = ["virtualenv"]


def detect() -> PlatformInfo:
    """Determine the OS family and native pointer width of this interpreter."""
    if sys.platform == "win32":
        os_family: OSFamily | None = OSFamily.WINDOWS
    elif sys.platform == "darwin":
        os_family = OSFamily.MACOS
    elif sys.platform.startswith("linux"):
        os_family = OSFamily.LINUX
    else:
        os_family = None
    return PlatformInfo(os_family=os_family, pointer_width=struct.calcsize("P") * 8)


def find_executable(names: list[str], search_paths: list[str]) -> str | None:
    """Return the first existing <dir>/<name>, trying each name in order.

    Every search path is checked for the first name before moving on to the
    next name, so "python" in /usr/bin wins over "python3" in /usr/local/bin.
    """
    for name in names:
        for directory in search_paths:
            candidate = Path(directory) / name
            if candidate.exists():
                return str(candidate)
    return None


def _conda_locations() -> list[Path]:
    """Well-known conda install locations, most specific first."""
    home = Path.home()
    prefixes = ["anaconda3", "miniconda3", "anaconda", "miniconda", "miniforge3"]
    if sys.platform == "win32":
        roots = [home]
        for var in ("LOCALAPPDATA", "PROGRAMDATA"):
            if os.environ.get(var):
                roots.append(Path(os.environ[var]))
        return [root / p / "Scripts" / "conda.exe" for root in roots for p in prefixes]
    roots = [home, Path("/opt"), Path("/")]
    return [root / p / "bin" / "conda" for root in roots for p in prefixes]


def find_conda(locator: str = "auto") -> str | None:
    """Locate the conda binary.

    Args:
        locator: "auto" to search PATH and common install prefixes, or an
                 explicit path to a conda binary.

    Returns:
        Path to conda, or None if it could not be found.
    """
    if locator != "auto":
        path = Path(locator).expanduser()
        return str(path) if path.exists() else None

    on_path = shutil.which("conda")
    if on_path:
        return on_path
    for candidate in _conda_locations():
        if candidate.exists():
            return str(candidate)
    return None


def _read_registrations(hive: int, view: int, default_arch: str) -> Iterator[PythonRegistration]:
    """Yield PythonCore registrations under one registry hive and view."""
    import winreg

    try:
        root = winreg.OpenKey(hive, r"Software\Python\PythonCore", 0, winreg.KEY_READ | view)
    except OSError:
        return

    with root:
        index = 0
        while True:
            try:
                tag = winreg.EnumKey(root, index)
            except OSError:
                break
            index += 1

            arch = default_arch
            try:
                with winreg.OpenKey(root, tag) as tag_key:
                    try:
                        arch = winreg.QueryValueEx(tag_key, "SysArchitecture")[0]
                    except OSError:
                        pass
                    with winreg.OpenKey(tag_key, "InstallPath") as install_key:
                        install_path = winreg.QueryValueEx(install_key, "")[0]
                        try:
                            executable = winreg.QueryValueEx(install_key, "ExecutablePath")[0]
                        except OSError:
                            executable = str(Path(install_path) / "python.exe")
            except OSError:
                # Incomplete registration (no InstallPath)
                continue

            yield PythonRegistration(
                type="PythonCore",
                # Tags look like "3.5" or "3.5-32"
                version=tag.split("-")[0],
                arch="x64" if arch == "64bit" else "x86",
                install_path=install_path,
                executable_path=executable,
            )


def windows_python_versions() -> list[PythonRegistration]:
    """Enumerate Python installations registered in the Windows registry.

    Reads the PEP 514 PythonCore keys from HKCU and from both the 64-bit and
    32-bit views of HKLM. Returns an empty list on other platforms.
    """
    if sys.platform != "win32":
        return []

    import winreg

    sources = [
        (winreg.HKEY_CURRENT_USER, 0, "64bit"),
        (winreg.HKEY_LOCAL_MACHINE, winreg.KEY_WOW64_64KEY, "64bit"),
        (winreg.HKEY_LOCAL_MACHINE, winreg.KEY_WOW64_32KEY, "32bit"),
    ]
    registrations: list[PythonRegistration] = []
    for hive, view, arch in sources:
        registrations.extend(_read_registrations(hive, view, arch))
    return registrations


def find_windows_python(
    required_version: str, registrations: list[PythonRegistration] | None = None
) -> PythonRegistration | None:
    """Return the first 64-bit PythonCore registration of required_version."""
    if registrations is None:
        registrations = windows_python_versions()
    for reg in registrations:
        if reg.type == "PythonCore" and reg.version == required_version and reg.arch == "x64":
            return reg
    return None


def probe_tools(
    platform: PlatformInfo, config: InstallerConfig, conda: str = "auto"
) -> ToolAvailability:
    """Look up every tool the strategies for this OS family may need."""
    tools = ToolAvailability(conda=find_conda(conda))
    if platform.is_unix:
        tools.python = find_executable(PYTHON_NAMES, config.unix_search_paths)
        tools.pip = find_executable(PIP_NAMES, config.unix_search_paths)
        tools.virtualenv = find_executable(VIRTUALENV_NAMES, config.unix_search_paths)
    elif platform.is_windows:
        tools.windows_python = find_windows_python(config.windows_python_version)
    return tools
