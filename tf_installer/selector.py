"""Installation strategy selection.

select_strategy() is a pure decision over the request, the detected
platform and the tools found on it. It never touches the filesystem or
spawns processes, so every branch can be exercised with plain values.

Policy: when the method is "auto" and conda is usable, conda wins over
both virtualenv and system installs.
"""

from __future__ import annotations

from pathlib import PureWindowsPath

from .config import InstallerConfig
from .errors import (
    InvalidMethodError,
    MissingToolError,
    UnsupportedPlatformError,
)
from .models import (
    InstallMethod,
    InstallRequest,
    OSFamily,
    PlatformInfo,
    Strategy,
    StrategyKind,
    ToolAvailability,
)

ANACONDA_URL = "https://www.anaconda.com/download"
PYTHON_ORG_URL = "https://www.python.org/downloads/release/python-353/"


def _method_allows(request: InstallRequest, method: InstallMethod) -> bool:
    return request.method in (InstallMethod.AUTO, method)


def validate_platform(request: InstallRequest, platform: PlatformInfo) -> None:
    """Reject unsupported hosts and method/OS combinations.

    Raises:
        UnsupportedPlatformError: Unknown OS or a non-64-bit interpreter.
        InvalidMethodError: "system" off Windows, or "virtualenv" on Windows.
    """
    if platform.os_family is None:
        raise UnsupportedPlatformError(
            "Unable to install TensorFlow on this platform. "
            "Binary installation is available for Windows, macOS, and Linux."
        )
    if platform.pointer_width != 64:
        raise UnsupportedPlatformError(
            "Unable to install TensorFlow on this platform. "
            "Binary installation is only available for 64-bit platforms."
        )
    if request.method is InstallMethod.SYSTEM and not platform.is_windows:
        raise InvalidMethodError(
            "Installing TensorFlow into the system library is only supported on Windows"
        )
    if request.method is InstallMethod.VIRTUALENV and platform.is_windows:
        raise InvalidMethodError(
            "Installing TensorFlow into a virtualenv is not supported on Windows"
        )


def prerequisite_commands(
    os_family: OSFamily, have_pip: bool, have_virtualenv: bool
) -> str | None:
    """Shell commands that install the missing virtualenv prerequisites.

    Returns None when nothing is missing.
    """
    if os_family is OSFamily.MACOS:
        commands: list[str] = []
        if not have_pip:
            commands.append("$ sudo easy_install pip")
        if not have_virtualenv:
            commands.append("$ sudo pip install --upgrade virtualenv")
        return "\n".join(commands) or None

    packages: list[str] = []
    if not have_pip:
        packages.append("python-pip")
    if not have_virtualenv:
        packages.append("python-virtualenv")
    if not packages:
        return None
    return "$ sudo apt-get install " + " ".join(packages)


def _select_unix(
    request: InstallRequest, platform: PlatformInfo, tools: ToolAvailability
) -> Strategy:
    have_conda = _method_allows(request, InstallMethod.CONDA) and tools.conda is not None

    if request.method is InstallMethod.CONDA:
        if not have_conda:
            raise MissingToolError("Conda installation failed (no conda binary found)")
        return Strategy(kind=StrategyKind.CONDA, conda=tools.conda)

    if tools.python is None:
        raise MissingToolError("Unable to locate Python on this system.")

    have_pip = tools.pip is not None
    have_virtualenv = (
        _method_allows(request, InstallMethod.VIRTUALENV) and tools.virtualenv is not None
    )

    # Missing virtualenv prerequisites: fall back to conda when allowed
    if (not have_pip or not have_virtualenv) and have_conda:
        return Strategy(kind=StrategyKind.CONDA, conda=tools.conda)

    commands = prerequisite_commands(platform.os_family, have_pip, have_virtualenv)
    if commands:
        raise MissingToolError(
            "Prerequisites for installing TensorFlow not available.\n\n"
            "Execute the following at a terminal to install the prerequisites:\n\n"
            f"{commands}\n"
        )

    return Strategy(
        kind=StrategyKind.VIRTUALENV,
        python=tools.python,
        virtualenv=tools.virtualenv,
        pip=tools.pip,
    )


def _select_windows(
    request: InstallRequest, tools: ToolAvailability, python_version: str
) -> Strategy:
    have_conda = _method_allows(request, InstallMethod.CONDA) and tools.conda is not None
    system_python = tools.windows_python

    method = request.method
    if method is InstallMethod.AUTO:
        if system_python is None and not have_conda:
            raise MissingToolError(
                f"Installing TensorFlow requires a 64-bit version of Python {python_version}\n\n"
                f"Please install 64-bit Python {python_version} to continue, supported versions include:\n\n"
                f" - Anaconda Python (Recommended): {ANACONDA_URL}\n"
                f" - Python Software Foundation   : {PYTHON_ORG_URL}\n\n"
                "Note that if you install from Python Software Foundation you must install exactly\n"
                f"Python {python_version} (not an older or newer release).\n"
            )
        method = InstallMethod.CONDA if have_conda else InstallMethod.SYSTEM

    if method is InstallMethod.CONDA:
        if not have_conda:
            raise MissingToolError(
                "Conda installation failed (no conda binary found)\n\n"
                f"Install Anaconda 3.x for Windows ({ANACONDA_URL})\n"
                "before installing TensorFlow."
            )
        return Strategy(kind=StrategyKind.CONDA, conda=tools.conda)

    if method is InstallMethod.SYSTEM:
        if system_python is None:
            raise MissingToolError(
                f"Installing TensorFlow requires a 64-bit version of Python {python_version}\n\n"
                f"Please install 64-bit Python {python_version} from this location to continue:\n\n"
                f" - {PYTHON_ORG_URL}\n\n"
                f"Note that you must install exactly Python {python_version} (not an older or newer release).\n"
            )
        return Strategy(
            kind=StrategyKind.SYSTEM,
            python=system_python.executable_path,
            pip=str(PureWindowsPath(system_python.install_path) / "Scripts" / "pip.exe"),
        )

    raise InvalidMethodError(f"Invalid/unexpected installation method '{method.value}'")


def select_strategy(
    request: InstallRequest,
    platform: PlatformInfo,
    tools: ToolAvailability,
    python_version: str | None = None,
) -> Strategy:
    """Pick exactly one installation strategy, or raise with a remediation.

    Args:
        request: What the user asked for.
        platform: Detected host characteristics.
        tools: External tools found on the host.
        python_version: major.minor of the interpreter Windows installs need;
                        defaults to InstallerConfig.windows_python_version.

    Returns:
        The chosen Strategy, carrying the tool paths its installer needs.

    Raises:
        UnsupportedPlatformError, InvalidMethodError, MissingToolError.
    """
    validate_platform(request, platform)
    if platform.is_unix:
        return _select_unix(request, platform, tools)
    if python_version is None:
        python_version = InstallerConfig().windows_python_version
    return _select_windows(request, tools, python_version)
