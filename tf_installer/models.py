"""Data models for tf-installer.

These Pydantic models carry the values that flow through a single
installation run: what the user asked for, what was detected on the host,
and which strategy was chosen.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class InstallMethod(str, Enum):
    """Installation method requested by the user."""

    AUTO = "auto"
    CONDA = "conda"
    VIRTUALENV = "virtualenv"
    SYSTEM = "system"


class OSFamily(str, Enum):
    """Operating systems TensorFlow binaries are published for."""

    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"


class StrategyKind(str, Enum):
    CONDA = "conda"
    VIRTUALENV = "virtualenv"
    SYSTEM = "system"


class InstallRequest(BaseModel):
    """The user's desired installation.

    Attributes:
        method: Strategy to use, or "auto" to pick one.
        version: "latest" or a full major.minor.patch version.
        gpu: Install the GPU build of TensorFlow.
        package_url: Explicit locator for the TensorFlow package. When set,
                     version and gpu no longer affect the primary package.
        conda: "auto" to search for conda, or a path to the conda binary.
    """

    method: InstallMethod = InstallMethod.AUTO
    version: str = "latest"
    gpu: bool = False
    package_url: str | None = None
    conda: str = "auto"


class PlatformInfo(BaseModel):
    """Detected host characteristics.

    Attributes:
        os_family: Detected OS, or None when the OS is not supported.
        pointer_width: Native pointer size in bits.
    """

    os_family: OSFamily | None
    pointer_width: int

    @property
    def is_windows(self) -> bool:
        return self.os_family is OSFamily.WINDOWS

    @property
    def is_unix(self) -> bool:
        return self.os_family in (OSFamily.MACOS, OSFamily.LINUX)

    @property
    def is_supported(self) -> bool:
        return self.os_family is not None and self.pointer_width == 64


class PythonRegistration(BaseModel):
    """A Python installation registered in the Windows registry (PEP 514)."""

    type: str
    version: str
    arch: str
    install_path: str
    executable_path: str


class ToolAvailability(BaseModel):
    """Locations of the external tools found on the host.

    Each field is None when the tool was not found. Only the tools relevant
    to the host OS are probed; the rest stay None.
    """

    python: str | None = None
    pip: str | None = None
    virtualenv: str | None = None
    conda: str | None = None
    windows_python: PythonRegistration | None = None


class Strategy(BaseModel):
    """The installation strategy chosen for this run.

    Attributes:
        kind: Which installer to run.
        conda: conda binary (conda strategy).
        python: Base interpreter (virtualenv and system strategies).
        virtualenv: virtualenv binary (virtualenv strategy).
        pip: pip executable (system strategy).
    """

    kind: StrategyKind
    conda: str | None = None
    python: str | None = None
    virtualenv: str | None = None
    pip: str | None = None
