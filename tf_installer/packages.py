"""Package locators and package lists handed to pip / conda.

The TensorFlow wheel URL is assembled from a fixed naming convention:

    {platform}/{accelerator}/tensorflow-{version}-{abi}-{arch}.whl

e.g. linux/cpu/tensorflow-1.1.0-cp35-cp35m-linux_x86_64.whl
"""

from __future__ import annotations

from packaging.version import Version

from .config import InstallerConfig
from .models import OSFamily
from .versions import LATEST, is_python3

PLATFORM_TAGS = {
    OSFamily.WINDOWS: "windows",
    OSFamily.MACOS: "mac",
    OSFamily.LINUX: "linux",
}

ARCH_TAGS = {
    OSFamily.WINDOWS: "win_amd64",
    OSFamily.MACOS: "any",
    OSFamily.LINUX: "linux_x86_64",
}


def platform_tag(os_family: OSFamily) -> str:
    return PLATFORM_TAGS[os_family]


def arch_tag(os_family: OSFamily) -> str:
    return ARCH_TAGS[os_family]


def abi_tag(os_family: OSFamily, py_version: Version) -> str:
    """Interpreter/ABI segment of the wheel filename.

    macOS wheels are pure-Python tagged; elsewhere the CPython tag is built
    from the interpreter's major and minor digits ("3.5" → "cp35-cp35m").
    """
    if os_family is OSFamily.MACOS:
        return "py3-none" if is_python3(py_version) else "py2-none"
    if is_python3(py_version):
        digits = f"{py_version.major}{py_version.minor}"
        return f"cp{digits}-cp{digits}m"
    return "cp27-none"


def build_package_url(
    version: str,
    gpu: bool,
    os_family: OSFamily,
    py_version: Version,
    template: str | None = None,
) -> str:
    """Build the download URL of the TensorFlow wheel for this host."""
    if template is None:
        template = InstallerConfig().package_url_template
    return template.format(
        platform=platform_tag(os_family),
        accelerator="gpu" if gpu else "cpu",
        version=version,
        abi=abi_tag(os_family, py_version),
        arch=arch_tag(os_family),
    )


def extra_packages(compiled: bool = True, config: InstallerConfig | None = None) -> list[str]:
    """Companion packages installed alongside TensorFlow.

    Args:
        compiled: Include the companions that need a native toolchain.
        config: Source of the package names; defaults apply when None.
    """
    config = config or InstallerConfig()
    pkgs = list(config.extra_packages)
    if compiled:
        pkgs.extend(config.compiled_packages)
    return pkgs


def primary_package(
    version: str,
    gpu: bool,
    package_url: str | None = None,
    config: InstallerConfig | None = None,
) -> str:
    """Identifier of the TensorFlow package itself.

    An explicit package_url wins. Otherwise "tensorflow[-gpu]==<version>",
    leaving the pin off for "latest" so pip picks its own newest release.
    """
    if package_url:
        return package_url
    config = config or InstallerConfig()
    name = f"{config.package_name}-gpu" if gpu else config.package_name
    if version == LATEST:
        return name
    return f"{name}=={version}"


def package_list(
    version: str,
    gpu: bool,
    package_url: str | None = None,
    *,
    compiled: bool = True,
    config: InstallerConfig | None = None,
) -> list[str]:
    """TensorFlow followed by its companion packages, in install order."""
    return [primary_package(version, gpu, package_url, config)] + extra_packages(
        compiled, config
    )
