"""The three installation strategies: conda, virtualenv, and system.

Each installer is a straight sequence of external commands. Any non-zero
exit raises SubprocessError and the remaining commands never run. Nothing
is rolled back: a half-built environment is left in place for inspection,
and the next run reuses (conda) or recreates (virtualenv) it.
"""

from __future__ import annotations

import shlex
import shutil
from pathlib import Path

from .conda import Conda, env_python
from .config import InstallerConfig
from .errors import InstallError, MissingToolError, SubprocessError
from .models import InstallRequest, PlatformInfo, Strategy
from .packages import build_package_url, extra_packages, package_list
from .releases import ReleaseIndex
from .shell import run, step
from .versions import is_python3, python_version, resolve_version


def _check(returncode: int, what: str) -> None:
    if returncode != 0:
        raise SubprocessError(what, returncode)


def _require(value: str | None, tool: str, kind: str) -> str:
    if value is None:
        raise MissingToolError(f"No {tool} available for a {kind} installation")
    return value


def install_conda(
    strategy: Strategy,
    request: InstallRequest,
    platform: PlatformInfo,
    config: InstallerConfig,
    index: ReleaseIndex,
) -> None:
    """Install TensorFlow into a named conda environment.

    The environment is reused when it already exists. TensorFlow goes in
    through pip (it is installed from a wheel URL), the companions through
    conda.
    """
    envname = config.env_name
    binary = _require(strategy.conda, "conda binary", "conda")
    conda = Conda(binary, windows=platform.is_windows)

    prefix = conda.find_environment(envname)
    if prefix is not None:
        print(f"Using {envname} conda environment for TensorFlow installation")
        python = env_python(prefix, platform.is_windows)
    else:
        step(f"Creating {envname} conda environment for TensorFlow installation")
        base = f"python={config.windows_python_version}" if platform.is_windows else "python"
        python = conda.create_environment(envname, [base])

    package_url = request.package_url
    if package_url is None:
        version = resolve_version(request.version, index)
        py_version = python_version(python)
        if platform.os_family is None:
            raise InstallError("Unable to build a package URL for an unsupported platform")
        package_url = build_package_url(
            version,
            request.gpu,
            platform.os_family,
            py_version,
            config.package_url_template,
        )

    step("Installing TensorFlow")
    print(f"  {package_url}")
    conda.install(envname, [package_url], pip=True)

    step("Installing additional packages")
    conda.install(envname, extra_packages(compiled=True, config=config))


def install_virtualenv(
    strategy: Strategy,
    request: InstallRequest,
    config: InstallerConfig,
) -> None:
    """Install TensorFlow into a freshly created virtualenv.

    Any existing environment of the same name is deleted first, so every
    run starts from a clean environment.
    """
    python = _require(strategy.python, "Python interpreter", "virtualenv")
    virtualenv = _require(strategy.virtualenv, "virtualenv binary", "virtualenv")
    pip_name = "pip3" if is_python3(python_version(python)) else "pip"

    root = Path(config.virtualenv_root).expanduser()
    env_path = root / config.env_name
    try:
        root.mkdir(parents=True, exist_ok=True)
        if env_path.exists():
            print(f"Removing existing virtualenv at {env_path}")
            shutil.rmtree(env_path)
    except OSError as exc:
        raise InstallError(f"Unable to prepare virtualenv at {env_path}: {exc}") from exc

    step(f"Creating virtualenv for TensorFlow at {env_path}")
    result = run(
        virtualenv,
        "--system-site-packages",
        "--python",
        python,
        str(env_path),
    )
    _check(result.returncode, f"creating virtualenv at {env_path}")

    pkgs = package_list(request.version, request.gpu, request.package_url, config=config)
    bin_dir = env_path / "bin"
    command = "source {} && {} install --ignore-installed --upgrade {}".format(
        shlex.quote(str(bin_dir / "activate")),
        shlex.quote(str(bin_dir / pip_name)),
        " ".join(shlex.quote(p) for p in pkgs),
    )

    step("Installing TensorFlow")
    # "source" is a bash builtin, so the activation runs inside bash
    result = run("/bin/bash", "-c", command)
    _check(result.returncode, "installing TensorFlow")


def install_system(
    strategy: Strategy,
    request: InstallRequest,
    config: InstallerConfig,
) -> None:
    """Install TensorFlow into the system Python library (Windows only).

    Companions that need a compiler toolchain are never attempted here.
    """
    python = _require(strategy.python, "Python interpreter", "system")
    pip = _require(strategy.pip, "pip executable", "system")

    step("Preparing for installation (updating pip if necessary)")
    result = run(python, "-m", "pip", "install", "--upgrade", "pip")
    _check(result.returncode, "updating pip")

    step("Installing TensorFlow")
    pkgs = package_list(
        request.version, request.gpu, request.package_url, compiled=False, config=config
    )
    result = run(pip, "install", "--upgrade", "--ignore-installed", *pkgs)
    _check(result.returncode, "installing tensorflow package")
