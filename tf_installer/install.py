"""Installation pipeline: detect → probe → select → install.

1. Detect the host OS family and pointer width
2. Probe for python, pip, virtualenv, conda and (Windows) a registered
   interpreter
3. Select exactly one strategy (conda, virtualenv or system)
4. Run that strategy's installer

Unsupported platforms are rejected before any tool is probed or any
process is spawned.
"""

from __future__ import annotations

from .config import InstallerConfig
from .errors import InstallError
from .installers import install_conda, install_system, install_virtualenv
from .models import InstallRequest, StrategyKind
from .probe import detect, probe_tools
from .releases import ReleaseIndex
from .selector import select_strategy, validate_platform
from .shell import step


def install_tensorflow(
    request: InstallRequest | None = None,
    *,
    config: InstallerConfig | None = None,
    index: ReleaseIndex | None = None,
) -> None:
    """Install TensorFlow and its companion packages.

    Args:
        request: What to install and how; defaults to an "auto" install of
                 the latest CPU build.
        config: Named values (env name, package lists, URLs).
        index: Release index used to resolve "latest"; built from
               config.releases_url when None.

    Raises:
        InstallError: Any validation or subprocess failure. Nothing is
                      retried.
    """
    request = request or InstallRequest()
    config = config or InstallerConfig()
    index = index or ReleaseIndex(config.releases_url, timeout=config.request_timeout)

    platform = detect()
    validate_platform(request, platform)

    step("Checking installation prerequisites")
    tools = probe_tools(platform, config, request.conda)
    strategy = select_strategy(request, platform, tools, config.windows_python_version)
    print(f"  Installation method: {strategy.kind.value}")

    if strategy.kind is StrategyKind.CONDA:
        install_conda(strategy, request, platform, config, index)
    elif strategy.kind is StrategyKind.VIRTUALENV:
        install_virtualenv(strategy, request, config)
    else:
        install_system(strategy, request, config)

    print("\nInstallation of TensorFlow complete.\n")


def describe_environment(
    request: InstallRequest | None = None, config: InstallerConfig | None = None
) -> list[str]:
    """Report what was detected and which strategy an install would use.

    Read-only: nothing is created or installed.

    Returns:
        Lines of a human-readable report.
    """
    request = request or InstallRequest()
    config = config or InstallerConfig()
    platform = detect()

    os_name = platform.os_family.value if platform.os_family else "unsupported"
    lines = [f"Platform: {os_name} ({platform.pointer_width}-bit)"]

    try:
        validate_platform(request, platform)
    except InstallError as exc:
        lines.append(f"Strategy: none ({exc})")
        return lines

    tools = probe_tools(platform, config, request.conda)
    if platform.is_windows:
        reg = tools.windows_python
        found = f"{reg.executable_path} ({reg.version}, {reg.arch})" if reg else None
        lines.append(f"Python {config.windows_python_version}: {found or '<not found>'}")
    else:
        for label, path in (
            ("python", tools.python),
            ("pip", tools.pip),
            ("virtualenv", tools.virtualenv),
        ):
            lines.append(f"{label}: {path or '<not found>'}")
    lines.append(f"conda: {tools.conda or '<not found>'}")

    try:
        strategy = select_strategy(request, platform, tools, config.windows_python_version)
    except InstallError as exc:
        lines.append(f"Strategy: none\n\n{exc}")
    else:
        lines.append(f"Strategy: {strategy.kind.value}")
    return lines
