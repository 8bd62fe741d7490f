"""Wrapper around the conda binary.

Only the handful of conda operations the installer needs: list
environments, create one, and install packages into one (through conda
itself or through the environment's pip).
"""

from __future__ import annotations

import json
from pathlib import Path

from .errors import InstallError, SubprocessError
from .shell import capture, run


def env_python(prefix: str, windows: bool) -> str:
    """Path of the interpreter inside a conda environment prefix."""
    if windows:
        return str(Path(prefix) / "python.exe")
    return str(Path(prefix) / "bin" / "python")


class Conda:
    """A conda installation.

    Args:
        binary: Path to the conda executable.
        windows: Whether environments use the Windows layout.
    """

    def __init__(self, binary: str, windows: bool = False) -> None:
        self.binary = binary
        self.windows = windows

    def list_environments(self) -> dict[str, str]:
        """Map environment name → prefix for every known environment.

        The base environment is keyed by the name of its directory, so it
        is reported as e.g. "anaconda3".

        Raises:
            SubprocessError: If `conda env list` fails.
            InstallError: If its JSON can't be parsed.
        """
        result = capture(self.binary, "env", "list", "--json")
        if result.returncode != 0:
            raise SubprocessError("listing conda environments", result.returncode)
        try:
            prefixes = json.loads(result.stdout).get("envs", [])
        except (json.JSONDecodeError, AttributeError) as exc:
            raise InstallError(f"Unable to parse conda environment list: {exc}") from exc
        return {Path(p).name: p for p in prefixes}

    def find_environment(self, name: str) -> str | None:
        """Return the prefix of the named environment, or None."""
        return self.list_environments().get(name)

    def create_environment(self, name: str, packages: list[str]) -> str:
        """Create an environment and return the path of its python.

        Raises:
            SubprocessError: If `conda create` fails.
            InstallError: If the environment isn't listed afterwards.
        """
        result = run(self.binary, "create", "--yes", "--name", name, *packages)
        if result.returncode != 0:
            raise SubprocessError(f"creating conda environment {name}", result.returncode)
        prefix = self.find_environment(name)
        if prefix is None:
            raise InstallError(f"Conda environment {name} not found after creating it")
        return env_python(prefix, self.windows)

    def install(self, env_name: str, packages: list[str], pip: bool = False) -> None:
        """Install packages into an environment.

        Args:
            env_name: Target environment.
            packages: Package specs, or URLs when pip is True.
            pip: Install with the environment's pip instead of conda.

        Raises:
            SubprocessError: If the install command fails.
        """
        if pip:
            prefix = self.find_environment(env_name)
            if prefix is None:
                raise InstallError(f"Conda environment {env_name} not found")
            python = env_python(prefix, self.windows)
            result = run(python, "-m", "pip", "install", "--upgrade", *packages)
        else:
            result = run(self.binary, "install", "--yes", "--name", env_name, *packages)
        if result.returncode != 0:
            raise SubprocessError(f"installing {', '.join(packages)}", result.returncode)
