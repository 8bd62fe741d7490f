"""Installer configuration.

All of the fixed names the installers rely on (environment name, companion
packages, download locations) live here so they can be overridden from a
TOML file. Uses tomlkit for reading, like the rest of the project's TOML
handling.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import tomlkit
from pydantic import BaseModel, ConfigDict, ValidationError
from tomlkit.exceptions import ParseError

from .errors import ConfigError

TOOL_TABLE = "tf-installer"


class InstallerConfig(BaseModel):
    """Named values used while building package lists and environments.

    Attributes:
        env_name: Name of the conda environment / virtualenv to install into.
        package_name: Distribution name of the primary package.
        extra_packages: Companion packages installed after the primary one.
        compiled_packages: Companions that need a native toolchain to build.
                           Left out of system installs.
        releases_url: Release index queried to resolve "latest".
        package_url_template: Wheel URL template with {platform},
                              {accelerator}, {version}, {abi} and {arch}.
        virtualenv_root: Directory holding virtual environments.
        windows_python_version: major.minor of the only Windows interpreter
                                TensorFlow wheels are built for.
        unix_search_paths: Directories searched for python, pip and
                           virtualenv on macOS and Linux, in order.
        request_timeout: Seconds to wait on the release index.
    """

    model_config = ConfigDict(extra="forbid")

    env_name: str = "r-tensorflow"
    package_name: str = "tensorflow"
    extra_packages: list[str] = ["h5py", "pyyaml", "requests", "Pillow"]
    compiled_packages: list[str] = ["scipy"]
    releases_url: str = "https://api.github.com/repos/tensorflow/tensorflow/releases"
    package_url_template: str = (
        "https://storage.googleapis.com/tensorflow/"
        "{platform}/{accelerator}/tensorflow-{version}-{abi}-{arch}.whl"
    )
    virtualenv_root: str = "~/.virtualenvs"
    windows_python_version: str = "3.5"
    unix_search_paths: list[str] = ["/usr/local/bin", "/usr/bin"]
    request_timeout: float = 30


def _config_table(doc: tomlkit.TOMLDocument, path: Path) -> dict[str, Any]:
    """Pick the settings table out of a parsed document.

    A pyproject.toml keeps settings under [tool.tf-installer]; any other
    file is read as a bare table.
    """
    if path.name == "pyproject.toml":
        return dict(doc.get("tool", {}).get(TOOL_TABLE, {}))
    return dict(doc)


def load_config(path: Path | str | None = None) -> InstallerConfig:
    """Load configuration, falling back to defaults when no path is given.

    Raises:
        ConfigError: If the file is missing or unreadable, isn't valid TOML,
                     or holds unknown or mistyped keys.
    """
    if path is None:
        return InstallerConfig()

    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Unable to read configuration file {path}: {exc}") from exc

    try:
        doc = tomlkit.parse(text)
    except ParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    table = _config_table(doc, path)
    # tomlkit items unwrap to plain Python values
    try:
        return InstallerConfig(**{k: _unwrap(v) for k, v in table.items()})
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {path}:\n{exc}") from exc


def _unwrap(value: Any) -> Any:
    return value.unwrap() if hasattr(value, "unwrap") else value
