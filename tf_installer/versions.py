"""Version parsing and resolution.

Two kinds of versions pass through here: TensorFlow release versions
(strict major.minor.patch, validated with semver) and interpreter versions
reported by `python --version` (major.minor, compared with packaging).
"""

from __future__ import annotations

import re
from typing import Protocol

import semver
from packaging.version import Version

from .errors import SubprocessError, VersionParseError
from .shell import capture

LATEST = "latest"
RELEASE_TAG = re.compile(r"^v\d+\.\d+\.\d+$")
PYTHON_VERSION = re.compile(r"^[^ ]+\s+(\d+)\.(\d+).*$")


class TagSource(Protocol):
    def tags(self) -> list[str]: ...


def is_full_version(token: str) -> bool:
    """True for a plain major.minor.patch version such as "1.1.0".

    Prerelease and build suffixes ("1.1.0-rc1") are not full versions here.
    """
    if not semver.Version.is_valid(token):
        return False
    version = semver.Version.parse(token)
    return version.prerelease is None and version.build is None


def latest_release(tags: list[str]) -> str:
    """Return the version of the first vX.Y.Z tag, without the "v".

    Tags are taken in the order given; the release index serves newest
    first, so no sorting is done here.

    Raises:
        VersionParseError: If no tag has the vX.Y.Z form.
    """
    for tag in tags:
        if RELEASE_TAG.match(tag):
            return tag[1:]
    raise VersionParseError("Unable to determine the latest TensorFlow release")


def resolve_version(token: str, index: TagSource) -> str:
    """Resolve a requested version token to a concrete version.

    "latest" is looked up in the release index. Anything else is returned
    unchanged without touching the network; malformed versions are left
    for the package manager to reject.
    """
    if token != LATEST:
        if not is_full_version(token):
            print(f"  Warning: '{token}' is not a major.minor.patch version, using it as-is")
        return token
    print("Determining latest release of TensorFlow...", end="", flush=True)
    version = latest_release(index.tags())
    print("done")
    return version


def parse_python_version(output: str) -> Version:
    """Parse `python --version` output into a major.minor Version.

    Examples:
        "Python 3.5.2" → Version("3.5")
        "Python 2.7.18" → Version("2.7")

    Raises:
        VersionParseError: If the first line isn't "<name> X.Y...".
    """
    first_line = output.strip().splitlines()[0] if output.strip() else ""
    match = PYTHON_VERSION.match(first_line)
    if not match:
        raise VersionParseError(f"Unable to parse Python version '{first_line}'")
    return Version(f"{match.group(1)}.{match.group(2)}")


def python_version(python: str) -> Version:
    """Ask an interpreter for its version.

    Raises:
        LaunchError: If the interpreter can't be started.
        SubprocessError: If the interpreter exits non-zero.
        VersionParseError: If its output can't be parsed.
    """
    result = capture(python, "--version")
    if result.returncode != 0:
        raise SubprocessError("while checking for python version", result.returncode)
    return parse_python_version(result.stdout)


def is_python3(version: Version) -> bool:
    return version >= Version("3.0")
