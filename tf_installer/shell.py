"""Process execution and output helpers.

Thin wrappers around subprocess calls. Installers import these by name so
tests can patch them per module instead of spawning real processes.
"""

from __future__ import annotations

import subprocess

from .errors import LaunchError


def run(*args: str, check: bool = False) -> subprocess.CompletedProcess[bytes]:
    """Run an external command, streaming its output to the terminal.

    Args:
        *args: Command and arguments (e.g., "conda", "install", "--yes").
        check: If True, raise CalledProcessError on non-zero exit. Installers
               leave this off and inspect returncode themselves.

    Returns:
        CompletedProcess with returncode for checking success.

    Raises:
        LaunchError: If the program is missing or not executable.
    """
    try:
        return subprocess.run(args, check=check)
    except OSError as exc:
        raise LaunchError(args[0], exc.strerror or str(exc)) from exc


def capture(*args: str) -> subprocess.CompletedProcess[str]:
    """Run a command and capture stdout and stderr together as text.

    Old interpreters print `--version` to stderr, so both streams are merged.
    """
    try:
        return subprocess.run(
            args, stdout=subprocess.PIPE, stderr=subprocess.STDOUT, text=True
        )
    except OSError as exc:
        raise LaunchError(args[0], exc.strerror or str(exc)) from exc


def step(msg: str) -> None:
    """Print a visually distinct step header."""
    print(f"\n{'─' * 60}\n{msg}\n{'─' * 60}")
