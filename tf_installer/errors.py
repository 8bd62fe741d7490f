"""Error types raised while validating and performing an installation.

Every error is fatal to the run. The CLI turns them into a single message
on stderr; the message text is written to be shown to the user as-is.
"""

from __future__ import annotations


class InstallError(Exception):
    """Base class for all installer failures."""


class UnsupportedPlatformError(InstallError):
    """The host OS or pointer width cannot run TensorFlow binaries."""


class InvalidMethodError(InstallError):
    """The requested installation method is not available on this OS."""


class MissingToolError(InstallError):
    """A tool required by the selected strategy was not found."""


class VersionParseError(InstallError):
    """A version string could not be parsed or resolved."""


class ReleaseIndexError(InstallError):
    """The remote release index could not be queried."""


class ConfigError(InstallError):
    """The configuration file is missing or malformed."""


class SubprocessError(InstallError):
    """A spawned process exited with a non-zero status.

    Attributes:
        step: Short description of what the process was doing.
        exit_code: The child's exit status.
    """

    def __init__(self, step: str, exit_code: int) -> None:
        self.step = step
        self.exit_code = exit_code
        super().__init__(f"Error {exit_code} occurred {step}")


class LaunchError(InstallError):
    """An external program is missing or could not be started.

    Attributes:
        target: The program that failed to start.
    """

    def __init__(self, target: str, reason: str) -> None:
        self.target = target
        super().__init__(f"Unable to run {target}: {reason}")
