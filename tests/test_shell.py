"""Tests for tf_installer.shell."""

from __future__ import annotations

from pathlib import Path

import pytest

from tf_installer.errors import InstallError, LaunchError
from tf_installer.shell import capture, run, step


class TestLaunchFailures:
    def test_run_missing_program(self, tmp_path: Path) -> None:
        missing = str(tmp_path / "no-such-conda")

        with pytest.raises(LaunchError) as excinfo:
            run(missing, "--version")

        assert excinfo.value.target == missing
        assert str(excinfo.value).startswith(f"Unable to run {missing}: ")

    def test_capture_missing_program(self, tmp_path: Path) -> None:
        with pytest.raises(LaunchError, match="Unable to run"):
            capture(str(tmp_path / "bin" / "python"), "--version")

    def test_file_without_execute_bit(self, tmp_path: Path) -> None:
        conda = tmp_path / "conda"
        conda.write_text("#!/bin/sh\n")
        conda.chmod(0o644)

        with pytest.raises(InstallError):
            run(str(conda), "env", "list")

    def test_original_error_is_chained(self, tmp_path: Path) -> None:
        with pytest.raises(LaunchError) as excinfo:
            capture(str(tmp_path / "virtualenv"))

        assert isinstance(excinfo.value.__cause__, OSError)


class TestStep:
    def test_prints_ruled_banner(self, capsys: pytest.CaptureFixture[str]) -> None:
        step("Installing TensorFlow")

        lines = capsys.readouterr().out.splitlines()
        assert lines[1] == lines[3] == "─" * 60
        assert lines[2] == "Installing TensorFlow"
