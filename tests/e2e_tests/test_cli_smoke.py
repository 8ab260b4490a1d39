"""End-to-end smoke tests for the installed console script."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

import testdata_formatter

pytestmark = pytest.mark.skipif(
    shutil.which("format-test-data") is None,
    reason="console script not installed",
)


def test_package_import_smoke() -> None:
    """Ensure package can be imported in the test process."""
    assert testdata_formatter.__version__


def test_cli_help_smoke() -> None:
    """Ensure the installed CLI entrypoint responds to --help."""
    result = subprocess.run(
        ["format-test-data", "--help"],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert "Convert test fixtures" in result.stdout


def test_cli_unknown_format_fails_cleanly(source_file: Path, target_dir: Path) -> None:
    result = subprocess.run(
        [
            "format-test-data",
            "convert",
            str(source_file),
            str(target_dir),
            "--format",
            ".zip",
        ],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode != 0
    assert "not recognized" in result.stderr
    assert list(target_dir.iterdir()) == []
