"""Shared pytest configuration, marker assignment and fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from testdata_formatter.adapters.commands import ToolExecutor
from testdata_formatter.application.options import ToolConfig
from tests.fakes import FakeRunner


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def runner_factory() -> type[FakeRunner]:
    return FakeRunner


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def executor(fake_runner: FakeRunner) -> ToolExecutor:
    """Executor backed by the fake runner and default tool names."""
    return ToolExecutor(runner=fake_runner, tools=ToolConfig())


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    """Small fixture file outside the target directory."""
    src_dir = tmp_path / "src"
    src_dir.mkdir()
    path = src_dir / "a.img"
    path.write_bytes(b"\x00\x01fixture-bytes\x02")
    return path


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    path = tmp_path / "t"
    path.mkdir()
    return path
