"""Public file-based formatting API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path

from testdata_formatter.adapters.commands import ToolExecutor
from testdata_formatter.application.options import ToolConfig
from testdata_formatter.application.ports import CommandRunner
from testdata_formatter.application.use_cases import run_format_pipeline
from testdata_formatter.types import PathLikeStr


def build_executor(
    runner: CommandRunner | None = None,
    tools: ToolConfig | None = None,
) -> ToolExecutor:
    """Build a tool executor from an optional runner and tool config."""
    return ToolExecutor(runner=runner, tools=tools)


def format_test_data(
    source_path: PathLikeStr,
    target_dir: PathLikeStr,
    *formats: str,
    executor: ToolExecutor | None = None,
) -> Path:
    """Convert ``source_path`` through ``formats`` and return the final artifact."""
    result = run_format_pipeline(
        source_path=source_path,
        target_dir=target_dir,
        formats=formats,
        executor=executor,
    )
    return result.final_path
