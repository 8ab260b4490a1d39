"""Application-layer use-cases, ports and option objects."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from testdata_formatter.application.options import ToolConfig
from testdata_formatter.application.ports import CommandRunner
from testdata_formatter.application.results import (
    CommandResult,
    PipelineResult,
    StepResult,
)
from testdata_formatter.types import PathLikeStr

if TYPE_CHECKING:
    from testdata_formatter.adapters.commands import ToolExecutor


def run_format_pipeline(
    *,
    source_path: PathLikeStr,
    target_dir: PathLikeStr,
    formats: Iterable[str],
    executor: ToolExecutor | None = None,
) -> PipelineResult:
    """Run a format pipeline via lazy use-case import."""
    from testdata_formatter.application.use_cases import run_format_pipeline as _impl

    return _impl(
        source_path=source_path,
        target_dir=target_dir,
        formats=formats,
        executor=executor,
    )


__all__ = [
    "CommandResult",
    "CommandRunner",
    "PipelineResult",
    "StepResult",
    "ToolConfig",
    "run_format_pipeline",
]
