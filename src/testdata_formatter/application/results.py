"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one external process invocation."""

    argv: tuple[str, ...]
    returncode: int
    output: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@dataclass(frozen=True)
class StepResult:
    """One applied conversion step."""

    token: str
    input_path: Path
    output_path: Path


@dataclass(frozen=True)
class PipelineResult:
    """Structured pipeline outcome."""

    source_path: Path
    final_path: Path
    steps: tuple[StepResult, ...] = ()
