"""Pydantic schemas for runtime validation of pipeline requests."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, StrictStr


class FormatPipelineConfig(BaseModel):
    """Validated input for a format pipeline run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source_path: Path
    target_dir: Path
    formats: tuple[StrictStr, ...] = ()
