"""Application use-cases orchestrating format pipelines."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pydantic import ValidationError

from testdata_formatter.adapters.commands import ToolExecutor
from testdata_formatter.application.results import PipelineResult, StepResult
from testdata_formatter.errors import (
    FormatterError,
    InvalidRequestError,
    PipelineStepError,
)
from testdata_formatter.registry import get_converter
from testdata_formatter.schemas import FormatPipelineConfig
from testdata_formatter.types import PathLikeStr

logger = logging.getLogger(__name__)


def run_format_pipeline(
    *,
    source_path: PathLikeStr,
    target_dir: PathLikeStr,
    formats: Iterable[str],
    executor: ToolExecutor | None = None,
) -> PipelineResult:
    """Use-case: apply each format conversion in order, chaining outputs.

    Parameters
    ----------
    source_path : str | PathLike
        Initial input file.
    target_dir : str | PathLike
        Directory receiving every artifact.
    formats : Iterable[str]
        Format tokens applied left to right.
    executor : ToolExecutor | None, default=None
        Tool executor; a subprocess-backed one is built when omitted.

    Returns
    -------
    PipelineResult
        Final path plus one record per applied step. With no formats the
        final path is ``source_path`` unchanged.

    Raises
    ------
    InvalidRequestError
        If the request fails validation.
    UnrecognizedFormatError
        On the first unknown token; later steps are not attempted.
    PipelineStepError
        If a conversion step fails. Artifacts of earlier steps are kept.
    """
    try:
        config = FormatPipelineConfig(
            source_path=source_path,
            target_dir=target_dir,
            formats=tuple(formats),
        )
    except ValidationError as exc:
        raise InvalidRequestError(f"Invalid format pipeline request: {exc}") from exc

    current = config.source_path
    if not config.formats:
        return PipelineResult(source_path=current, final_path=current)

    executor = executor or ToolExecutor()
    steps: list[StepResult] = []
    for index, token in enumerate(config.formats):
        convert = get_converter(token)
        logger.info("step %d: format %r on %s", index, token, current)
        try:
            output = convert(current, config.target_dir, executor)
        except FormatterError as exc:
            raise PipelineStepError(index, token, current, str(exc)) from exc
        steps.append(StepResult(token=token, input_path=current, output_path=output))
        current = output

    return PipelineResult(
        source_path=config.source_path,
        final_path=current,
        steps=tuple(steps),
    )
