"""Idempotent staging of source files into a target directory."""

from __future__ import annotations

import logging
from pathlib import Path

from testdata_formatter.adapters.commands import ToolExecutor

logger = logging.getLogger(__name__)


def copy_if_not_present(src: Path, target_dir: Path, executor: ToolExecutor) -> Path:
    """Ensure a copy of ``src`` exists in ``target_dir`` and return its path.

    Only the base name is checked: if ``target_dir`` already holds a file with
    the same name, nothing is copied, whatever its content.

    Parameters
    ----------
    src : Path
        File to stage.
    target_dir : Path
        Directory receiving the copy.
    executor : ToolExecutor
        Runs the ``cp`` tool.

    Returns
    -------
    Path
        ``target_dir / src.name``.
    """
    staged = target_dir / src.name
    if staged.exists():
        logger.debug("staging skipped, %s already present", staged)
        return staged
    executor.run("cp", "-f", src, target_dir)
    logger.debug("staged %s -> %s", src, staged)
    return staged
