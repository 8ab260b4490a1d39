"""Top-level API for converting test fixtures through archive and image formats."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from testdata_formatter.extensions import EXT_GZ, EXT_NOOP, EXT_QCOW2, EXT_TAR, EXT_XZ
from testdata_formatter.types import PathLikeStr

if TYPE_CHECKING:
    from testdata_formatter.adapters.commands import ToolExecutor

__version__ = "0.1.0"


def format_test_data(
    source_path: PathLikeStr,
    target_dir: PathLikeStr,
    *formats: str,
    executor: ToolExecutor | None = None,
) -> Path:
    """Convert a fixture file through a chain of formats.

    Each format token is applied in order, feeding the previous step's
    output into the next. Intermediate files are left in ``target_dir``.

    Parameters
    ----------
    source_path : str | PathLike
        Existing fixture file.
    target_dir : str | PathLike
        Writable directory for every produced artifact.
    *formats : str
        Tokens from ``EXT_GZ``, ``EXT_XZ``, ``EXT_TAR``, ``EXT_QCOW2`` or
        ``EXT_NOOP``. Bare names such as ``"gz"`` are accepted too.
    executor : ToolExecutor | None, default=None
        Tool executor override (custom runner or tool paths).

    Returns
    -------
    Path
        Path of the last produced artifact, or ``source_path`` when no
        formats are given.

    Examples
    --------
    >>> format_test_data("disk.img", "/tmp/t", EXT_GZ, EXT_TAR)  # doctest: +SKIP
    PosixPath('/tmp/t/disk.img.gz.tar')
    """
    from .api import format_test_data as _impl

    return _impl(source_path, target_dir, *formats, executor=executor)


__all__ = [
    "EXT_GZ",
    "EXT_NOOP",
    "EXT_QCOW2",
    "EXT_TAR",
    "EXT_XZ",
    "format_test_data",
]
