"""Per-format conversion functions backed by external tools."""

from __future__ import annotations

from pathlib import Path

from testdata_formatter.adapters.commands import ToolExecutor
from testdata_formatter.adapters.staging import copy_if_not_present
from testdata_formatter.extensions import EXT_GZ, EXT_QCOW2, EXT_TAR, EXT_XZ, ISO_SUFFIX


def tar_convert(src: Path, target_dir: Path, executor: ToolExecutor) -> Path:
    """Archive ``src`` into ``<target_dir>/<name>.tar``."""
    target = target_dir / f"{src.name}{EXT_TAR}"
    executor.run_and_verify(target, "tar", "-cf", target, src)
    return target


def gzip_convert(src: Path, target_dir: Path, executor: ToolExecutor) -> Path:
    """Compress a staged copy of ``src`` in place with gzip.

    The original file is never touched; gzip replaces the staged copy.
    """
    staged = copy_if_not_present(src, target_dir, executor)
    target = target_dir / f"{staged.name}{EXT_GZ}"
    executor.run_and_verify(target, "gzip", staged)
    return target


def xz_convert(src: Path, target_dir: Path, executor: ToolExecutor) -> Path:
    """Compress a staged copy of ``src`` in place with xz."""
    staged = copy_if_not_present(src, target_dir, executor)
    target = target_dir / f"{staged.name}{EXT_XZ}"
    executor.run_and_verify(target, "xz", staged)
    return target


def qcow2_convert(src: Path, target_dir: Path, executor: ToolExecutor) -> Path:
    """Convert a raw image into qcow2.

    The first ``.iso`` in the file name is replaced by ``.qcow2``; names
    without it are kept as-is.
    """
    target = target_dir / src.name.replace(ISO_SUFFIX, EXT_QCOW2, 1)
    executor.run_and_verify(
        target, "qemu-img", "convert", "-f", "raw", "-O", "qcow2", src, target
    )
    return target


def noop_convert(src: Path, target_dir: Path, executor: ToolExecutor) -> Path:
    return copy_if_not_present(src, target_dir, executor)
