"""Unit tests for per-format conversion functions."""

from __future__ import annotations

from pathlib import Path

from testdata_formatter.adapters.commands import ToolExecutor
from testdata_formatter.adapters.converters import (
    gzip_convert,
    noop_convert,
    qcow2_convert,
    tar_convert,
    xz_convert,
)


def test_tar_convert_names_output_after_source(
    executor: ToolExecutor, fake_runner: object, source_file: Path, target_dir: Path
) -> None:
    """Write <basename>.tar into the target dir without staging the source."""
    out = tar_convert(source_file, target_dir, executor)

    assert out == target_dir / "a.img.tar"
    assert out.exists()
    assert fake_runner.calls == [("tar", "-cf", str(out), str(source_file))]


def test_gzip_convert_stages_then_compresses(
    executor: ToolExecutor, fake_runner: object, source_file: Path, target_dir: Path
) -> None:
    """Compress a staged copy and leave the original fixture untouched."""
    original = source_file.read_bytes()

    out = gzip_convert(source_file, target_dir, executor)

    assert out == target_dir / "a.img.gz"
    assert out.exists()
    assert source_file.read_bytes() == original
    assert fake_runner.tools_called() == ["cp", "gzip"]
    assert fake_runner.calls[1] == ("gzip", str(target_dir / "a.img"))


def test_xz_convert_stages_then_compresses(
    executor: ToolExecutor, fake_runner: object, source_file: Path, target_dir: Path
) -> None:
    out = xz_convert(source_file, target_dir, executor)

    assert out == target_dir / "a.img.xz"
    assert fake_runner.tools_called() == ["cp", "xz"]


def test_gzip_convert_skips_copy_for_file_already_in_target(
    executor: ToolExecutor, fake_runner: object, target_dir: Path
) -> None:
    """Use a source that already lives in the target dir in place."""
    inside = target_dir / "b.raw"
    inside.write_bytes(b"raw")

    out = gzip_convert(inside, target_dir, executor)

    assert out == target_dir / "b.raw.gz"
    assert fake_runner.tools_called() == ["gzip"]


def test_qcow2_convert_replaces_iso_suffix(
    executor: ToolExecutor, fake_runner: object, tmp_path: Path, target_dir: Path
) -> None:
    """Replace .iso with .qcow2 rather than appending."""
    src = tmp_path / "disk.iso"
    src.write_bytes(b"raw")

    out = qcow2_convert(src, target_dir, executor)

    assert out == target_dir / "disk.qcow2"
    assert out.exists()
    assert fake_runner.calls == [
        ("qemu-img", "convert", "-f", "raw", "-O", "qcow2", str(src), str(out))
    ]


def test_qcow2_convert_replaces_only_first_iso(
    executor: ToolExecutor, tmp_path: Path, target_dir: Path
) -> None:
    src = tmp_path / "a.iso.iso"
    src.write_bytes(b"raw")
    assert qcow2_convert(src, target_dir, executor) == target_dir / "a.qcow2.iso"


def test_qcow2_convert_keeps_name_without_iso(
    executor: ToolExecutor, source_file: Path, target_dir: Path
) -> None:
    assert qcow2_convert(source_file, target_dir, executor) == target_dir / "a.img"


def test_noop_convert_is_idempotent(
    executor: ToolExecutor, fake_runner: object, source_file: Path, target_dir: Path
) -> None:
    """Return the same staged path twice and copy only once."""
    first = noop_convert(source_file, target_dir, executor)
    second = noop_convert(source_file, target_dir, executor)

    assert first == second == target_dir / "a.img"
    assert fake_runner.tools_called() == ["cp"]
