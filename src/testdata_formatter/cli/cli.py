#!/usr/bin/env python3
"""
testdata_formatter.cli.cli

Typer-based CLI for preparing test fixtures through archive/image formats.

Examples
--------
Install core + CLI:

    uv pip install -e ".[cli]"

Gzip then tar a disk image into a scratch directory:

    format-test-data convert disk.img /tmp/t --format .gz --format .tar
"""

from __future__ import annotations

import logging
import shutil
import sys
import traceback
from pathlib import Path

import typer

from testdata_formatter.errors import FormatterError

app = typer.Typer(
    name="format-test-data",
    help="Convert test fixtures through tar/gzip/xz/qcow2 formats.",
    no_args_is_help=True,
)

TOOLS = ("tar", "gzip", "xz", "qemu-img", "cp")


def _print_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly error and return the process exit code."""
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    return 1


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False, "--debug", help="Show full tracebacks and debug logging."
    ),
) -> None:
    """Initialize shared CLI state."""
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    source_path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Fixture file to convert.",
    ),
    target_dir: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=False,
        writable=True,
        help="Directory receiving every artifact.",
    ),
    formats: list[str] | None = typer.Option(
        None,
        "--format",
        "-f",
        help="Format token applied in order (repeatable), e.g. .gz, .tar, .qcow2.",
    ),
) -> None:
    """Run the format pipeline and print the final artifact path."""
    debug: bool = bool(ctx.obj.get("debug", False))
    try:
        from testdata_formatter.api import build_executor, format_test_data

        out = format_test_data(
            source_path,
            target_dir,
            *(formats or []),
            executor=build_executor(),
        )
        typer.echo(str(out))
    except FormatterError as exc:
        raise typer.Exit(code=_print_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_error(exc, debug))


@app.command("formats")
def formats_cmd() -> None:
    """List recognized format tokens."""
    from testdata_formatter.registry import format_names

    for name in format_names():
        typer.echo(name if name else '""  (no-op)')


@app.command("doctor")
def doctor_cmd() -> None:
    """Print Python version and resolved external tool paths."""
    from testdata_formatter.application.options import ToolConfig

    tools = ToolConfig.from_env()
    typer.echo(f"Python: {sys.version.split()[0]}")
    for tool in TOOLS:
        executable = tools.executable(tool)
        resolved = shutil.which(executable)
        typer.echo(f"{tool}: {resolved or '<not found>'}")


if __name__ == "__main__":
    app()
