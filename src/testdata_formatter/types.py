"""Shared type aliases for formatter modules."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from os import PathLike
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from testdata_formatter.adapters.commands import ToolExecutor

type PathLikeStr = str | PathLike[str]
type FormatToken = str
type ConversionFunc = Callable[[Path, Path, "ToolExecutor"], Path]
type FormatTable = Mapping[FormatToken, ConversionFunc]
