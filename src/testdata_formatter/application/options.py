"""Typed configuration objects shared across formatting use-cases."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields

ENV_PREFIX = "TESTDATA_FORMATTER_"


@dataclass(frozen=True)
class ToolConfig:
    """Executables used for each external tool.

    Defaults are bare names resolved through ``PATH`` by the OS.
    """

    tar: str = "tar"
    gzip: str = "gzip"
    xz: str = "xz"
    qemu_img: str = "qemu-img"
    cp: str = "cp"

    def executable(self, tool: str) -> str:
        """Return the configured executable for a logical tool name.

        Parameters
        ----------
        tool : str
            Logical tool name, e.g. ``"qemu-img"`` or ``"qemu_img"``.

        Returns
        -------
        str
            Executable name or path.

        Raises
        ------
        KeyError
            If ``tool`` is not a known tool.
        """
        attr = tool.replace("-", "_")
        if attr not in self.tool_names():
            raise KeyError(f"unknown tool {tool!r}")
        return getattr(self, attr)

    @classmethod
    def tool_names(cls) -> tuple[str, ...]:
        return tuple(field.name for field in fields(cls))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ToolConfig:
        """Build config from ``TESTDATA_FORMATTER_<TOOL>`` overrides.

        Empty values are ignored.
        """
        env = os.environ if environ is None else environ
        overrides: dict[str, str] = {}
        for name in cls.tool_names():
            value = env.get(f"{ENV_PREFIX}{name.upper()}", "").strip()
            if value:
                overrides[name] = value
        return cls(**overrides)
