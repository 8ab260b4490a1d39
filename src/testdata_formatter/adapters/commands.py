"""Tool execution helpers shared by the conversion functions."""

from __future__ import annotations

import logging
from pathlib import Path

from testdata_formatter.adapters.process import SubprocessCommandRunner
from testdata_formatter.application.options import ToolConfig
from testdata_formatter.application.ports import CommandRunner
from testdata_formatter.errors import CommandError, OutputVerificationError

logger = logging.getLogger(__name__)


class ToolExecutor:
    """Resolve logical tool names to executables and run them.

    Parameters
    ----------
    runner : CommandRunner | None, default=None
        Process runner. Defaults to :class:`SubprocessCommandRunner`.
    tools : ToolConfig | None, default=None
        Executable mapping. Defaults to ``ToolConfig.from_env()``.
    """

    def __init__(
        self,
        runner: CommandRunner | None = None,
        tools: ToolConfig | None = None,
    ) -> None:
        self.runner = runner or SubprocessCommandRunner()
        self.tools = tools or ToolConfig.from_env()

    def run(self, tool: str, *args: str | Path) -> None:
        """Run ``tool`` with ``args``; raise ``CommandError`` on non-zero exit."""
        executable = self.tools.executable(tool)
        str_args = [str(arg) for arg in args]
        result = self.runner.run([executable, *str_args])
        if not result.ok:
            raise CommandError(executable, str_args, result.returncode, result.output)

    def run_and_verify(self, target: Path, tool: str, *args: str | Path) -> None:
        """Run ``tool`` and confirm that ``target`` exists afterward.

        Raises
        ------
        CommandError
            If the tool fails.
        OutputVerificationError
            If the tool exits zero but ``target`` is missing.
        """
        self.run(tool, *args)
        try:
            target.stat()
        except OSError as exc:
            raise OutputVerificationError(target) from exc
        logger.debug("verified output %s", target)
