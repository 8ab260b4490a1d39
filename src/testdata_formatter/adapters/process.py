"""Subprocess-backed command runner."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence

from testdata_formatter.application.results import CommandResult
from testdata_formatter.errors import CommandError

logger = logging.getLogger(__name__)


class SubprocessCommandRunner:
    """Run commands via ``subprocess.run`` with an explicit argument vector.

    Stdout and stderr are merged into a single text stream. Calls block until
    the process exits; there is no timeout.
    """

    def run(self, argv: Sequence[str]) -> CommandResult:
        command = tuple(str(item) for item in argv)
        if not command:
            raise ValueError("argv must contain at least the executable name")
        logger.debug("running: %s", " ".join(command))
        try:
            completed = subprocess.run(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
                check=False,
            )
        except OSError as exc:
            raise CommandError(command[0], command[1:], None, str(exc)) from exc
        return CommandResult(
            argv=command,
            returncode=completed.returncode,
            output=completed.stdout or "",
        )
